from __future__ import annotations

from typing import Optional

import config
import ui
from combat_engine import CombatEngine
from game_logging import get_logger
from models import GameOutcome, Player
from monster_generator import MonsterGenerator
from narrative_engine import NarrativeEngine
from utils import DefaultRandomProvider, RandomProvider

logger = get_logger(__name__)


class GameEngine:
    # OO rationale: Orchestrator for the game flow. It coordinates services
    # (narration, RNG, monster factory, combat) and owns session state (the
    # player). Win and loss are decided here, never inside an encounter.
    """Main orchestrator: one player, encounters until death or victory."""

    def __init__(
        self,
        random_provider: Optional[RandomProvider] = None,
        console_input: Optional[ui.ConsoleInput] = None,
        narrative_engine: Optional[NarrativeEngine] = None,
    ) -> None:
        """Initialize the game and its collaborators.

        Args:
            random_provider: Random source; a clock-seeded one when None
            console_input: Input reader; stdin when None
            narrative_engine: Narration; the default console narration when None
        """
        self.random_provider: RandomProvider = random_provider or DefaultRandomProvider()
        self.console_input = console_input or ui.ConsoleInput()
        self.narrative_engine = narrative_engine or NarrativeEngine()
        self.monster_generator = MonsterGenerator(self.random_provider)
        self.combat_engine = CombatEngine(
            self.narrative_engine,
            self.random_provider,
            self.console_input,
            monster_generator=self.monster_generator,
        )
        self.player: Optional[Player] = None
        self.encounters_played: int = 0

    def create_player(self) -> Player:
        ui.prompt(config.NAME_PROMPT)
        player_name = self.console_input.read_token()
        self.narrative_engine.welcome(player_name)
        return Player.create(player_name)

    def start_game(self) -> GameOutcome:
        """Play until the player dies or reaches the winning level.

        Returns:
            GameOutcome.VICTORY or GameOutcome.DEFEAT

        Raises:
            EOFError: If input ends mid-game
        """
        self.player = self.create_player()
        player = self.player

        while True:
            self.encounters_played += 1
            escaped = self.combat_engine.fight_monster(player)
            ui.print_debug("start_game", f"encounters_played = {self.encounters_played}")
            if escaped:
                continue

            if player.has_lost():
                self.narrative_engine.describe_death(player)
                return GameOutcome.DEFEAT

            if player.has_won():
                self.narrative_engine.describe_victory(player)
                return GameOutcome.VICTORY
