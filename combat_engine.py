"""Combat system engine for the monster fight game.

This module handles all combat-related logic: resolving attacks in both
directions, loot and level-up on a kill, escape attempts, and the
per-encounter run/fight loop.
"""

from __future__ import annotations

from typing import Optional

import config
import ui
from game_logging import get_logger
from models import Action, EncounterOutcome, Monster, Player
from monster_generator import MonsterGenerator
from narrative_engine import NarrativeEngine
from utils import RandomProvider

logger = get_logger(__name__)


class CombatEngine:
    """Handles all combat mechanics and the encounter loop.

    OO rationale: Separates combat concerns from game orchestration. This class
    encapsulates combat rules and combat flow, making it easier to test and
    modify combat mechanics.
    """

    def __init__(
        self,
        narrative_engine: NarrativeEngine,
        random_provider: RandomProvider,
        console_input: ui.ConsoleInput,
        monster_generator: Optional[MonsterGenerator] = None,
    ) -> None:
        """Initialize the combat engine.

        Args:
            narrative_engine: The narrative engine for combat descriptions
            random_provider: Random number generator for escape rolls
            console_input: Where run/fight choices are read from
            monster_generator: Monster factory; built on ``random_provider`` when None
        """
        self.narrative_engine = narrative_engine
        self.random_provider = random_provider
        self.console_input = console_input
        self.monster_generator = monster_generator or MonsterGenerator(random_provider)

    def attack_player(self, player: Player, monster: Monster) -> None:
        """The monster hits the player once. Death is checked by the caller."""
        player.creature.reduce_health(monster.damage)
        self.narrative_engine.describe_monster_hit(monster, monster.damage)

    def attack_monster(self, player: Player, monster: Monster) -> None:
        """The player hits the monster; a survivor strikes back immediately.

        On a kill the player levels up and takes all of the monster's gold.

        Args:
            player: The attacking player
            monster: The monster being attacked
        """
        monster.creature.reduce_health(player.damage)
        self.narrative_engine.describe_player_hit(monster, player.damage)

        if monster.is_dead():
            self.narrative_engine.describe_kill(monster)
            player.level_up()
            self.narrative_engine.describe_level_up(player)
            loot = monster.creature.take_gold()
            player.creature.add_gold(loot)
            self.narrative_engine.describe_gold_found(loot)
        else:
            self.attack_player(player, monster)

    def attempt_escape(self, player: Player, monster: Monster) -> bool:
        """Flip the escape coin; on failure the monster gets a free attack.

        Returns:
            True if the player got away
        """
        roll = self.random_provider.random_in_range(config.ESCAPE_ROLL_MIN, config.ESCAPE_ROLL_MAX)
        ui.print_debug("attempt_escape", f"roll = {roll}")
        escaped = roll == config.ESCAPE_SUCCESS_ROLL
        self.narrative_engine.describe_flee(escaped, monster)
        if not escaped:
            self.attack_player(player, monster)
        return escaped

    def resolve_choice(self, player: Player, monster: Monster, choice: str) -> Optional[EncounterOutcome]:
        """Apply one typed choice to the encounter.

        Args:
            player: The player in combat
            monster: The monster being fought
            choice: The character read at the prompt

        Returns:
            The terminal outcome, or None while the encounter goes on
        """
        action = Action.from_input(choice)
        if action is None:
            # Unrecognised input changes nothing; the caller re-prompts
            return None

        if action == Action.RUN and self.attempt_escape(player, monster):
            return EncounterOutcome.ESCAPED
        if action == Action.FIGHT:
            self.attack_monster(player, monster)

        if player.has_lost():
            return EncounterOutcome.PLAYER_DEAD
        if monster.is_dead():
            return EncounterOutcome.MONSTER_DEAD
        return None

    def run_encounter(self, player: Player, monster: Monster) -> EncounterOutcome:
        """Run the run/fight loop against one monster until it resolves.

        Raises:
            EOFError: If input ends before the encounter resolves
        """
        self.narrative_engine.describe_encounter(monster)
        ui.render_status(player, monster)

        outcome: Optional[EncounterOutcome] = None
        while outcome is None:
            ui.prompt(config.CHOICE_PROMPT)
            choice = self.console_input.read_char()
            outcome = self.resolve_choice(player, monster, choice)

        logger.debug("Encounter with %s ended: %s", monster.name, outcome.name)
        return outcome

    def fight_monster(self, player: Player) -> bool:
        """Spawn one monster and fight it out.

        Returns:
            True if the player escaped, False if someone died
        """
        monster = self.monster_generator.generate_monster()
        return self.run_encounter(player, monster) == EncounterOutcome.ESCAPED
