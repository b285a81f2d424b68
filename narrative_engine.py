"""Narrative text for the monster fight game.

This module owns every descriptive line the game prints: encounters,
attacks, kills, escapes and the final result. Combat code decides what
happened; this module decides how it reads.
"""

from __future__ import annotations

import ui
from models import Monster, Player


class NarrativeEngine:
    """Formats and displays narrative lines.

    OO rationale: Separates narrative concerns from game logic. Combat and
    game flow call one method per event and never build strings themselves,
    so the wording can change without touching the rules.
    """

    def narrate(self, text: str, style: str = "") -> None:
        """Display one narrative line."""
        ui.show(text, style=style)

    def welcome(self, player_name: str) -> None:
        self.narrate(f"Welcome, {player_name}", style="bold")

    def describe_encounter(self, monster: Monster) -> None:
        self.narrate("")
        self.narrate(f"[You have encountered a/an {monster.name} ({monster.symbol}).]", style="bold yellow")

    def describe_player_hit(self, monster: Monster, damage: int) -> None:
        self.narrate(f"You hit the {monster.name} for {damage} damage.")

    def describe_monster_hit(self, monster: Monster, damage: int) -> None:
        self.narrate(f"The {monster.name} hit you for {damage} damage.", style="red")

    def describe_kill(self, monster: Monster) -> None:
        self.narrate(f"You killed the {monster.name}.", style="green")

    def describe_level_up(self, player: Player) -> None:
        self.narrate(f"You are now level {player.level}.", style="green")

    def describe_gold_found(self, gold: int) -> None:
        self.narrate(f"You found {gold} gold.", style="yellow")

    def describe_flee(self, succeeded: bool, monster: Monster) -> None:
        """Narrate the result of a run attempt."""
        if succeeded:
            self.narrate(f"You escaped the {monster.name}.")
        else:
            self.narrate(f"You couldn't escape the {monster.name}.")

    def describe_death(self, player: Player) -> None:
        self.narrate(
            f"You died at level {player.level} and with {player.gold} gold.",
            style="bold red",
        )

    def describe_victory(self, player: Player) -> None:
        self.narrate(f"You won! You had {player.gold} gold.", style="bold green")
