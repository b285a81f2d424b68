from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import config


class Action(Enum):
    # OO rationale: Domain vocabulary for player intents. The values are the
    # exact characters typed at the prompt, so parsing is a plain lookup.
    FIGHT = "f"
    RUN = "r"

    @classmethod
    def from_input(cls, choice: str) -> Optional["Action"]:
        """Map a typed character to an Action; unknown input maps to None."""
        try:
            return cls(choice)
        except ValueError:
            return None


class MonsterType(Enum):
    # OO rationale: Catalog index for monster archetypes. Declaration order is
    # the catalog order, which the random selector relies on.
    DRAGON = 0
    ORC = 1
    SLIME = 2


class EncounterOutcome(Enum):
    ESCAPED = auto()
    MONSTER_DEAD = auto()
    PLAYER_DEAD = auto()


class GameOutcome(Enum):
    VICTORY = auto()
    DEFEAT = auto()


@dataclass
class Creature:
    # OO rationale: Plain value holding the stats every combatant shares.
    # Player and Monster embed one instead of inheriting, so combat math only
    # ever touches this type.
    name: str
    symbol: str
    health: int
    damage: int
    gold: int

    def reduce_health(self, amount: int) -> None:
        """Subtract ``amount`` from health. Health may drop below zero."""
        self.health -= amount

    def is_dead(self) -> bool:
        return self.health <= 0

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def take_gold(self) -> int:
        """Empty this creature's purse and return what was in it."""
        carried_gold = self.gold
        self.gold = 0
        return carried_gold


@dataclass
class Player:
    # OO rationale: The one persistent combatant. Adds progression (level) on
    # top of the shared Creature stats and owns the win/loss predicates.
    creature: Creature
    level: int = config.PLAYER_STARTING_LEVEL

    @classmethod
    def create(cls, name: str) -> "Player":
        """Build a fresh player with the fixed starting stats."""
        return cls(
            creature=Creature(
                name=name,
                symbol=config.PLAYER_SYMBOL,
                health=config.PLAYER_STARTING_HEALTH,
                damage=config.PLAYER_STARTING_DAMAGE,
                gold=config.PLAYER_STARTING_GOLD,
            )
        )

    @property
    def name(self) -> str:
        return self.creature.name

    @property
    def health(self) -> int:
        return self.creature.health

    @property
    def damage(self) -> int:
        return self.creature.damage

    @property
    def gold(self) -> int:
        return self.creature.gold

    def level_up(self) -> None:
        self.level += 1
        self.creature.damage += 1

    def has_won(self) -> bool:
        return self.level >= config.WINNING_LEVEL

    def has_lost(self) -> bool:
        return self.creature.is_dead()


@dataclass
class Monster:
    # OO rationale: Per-encounter adversary. The archetype tag is kept next
    # to the stats so narration and tests can tell which template built it.
    archetype: MonsterType
    creature: Creature

    @property
    def name(self) -> str:
        return self.creature.name

    @property
    def symbol(self) -> str:
        return self.creature.symbol

    @property
    def health(self) -> int:
        return self.creature.health

    @property
    def damage(self) -> int:
        return self.creature.damage

    @property
    def gold(self) -> int:
        return self.creature.gold

    def is_dead(self) -> bool:
        return self.creature.is_dead()


@dataclass(frozen=True)
class MonsterTemplate:
    """Fixed stats for one monster archetype.

    OO rationale: Data model for the monster catalog, validated once at
    construction so a bad table row fails at import time rather than
    mid-fight.
    """
    name: str
    symbol: str
    health: int
    damage: int
    gold: int

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError(f"Symbol must be a single character, got {self.symbol!r}")
        if self.health <= 0:
            raise ValueError(f"Health must be positive, got {self.health}")
        if self.damage < 0:
            raise ValueError(f"Damage must be non-negative, got {self.damage}")
        if self.gold < 0:
            raise ValueError(f"Gold must be non-negative, got {self.gold}")

    def build_creature(self) -> Creature:
        return Creature(
            name=self.name,
            symbol=self.symbol,
            health=self.health,
            damage=self.damage,
            gold=self.gold,
        )
