"""Monster generation system for the monster fight game.

This module holds the fixed monster catalog and picks a random archetype for
each encounter.
"""

from __future__ import annotations

from typing import Dict

from game_logging import get_logger
from models import Monster, MonsterTemplate, MonsterType
from utils import RandomProvider

logger = get_logger(__name__)


class MonsterGenerator:
    """Builds monsters from the fixed archetype table.

    OO rationale: Factory responsible for building fully-formed Monster
    instances from templates. Centralizes the catalog and the random pick and
    keeps creation logic out of the encounter loop.
    """

    TEMPLATES: Dict[MonsterType, MonsterTemplate] = {
        MonsterType.DRAGON: MonsterTemplate(name="dragon", symbol="D", health=20, damage=4, gold=100),
        MonsterType.ORC: MonsterTemplate(name="orc", symbol="o", health=4, damage=2, gold=25),
        MonsterType.SLIME: MonsterTemplate(name="slime", symbol="s", health=1, damage=1, gold=10),
    }

    def __init__(self, random_provider: RandomProvider) -> None:
        self.random_provider = random_provider
        self._archetypes = list(MonsterType)

    def template_for(self, archetype: MonsterType) -> MonsterTemplate:
        try:
            return self.TEMPLATES[archetype]
        except KeyError:
            raise ValueError(f"Unknown monster archetype: {archetype!r}") from None

    def random_archetype(self) -> MonsterType:
        """Pick one archetype uniformly at random."""
        index = self.random_provider.random_in_range(0, len(self._archetypes) - 1)
        return self._archetypes[index]

    def instantiate(self, archetype: MonsterType) -> Monster:
        """Create a fresh monster with the archetype's fixed stats.

        Args:
            archetype: Which catalog row to build from

        Returns:
            A new Monster; nothing is shared with earlier instances
        """
        template = self.template_for(archetype)
        return Monster(archetype=archetype, creature=template.build_creature())

    def generate_monster(self) -> Monster:
        monster = self.instantiate(self.random_archetype())
        logger.debug("Spawned %s", monster.name)
        return monster
