"""Shared utilities and abstractions for the monster fight game.

This module contains the random number source used by the monster catalog
and the escape roll.
"""

from __future__ import annotations

import random
import time
from typing import Optional, Protocol

import config
from game_logging import get_logger

logger = get_logger(__name__)


class RandomProvider(Protocol):
    """Protocol for random number generation (for testability).

    OO rationale: Small RNG abstraction to make probabilistic systems
    deterministic in tests and swappable in production.
    """
    def random_in_range(self, minimum: int, maximum: int) -> int: ...


class DefaultRandomProvider:
    """Random source seeded once from the wall clock.

    Draws raw ``config.RAND_BITS``-bit integers and scales them into the
    requested range instead of taking a modulo, so every value in the range is
    equally likely.

    OO rationale: Owns the generator state explicitly; the game engine creates
    one instance per run and hands it to every collaborator that rolls dice.
    """

    _FRACTION = 1.0 / (1 << config.RAND_BITS)

    def __init__(self, seed: Optional[int] = None) -> None:
        """Seed the generator.

        Args:
            seed: Explicit seed; the current time in whole seconds when None
        """
        self.seed = int(time.time()) if seed is None else seed
        self._rng = random.Random(self.seed)
        # The first draw after seeding is discarded
        self._rng.getrandbits(config.RAND_BITS)
        logger.debug("Random source seeded with %d", self.seed)

    def random_in_range(self, minimum: int, maximum: int) -> int:
        """Return a uniformly distributed integer in [minimum, maximum].

        Args:
            minimum: Lowest value that can be returned
            maximum: Highest value that can be returned

        Returns:
            The drawn integer

        Raises:
            ValueError: If ``minimum`` is greater than ``maximum``
        """
        if minimum > maximum:
            raise ValueError(f"Empty range: minimum {minimum} is greater than maximum {maximum}")
        raw_draw = self._rng.getrandbits(config.RAND_BITS)
        return minimum + int((maximum - minimum + 1) * (raw_draw * self._FRACTION))
