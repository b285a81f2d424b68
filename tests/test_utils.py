"""Tests for the clock-seeded random source."""

from collections import Counter

import pytest

from utils import DefaultRandomProvider


def test_values_stay_inside_inclusive_range():
    provider = DefaultRandomProvider(seed=1234)
    draws = [provider.random_in_range(3, 7) for _ in range(2000)]
    assert min(draws) == 3
    assert max(draws) == 7
    assert all(3 <= value <= 7 for value in draws)


def test_single_value_range_always_returns_that_value():
    provider = DefaultRandomProvider(seed=99)
    assert {provider.random_in_range(5, 5) for _ in range(50)} == {5}


def test_distribution_is_roughly_uniform():
    provider = DefaultRandomProvider(seed=2024)
    counts = Counter(provider.random_in_range(1, 6) for _ in range(30000))
    assert set(counts) == {1, 2, 3, 4, 5, 6}
    for face in range(1, 7):
        assert 4250 < counts[face] < 5750


def test_coin_flip_lands_on_both_sides():
    provider = DefaultRandomProvider(seed=7)
    flips = Counter(provider.random_in_range(0, 1) for _ in range(1000))
    assert 400 < flips[0] < 600
    assert 400 < flips[1] < 600


def test_same_seed_replays_same_sequence():
    first = DefaultRandomProvider(seed=42)
    second = DefaultRandomProvider(seed=42)
    assert [first.random_in_range(0, 100) for _ in range(20)] == [
        second.random_in_range(0, 100) for _ in range(20)
    ]


def test_seed_defaults_to_wall_clock(monkeypatch):
    monkeypatch.setattr("utils.time.time", lambda: 1700000000.75)
    provider = DefaultRandomProvider()
    assert provider.seed == 1700000000


def test_empty_range_is_rejected():
    provider = DefaultRandomProvider(seed=1)
    with pytest.raises(ValueError):
        provider.random_in_range(2, 1)
