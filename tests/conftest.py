"""Pytest configuration and fixtures."""

import io
from typing import List

import pytest
from rich.console import Console

import ui
from combat_engine import CombatEngine
from models import Creature, Monster, MonsterType, Player
from monster_generator import MonsterGenerator
from narrative_engine import NarrativeEngine


class ScriptedRandomProvider:
    """Returns pre-set values in order and records every requested range."""

    def __init__(self, values: List[int]) -> None:
        self.values = list(values)
        self.calls = []

    def random_in_range(self, minimum: int, maximum: int) -> int:
        self.calls.append((minimum, maximum))
        if not self.values:
            raise AssertionError(f"No scripted value left for range [{minimum}, {maximum}]")
        value = self.values.pop(0)
        assert minimum <= value <= maximum
        return value


def make_input(text: str) -> ui.ConsoleInput:
    return ui.ConsoleInput(io.StringIO(text))


@pytest.fixture
def hero():
    """A fresh level 1 player named Hero."""
    return Player.create("Hero")


@pytest.fixture
def slime():
    return MonsterGenerator(ScriptedRandomProvider([])).instantiate(MonsterType.SLIME)


@pytest.fixture
def orc():
    return MonsterGenerator(ScriptedRandomProvider([])).instantiate(MonsterType.ORC)


@pytest.fixture
def dragon():
    return MonsterGenerator(ScriptedRandomProvider([])).instantiate(MonsterType.DRAGON)


@pytest.fixture
def build_combat_engine():
    """Factory for a combat engine fed by scripted dice and typed input."""
    def _build(rolls=(), typed=""):
        provider = ScriptedRandomProvider(list(rolls))
        return CombatEngine(NarrativeEngine(), provider, make_input(typed))
    return _build


def make_monster(name="training dummy", symbol="t", health=5, damage=1, gold=3):
    return Monster(
        archetype=MonsterType.SLIME,
        creature=Creature(name=name, symbol=symbol, health=health, damage=damage, gold=gold),
    )


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Route game text through an uncoloured console so output compares as plain text."""
    monkeypatch.setattr(ui, "console", Console(highlight=False, color_system=None))
