from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from rich.console import Console
from rich.text import Text

import config
from game_logging import get_logger

# Global Rich console instance
console = Console(highlight=False)

logger = get_logger(__name__)


class ConsoleInput:
    """Whitespace-delimited reader over a text stream.

    Reads the way a C++ ``std::cin`` does: leading whitespace (newlines
    included) is skipped, and anything left on a line stays buffered for the
    next read. Typing ``ff`` therefore answers two prompts.

    OO rationale: Wraps the input stream so the game can be driven from a
    ``StringIO`` in tests and from stdin in play, with one place deciding what
    happens when the stream runs dry.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._buffer: List[str] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def _fill(self) -> None:
        """Refill the buffer until it holds a non-whitespace character.

        Raises:
            EOFError: If the stream is exhausted first
        """
        while not "".join(self._buffer).strip():
            line = self.stream.readline()
            if not line:
                raise EOFError("End of input")
            self._buffer = list(line)

    def _skip_whitespace(self) -> None:
        self._fill()
        while self._buffer[0].isspace():
            self._buffer.pop(0)

    def read_char(self) -> str:
        """Return the next non-whitespace character."""
        self._skip_whitespace()
        return self._buffer.pop(0)

    def read_token(self) -> str:
        """Return the next whitespace-delimited token."""
        self._skip_whitespace()
        chars: List[str] = []
        while self._buffer and not self._buffer[0].isspace():
            chars.append(self._buffer.pop(0))
        return "".join(chars)


def print_debug(context: str, message: str) -> None:
    """Log a debug line tagged with the calling context."""
    logger.debug("%s: %s", context, message)


def show(text: str, style: Optional[str] = None) -> None:
    """Print one line of game text.

    Args:
        text: The line to print, taken literally (no rich markup)
        style: Optional rich style for the whole line
    """
    console.print(Text(text, style=style or ""), soft_wrap=True)


def prompt(text: str) -> None:
    """Print a prompt without a trailing newline."""
    console.print(Text(text), end="", soft_wrap=True)


def render_status(player, monster) -> None:
    """Render the two-row player/monster status table.

    Args:
        player: Player instance (name, health, gold, damage, level)
        monster: Monster instance for the current encounter
    """
    width = config.STATUS_TABLE_WIDTH
    player_row = (
        f"|Player:{player.name}|\t"
        f"|Health:{player.health}|\t"
        f"|Gold:{player.gold}|\t"
        f"|Damage:{player.damage}|\t"
        f"|Level:{player.level}|"
    )
    monster_row = (
        f"|Monster:{monster.name}|\t"
        f"|Health:{monster.health}|\t"
        f"|Gold:{monster.gold}|\t"
        f"|Damage:{monster.damage}|\t"
        f"|Symbol:{monster.symbol}|"
    )
    show("_" * width, style="dim")
    show(player_row, style="bold cyan")
    show("-" * width, style="dim")
    show(monster_row, style="bold red")
    show("`" * width, style="dim")
