# Tuning constants for the monster fight game
from __future__ import annotations

import logging

# Player starting values
PLAYER_SYMBOL: str = "@"
PLAYER_STARTING_HEALTH: int = 10
PLAYER_STARTING_DAMAGE: int = 1
PLAYER_STARTING_GOLD: int = 0
PLAYER_STARTING_LEVEL: int = 1

# Reaching this level after a kill wins the game
WINNING_LEVEL: int = 20

# Running away: a coin is drawn from [ESCAPE_ROLL_MIN, ESCAPE_ROLL_MAX]
ESCAPE_ROLL_MIN: int = 0
ESCAPE_ROLL_MAX: int = 1
ESCAPE_SUCCESS_ROLL: int = 1  # 50% with the range above

# Random source: number of bits in one raw draw
RAND_BITS: int = 31

# Console
STATUS_TABLE_WIDTH: int = 80
NAME_PROMPT: str = "Enter your name: "
CHOICE_PROMPT: str = "(R)un or (F)ight: "

# Logging goes to stderr so it never mixes with the game text
LOG_LEVEL: int = logging.WARNING
