"""Shared constants and enumerations for the word search engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


ALPHABET = string.ascii_uppercase
MIN_WORD_LENGTH = 3
DEFAULT_PLACEMENT_ATTEMPTS = 100


class Difficulty(str, Enum):
    """Puzzle difficulty tiers."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"


class Direction(str, Enum):
    """Straight-line directions a word can be placed along."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal_down"
    DIAGONAL_UP = "diagonal_up"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}

ORTHOGONAL_DIRECTIONS: Tuple[Direction, ...] = (Direction.HORIZONTAL, Direction.VERTICAL)
ALL_DIRECTIONS: Tuple[Direction, ...] = ORTHOGONAL_DIRECTIONS + (
    Direction.DIAGONAL_DOWN,
    Direction.DIAGONAL_UP,
)


def candidate_directions(allow_diagonals: bool) -> Tuple[Direction, ...]:
    return ALL_DIRECTIONS if allow_diagonals else ORTHOGONAL_DIRECTIONS


@dataclass(frozen=True)
class WordRange:
    """Accepted word-count range for a difficulty tier."""

    min: int
    max: int

    def contains(self, count: int) -> bool:
        return self.min <= count <= self.max


GRID_SIZES: Dict[Difficulty, int] = {
    Difficulty.EASY: 10,
    Difficulty.MEDIUM: 15,
}

REQUIRED_WORDS: Dict[Difficulty, WordRange] = {
    Difficulty.EASY: WordRange(min=5, max=10),
    Difficulty.MEDIUM: WordRange(min=10, max=20),
}

ALLOW_DIAGONALS: Dict[Difficulty, bool] = {
    Difficulty.EASY: False,
    Difficulty.MEDIUM: True,
}


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
