"""Mutable letter grid used while a puzzle is being built."""

from __future__ import annotations

import random
from typing import Iterator, List, Tuple

from ..core.constants import ALPHABET, Bounds, Direction
from ..core.exceptions import PlacementError
from ..core.models import CellPosition, Grid, WordPlacement, freeze_grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

EMPTY = ""


class LetterGrid:
    """Square grid of letters with placement helpers.

    Cells start empty. Placements only ever write into empty cells, so a
    letter, once written, is never overwritten. ``freeze`` returns the
    immutable tuple form handed to callers.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(size)
        self.cells: List[List[str]] = [[EMPTY] * size for _ in range(size)]
        self.placements: List[WordPlacement] = []
        self._filled_count = 0

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @staticmethod
    def path(row: int, col: int, direction: Direction, length: int) -> Iterator[Tuple[int, int]]:
        dr, dc = direction.step
        for i in range(length):
            yield row + dr * i, col + dc * i

    def end_of(self, row: int, col: int, direction: Direction, length: int) -> Tuple[int, int]:
        dr, dc = direction.step
        return row + dr * (length - 1), col + dc * (length - 1)

    def fits(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """True when ``word`` stays in bounds and only covers empty cells."""

        if not word or not self.bounds.contains(row, col):
            return False
        end_row, end_col = self.end_of(row, col, direction, len(word))
        if not self.bounds.contains(end_row, end_col):
            return False
        return all(
            self.cells[r][c] == EMPTY for r, c in self.path(row, col, direction, len(word))
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(self, word: str, row: int, col: int, direction: Direction) -> WordPlacement:
        if not self.fits(word, row, col, direction):
            raise PlacementError(
                f"'{word}' does not fit at ({row},{col}) going {direction.value}"
            )
        for letter, (r, c) in zip(word, self.path(row, col, direction, len(word))):
            self.cells[r][c] = letter
        self._filled_count += len(word)

        end_row, end_col = self.end_of(row, col, direction, len(word))
        placement = WordPlacement(
            word=word,
            start=CellPosition(row, col),
            end=CellPosition(end_row, end_col),
            direction=direction,
        )
        self.placements.append(placement)
        return placement

    def fill_empty(self, rng: random.Random, alphabet: str = ALPHABET) -> int:
        """Write a random filler letter into every empty cell."""

        filled = 0
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] == EMPTY:
                    self.cells[r][c] = rng.choice(alphabet)
                    filled += 1
        LOGGER.debug("Filled %d empty cells with random letters", filled)
        return filled

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def read(self, row: int, col: int, direction: Direction, length: int) -> str:
        return "".join(self.cells[r][c] for r, c in self.path(row, col, direction, length))

    @property
    def filled_ratio(self) -> float:
        return self._filled_count / (self.size * self.size)

    def is_complete(self) -> bool:
        return all(letter != EMPTY for row in self.cells for letter in row)

    def freeze(self) -> Grid:
        if not self.is_complete():
            raise PlacementError("Cannot freeze a grid with empty cells")
        return freeze_grid(self.cells)
