"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from ..core.constants import ALPHABET
from ..core.exceptions import ValidationError
from ..core.models import PuzzleData, WordPlacement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate(
        self, puzzle: PuzzleData, requested_words: Optional[Sequence[str]] = None
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_square(puzzle)
            self._check_letters_valid(puzzle)
            self._check_word_list(puzzle, requested_words)
            self._check_placements(puzzle)
            self._check_no_shared_cells(puzzle)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_square(self, puzzle: PuzzleData) -> None:
        size = len(puzzle.grid)
        for r, row in enumerate(puzzle.grid):
            if len(row) != size:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {size}")

    def _check_letters_valid(self, puzzle: PuzzleData) -> None:
        for r, row in enumerate(puzzle.grid):
            for c, letter in enumerate(row):
                if len(letter) != 1 or letter not in ALPHABET:
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_word_list(self, puzzle: PuzzleData, requested_words: Optional[Sequence[str]]) -> None:
        if len(set(puzzle.word_list)) != len(puzzle.word_list):
            raise ValidationError(f"Duplicate entries in word list {list(puzzle.word_list)}")
        placed = [placement.word for placement in puzzle.words]
        if placed != list(puzzle.word_list):
            raise ValidationError("Word list does not match the recorded placements")
        if requested_words is not None:
            extra = set(puzzle.word_list) - set(requested_words)
            if extra:
                raise ValidationError(f"Placed words were never requested: {sorted(extra)}")

    def _check_placements(self, puzzle: PuzzleData) -> None:
        size = len(puzzle.grid)
        for placement in puzzle.words:
            cells = placement.cells
            if cells[-1] != placement.end:
                raise ValidationError(
                    f"'{placement.word}' ends at {cells[-1]} but records {placement.end}"
                )
            for cell in cells:
                if not (0 <= cell.row < size and 0 <= cell.col < size):
                    raise ValidationError(f"'{placement.word}' leaves the grid at {cell}")
            text = "".join(puzzle.grid[cell.row][cell.col] for cell in cells)
            if text != placement.word:
                raise ValidationError(
                    f"'{placement.word}' reads back as '{text}' from {placement.start}"
                )

    @staticmethod
    def _check_no_shared_cells(puzzle: PuzzleData) -> None:
        seen: Set = set()
        for placement in puzzle.words:
            overlap = seen.intersection(placement.cells)
            if overlap:
                raise ValidationError(
                    f"'{placement.word}' shares cells {sorted(overlap)} with another word"
                )
            seen.update(placement.cells)


def placement_fidelity(puzzle: PuzzleData, placement: WordPlacement) -> bool:
    """True when ``placement`` reads back exactly along its path."""

    return "".join(puzzle.letter(cell) for cell in placement.cells) == placement.word
