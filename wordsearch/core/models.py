"""Data models shared by the placement engine and the selection matcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .constants import Direction


Grid = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True, order=True)
class CellPosition:
    """A 0-indexed grid coordinate."""

    row: int
    col: int

    def to_jsonable(self) -> dict:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class WordPlacement:
    """Where a word ended up in the grid."""

    word: str
    start: CellPosition
    end: CellPosition
    direction: Direction
    _cells: Optional[Tuple[CellPosition, ...]] = field(default=None, repr=False, compare=False)

    @property
    def cells(self) -> Tuple[CellPosition, ...]:
        if self._cells is None:
            dr, dc = self.direction.step
            cells = tuple(
                CellPosition(self.start.row + dr * i, self.start.col + dc * i)
                for i in range(len(self.word))
            )
            object.__setattr__(self, "_cells", cells)
        return self._cells  # type: ignore[return-value]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": self.start.to_jsonable(),
            "end": self.end.to_jsonable(),
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class PuzzleData:
    """A finished puzzle: letter grid, placements and the target word list.

    ``word_list`` only holds words that were actually placed, so it is the
    list the player has to find, not the list that was requested.
    """

    grid: Grid
    words: Tuple[WordPlacement, ...]
    word_list: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.grid)

    def letter(self, cell: CellPosition) -> str:
        return self.grid[cell.row][cell.col]

    def to_jsonable(self) -> dict:
        return {
            "grid": [list(row) for row in self.grid],
            "words": [placement.to_jsonable() for placement in self.words],
            "wordList": list(self.word_list),
        }


@dataclass(frozen=True)
class MatchResult:
    """Outcome of resolving one selection against the target words."""

    matched_word: Optional[str] = None
    covered_cells: Tuple[CellPosition, ...] = ()

    @property
    def is_match(self) -> bool:
        return self.matched_word is not None


NO_MATCH = MatchResult()


def freeze_grid(rows: Sequence[Sequence[str]]) -> Grid:
    return tuple(tuple(row) for row in rows)


def cells_between(start: CellPosition, end: CellPosition) -> List[CellPosition]:
    """Cells on the straight path from ``start`` to ``end`` inclusive.

    Returns an empty list when the two cells are not on a horizontal,
    vertical or 45 degree line.
    """

    delta_r = end.row - start.row
    delta_c = end.col - start.col
    if delta_r != 0 and delta_c != 0 and abs(delta_r) != abs(delta_c):
        return []
    dr = (delta_r > 0) - (delta_r < 0)
    dc = (delta_c > 0) - (delta_c < 0)
    steps = max(abs(delta_r), abs(delta_c))
    return [CellPosition(start.row + dr * i, start.col + dc * i) for i in range(steps + 1)]
