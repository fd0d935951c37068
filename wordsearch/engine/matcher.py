"""Straight-line selection matching against the target word list."""

from __future__ import annotations

from typing import AbstractSet, List, Sequence

from ..core.models import NO_MATCH, CellPosition, MatchResult, cells_between
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def is_straight_line(start: CellPosition, end: CellPosition) -> bool:
    """Horizontal, vertical or exact 45 degree diagonal."""

    delta_r = end.row - start.row
    delta_c = end.col - start.col
    return delta_r == 0 or delta_c == 0 or abs(delta_r) == abs(delta_c)


def selection_path(
    grid: Sequence[Sequence[str]], start: CellPosition, end: CellPosition
) -> List[CellPosition]:
    """Cells covered by a selection, or an empty list for a crooked or off-grid one."""

    size = len(grid)
    cells = cells_between(start, end)
    for cell in (start, end):
        if not (0 <= cell.row < size and 0 <= cell.col < len(grid[cell.row])):
            return []
    return cells


def read_path(grid: Sequence[Sequence[str]], cells: Sequence[CellPosition]) -> str:
    return "".join(grid[cell.row][cell.col] for cell in cells)


def resolve_selection(
    grid: Sequence[Sequence[str]],
    word_list: Sequence[str],
    found_words: AbstractSet[str],
    start: CellPosition,
    end: CellPosition,
) -> MatchResult:
    """Match the letters between ``start`` and ``end`` against unfound words.

    The forward reading is checked before the reversed one. Nothing passed in
    is modified; the caller records the match in its own found-word and
    revealed-cell sets.
    """

    cells = selection_path(grid, start, end)
    if not cells:
        return NO_MATCH

    forward = read_path(grid, cells)
    for candidate in (forward, forward[::-1]):
        if candidate in word_list and candidate not in found_words:
            LOGGER.debug("Selection %s -> %s matched '%s'", start, end, candidate)
            return MatchResult(matched_word=candidate, covered_cells=tuple(cells))
    return NO_MATCH
