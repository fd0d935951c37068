"""Play-session state: drag tracking, found words and revealed cells."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Set, Tuple

from ..core.models import NO_MATCH, CellPosition, MatchResult, PuzzleData
from ..utils.logger import get_logger
from .matcher import is_straight_line, resolve_selection, selection_path


LOGGER = get_logger(__name__)


class InteractionState(str, Enum):
    IDLE = "IDLE"
    DRAGGING = "DRAGGING"
    RESOLVING = "RESOLVING"


@dataclass(frozen=True)
class SelectionOutcome:
    """Result of committing one drag."""

    match: MatchResult = NO_MATCH
    completed_now: bool = False

    @property
    def matched_word(self) -> Optional[str]:
        return self.match.matched_word


class PuzzleSession:
    """Single-player state for one puzzle.

    Dragging has two phases. ``preview`` only computes cells to highlight.
    ``release`` resolves the selection and is the only call that changes
    the found words. Starting a new drag discards an uncommitted one.
    """

    def __init__(
        self,
        puzzle: PuzzleData,
        on_complete: Optional[Callable[["PuzzleSession"], None]] = None,
    ) -> None:
        self.puzzle = puzzle
        self.on_complete = on_complete
        self.found_words: Set[str] = set()
        self.revealed_cells: Set[CellPosition] = set()
        self.reveal_all = False
        self.state = InteractionState.IDLE
        self._completed = False
        self._drag_start: Optional[CellPosition] = None
        self._drag_end: Optional[CellPosition] = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Drag phases
    # ------------------------------------------------------------------
    def begin_drag(self, cell: CellPosition) -> List[CellPosition]:
        if self.state == InteractionState.DRAGGING:
            LOGGER.debug("New drag at %s cancels selection from %s", cell, self._drag_start)
        self._drag_start = cell
        self._drag_end = cell
        self.state = InteractionState.DRAGGING
        return [cell]

    def preview(self, cell: CellPosition) -> List[CellPosition]:
        """Cells to highlight while dragging over ``cell``.

        A crooked drag highlights just its two endpoints.
        """

        if self.state != InteractionState.DRAGGING or self._drag_start is None:
            return []
        self._drag_end = cell
        start = self._drag_start
        if not is_straight_line(start, cell):
            return [start, cell]
        return selection_path(self.puzzle.grid, start, cell)

    def release(self, cell: Optional[CellPosition] = None) -> SelectionOutcome:
        """Commit the drag, ending at ``cell`` or at the last previewed cell."""

        if self.state != InteractionState.DRAGGING or self._drag_start is None:
            return SelectionOutcome()
        start = self._drag_start
        end = cell or self._drag_end or start
        self.state = InteractionState.RESOLVING
        try:
            with self._lock:
                match = resolve_selection(
                    self.puzzle.grid, self.puzzle.word_list, self.found_words, start, end
                )
                completed_now = self._commit(match)
        finally:
            self.cancel_drag()
        if completed_now and self.on_complete is not None:
            self.on_complete(self)
        return SelectionOutcome(match=match, completed_now=completed_now)

    def cancel_drag(self) -> None:
        self._drag_start = None
        self._drag_end = None
        self.state = InteractionState.IDLE

    def select(self, start: CellPosition, end: CellPosition) -> SelectionOutcome:
        """Begin and release a drag in one call."""

        self.begin_drag(start)
        return self.release(end)

    def _commit(self, match: MatchResult) -> bool:
        if not match.is_match:
            return False
        self.found_words.add(match.matched_word)  # type: ignore[arg-type]
        self.revealed_cells.update(match.covered_cells)
        LOGGER.info(
            "Found '%s' (%d/%d)", match.matched_word, len(self.found_words), len(self.puzzle.word_list)
        )
        if not self._completed and self._all_found():
            self._completed = True
            LOGGER.info("Puzzle completed")
            return True
        return False

    # ------------------------------------------------------------------
    # Session controls
    # ------------------------------------------------------------------
    def restart(self) -> None:
        """Forget progress but keep the grid."""

        with self._lock:
            self.found_words.clear()
            self.revealed_cells.clear()
            self.reveal_all = False
            self._completed = False
        self.cancel_drag()

    def toggle_reveal(self) -> bool:
        self.reveal_all = not self.reveal_all
        return self.reveal_all

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def _all_found(self) -> bool:
        total = len(self.puzzle.word_list)
        return total > 0 and len(self.found_words) == total

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def progress(self) -> Tuple[int, int]:
        return len(self.found_words), len(self.puzzle.word_list)

    def is_revealed(self, cell: CellPosition) -> bool:
        return self.reveal_all or cell in self.revealed_cells

    def remaining_words(self) -> List[str]:
        return [word for word in self.puzzle.word_list if word not in self.found_words]
