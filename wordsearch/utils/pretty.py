"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.models import CellPosition

if TYPE_CHECKING:
    from ..core.models import PuzzleData
    from ..engine.generator import GenerationResult
    from ..engine.session import PuzzleSession


def format_grid(puzzle: PuzzleData, session: Optional[PuzzleSession] = None) -> str:
    """Render the grid with coordinates; revealed cells are bracketed."""

    width = puzzle.size
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r, row in enumerate(puzzle.grid):
        rendered = []
        for c, letter in enumerate(row):
            if session is not None and session.is_revealed(CellPosition(r, c)):
                rendered.append(f"[{letter}]")
            else:
                rendered.append(f" {letter} ")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def format_word_list(puzzle: PuzzleData, session: Optional[PuzzleSession] = None) -> str:
    found = session.found_words if session is not None else set()
    entries = [f"~{word}~" if word in found else word for word in puzzle.word_list]
    header = "Find these words:"
    if session is not None:
        done, total = session.progress
        header += f" ({done} / {total} words found)"
    return header + "\n  " + "  ".join(entries)


def print_puzzle_stats(result: GenerationResult, *, stream=None) -> None:
    """Print grid + placement stats for a generation attempt."""

    stream = stream or sys.stdout
    puzzle = result.puzzle
    if puzzle is None:
        print(result.failure_message, file=stream)
        return

    print(format_grid(puzzle), file=stream)

    # --- Grid ---
    total_cells = puzzle.size * puzzle.size
    word_cells = sum(len(placement.word) for placement in puzzle.words)
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {puzzle.size} x {puzzle.size} ({total_cells} cells)", file=stream)
    print(f"  Word letters:  {word_cells} ({word_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Filler:        {total_cells - word_cells}", file=stream)

    # --- Words ---
    directions = Counter(placement.direction.value for placement in puzzle.words)
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Requested:     {len(result.requested_words)}", file=stream)
    print(f"  Placed:        {len(puzzle.word_list)}", file=stream)
    if directions:
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    if result.skipped_words:
        print(f"  Too long:      {', '.join(result.skipped_words)}", file=stream)
    if result.dropped_words:
        print(f"  No room:       {', '.join(result.dropped_words)}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
