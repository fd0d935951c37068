"""Word search puzzle engine for photo-derived word lists.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.generate_puzzle``: places words into a grid.
- ``wordsearch.engine.matcher.resolve_selection``: matches a drag selection.
- ``wordsearch.engine.session.PuzzleSession``: single-player play state.
- ``wordsearch.data.words`` sources: derive candidate words from a photo.
"""

from .core.models import CellPosition, MatchResult, PuzzleData, WordPlacement
from .engine.generator import GenerationResult, GeneratorConfig, PuzzleGenerator, generate_puzzle
from .engine.matcher import resolve_selection
from .engine.session import PuzzleSession

__all__ = [
    "CellPosition",
    "GenerationResult",
    "GeneratorConfig",
    "MatchResult",
    "PuzzleData",
    "PuzzleGenerator",
    "PuzzleSession",
    "WordPlacement",
    "generate_puzzle",
    "resolve_selection",
]

__version__ = "0.1.0"
