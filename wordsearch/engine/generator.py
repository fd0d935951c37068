"""Word search puzzle generation.

Words are placed longest first. The default strategy tries a bounded number
of random (direction, start) draws per word and silently drops the word when
none fits. The solver strategy asks CP-SAT for a layout that fits as many
words as possible and falls back to random placement if it finds nothing.
Remaining cells get random filler letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from ..core.constants import (
    ALLOW_DIAGONALS,
    DEFAULT_PLACEMENT_ATTEMPTS,
    GRID_SIZES,
    Difficulty,
    Direction,
    candidate_directions,
)
from ..core.models import PuzzleData
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .grid import LetterGrid
from .solver import solve_placement
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)

UNPLACEABLE_MESSAGE = (
    "Could not generate puzzle with the given words. "
    "Try removing long words or adding more."
)


class PlacementStrategy(str, Enum):
    RANDOM = "random"
    SOLVER = "solver"


@dataclass
class GeneratorConfig:
    size: int
    allow_diagonals: bool = False
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    seed: Optional[int] = None
    strategy: PlacementStrategy = PlacementStrategy.RANDOM
    solver_timeout_seconds: float = 10.0

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty | str, **overrides) -> "GeneratorConfig":
        tier = Difficulty(difficulty.upper())
        size = overrides.pop("size", None)
        if size is None:
            size = GRID_SIZES[tier]
        return cls(
            size=size,
            allow_diagonals=overrides.pop("allow_diagonals", ALLOW_DIAGONALS[tier]),
            **overrides,
        )

    @property
    def directions(self) -> Sequence[Direction]:
        return candidate_directions(self.allow_diagonals)


@dataclass
class GenerationResult:
    """Puzzle plus a report of what happened to each requested word."""

    puzzle: Optional[PuzzleData]
    requested_words: List[str] = field(default_factory=list)
    skipped_words: List[str] = field(default_factory=list)
    dropped_words: List[str] = field(default_factory=list)
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.puzzle is not None

    @property
    def unplaced_words(self) -> List[str]:
        return self.skipped_words + self.dropped_words

    @property
    def failure_message(self) -> Optional[str]:
        if self.ok:
            return None
        if self.validation_messages:
            return "Puzzle failed validation: " + "; ".join(self.validation_messages)
        return UNPLACEABLE_MESSAGE


class PuzzleGenerator:
    """Builds one puzzle per ``generate`` call; calls do not share state."""

    def __init__(
        self,
        config: GeneratorConfig,
        rng: Optional[random.Random] = None,
        validator: Optional[PuzzleValidator] = None,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.validator = validator or PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> GenerationResult:
        requested = self._prepare_words(words)
        result = GenerationResult(puzzle=None, requested_words=requested, seed=self.config.seed)

        size = self.config.size
        if size < 1:
            LOGGER.warning("Refusing to build a puzzle with grid size %s", size)
            return result

        ordered = sorted(requested, key=len, reverse=True)
        eligible: List[str] = []
        for word in ordered:
            if len(word) > size:
                LOGGER.debug("Skipping '%s': longer than grid size %d", word, size)
                result.skipped_words.append(word)
            else:
                eligible.append(word)

        grid = LetterGrid(size)
        if self.config.strategy == PlacementStrategy.SOLVER:
            placed = self._solver_placement(grid, eligible)
        else:
            placed = self._random_placement(grid, eligible)
        result.dropped_words = [word for word in eligible if word not in placed]

        grid.fill_empty(self.rng)

        if len(words) and not grid.placements:
            LOGGER.warning("None of the %d requested words could be placed", len(words))
            return result

        puzzle = PuzzleData(
            grid=grid.freeze(),
            words=tuple(grid.placements),
            word_list=tuple(placement.word for placement in grid.placements),
        )
        validation = self.validator.validate(puzzle, requested)
        if not validation.ok:
            result.validation_messages = validation.messages
            return result

        if result.unplaced_words:
            LOGGER.info(
                "%d word(s) could not be placed: %s",
                len(result.unplaced_words),
                ", ".join(result.unplaced_words),
            )
        LOGGER.info(
            "Puzzle generated: %dx%d grid with %d/%d words (%.0f%% letters from words)",
            size,
            size,
            len(puzzle.word_list),
            len(requested),
            grid.filled_ratio * 100,
        )
        result.puzzle = puzzle
        return result

    # ------------------------------------------------------------------
    # Placement strategies
    # ------------------------------------------------------------------
    def _random_placement(self, grid: LetterGrid, words: Sequence[str]) -> List[str]:
        placed: List[str] = []
        for word in words:
            if self._attempt_place_word(grid, word):
                placed.append(word)
            else:
                LOGGER.debug(
                    "Dropping '%s' after %d attempts", word, self.config.placement_attempts
                )
        return placed

    def _attempt_place_word(self, grid: LetterGrid, word: str) -> bool:
        directions = self.config.directions
        for _ in range(self.config.placement_attempts):
            direction = self.rng.choice(directions)
            start_row = self.rng.randrange(grid.size)
            start_col = self.rng.randrange(grid.size)
            if grid.fits(word, start_row, start_col, direction):
                grid.place_word(word, start_row, start_col, direction)
                LOGGER.debug(
                    "Placed '%s' at (%d,%d) %s", word, start_row, start_col, direction.value
                )
                return True
        return False

    def _solver_placement(self, grid: LetterGrid, words: Sequence[str]) -> List[str]:
        solution = solve_placement(
            words,
            grid.size,
            self.config.directions,
            self.rng,
            timeout=self.config.solver_timeout_seconds,
        )
        if solution is None:
            LOGGER.warning("Solver placement failed, falling back to random placement")
            return self._random_placement(grid, words)
        for word, row, col, direction in solution:
            grid.place_word(word, row, col, direction)
        return [word for word, _, _, _ in solution]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _prepare_words(words: Sequence[str]) -> List[str]:
        prepared: List[str] = []
        seen = set()
        for raw in words:
            word = clean_word(raw)
            if not word:
                LOGGER.debug("Ignoring entry %r with no A-Z letters", raw)
                continue
            if word in seen:
                continue
            seen.add(word)
            prepared.append(word)
        return prepared


def generate_puzzle(
    words: Sequence[str],
    size: int,
    allow_diagonals: bool,
    rng: Optional[random.Random] = None,
) -> Optional[PuzzleData]:
    """Place ``words`` into a ``size`` x ``size`` grid.

    Returns None when ``words`` is non-empty but none of them could be
    placed. Words that do not fit are dropped silently; the returned
    ``word_list`` is the list the player has to find.
    """

    config = GeneratorConfig(size=size, allow_diagonals=allow_diagonals)
    return PuzzleGenerator(config, rng=rng).generate(words).puzzle
