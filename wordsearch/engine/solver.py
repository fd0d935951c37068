"""CP-SAT word placement using OR-Tools.

Backs the ``SOLVER`` placement strategy. Every candidate (word, start,
direction) is a boolean; each word is used at most once and each cell is
covered at most once, the same no-shared-cell rule the random strategy uses.
"""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import Direction
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

Candidate = Tuple[str, int, int, Direction]


def solve_placement(
    words: Sequence[str],
    size: int,
    directions: Sequence[Direction],
    rng: random.Random,
    timeout: float = 10.0,
) -> Optional[List[Candidate]]:
    """Place as many ``words`` as possible into an empty ``size`` grid.

    Args:
        words: Distinct words, already filtered to ``len(word) <= size``.
        size: Grid side length.
        directions: Allowed placement directions.
        rng: Source for the objective tie-breakers and the solver seed.
        timeout: Solver time limit in seconds.

    Returns:
        ``(word, start_row, start_col, direction)`` tuples in the order of
        ``words``, or None if the solver found no solution in time.
    """
    if not words:
        return []

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One boolean per legal (word, start, direction)
    # ------------------------------------------------------------------
    word_vars: Dict[str, List[Tuple[cp_model.IntVar, Candidate]]] = defaultdict(list)
    cell_cover: Dict[Tuple[int, int], List[cp_model.IntVar]] = defaultdict(list)

    for index, word in enumerate(words):
        length = len(word)
        for direction in directions:
            dr, dc = direction.step
            for row in range(size):
                for col in range(size):
                    end_row = row + dr * (length - 1)
                    end_col = col + dc * (length - 1)
                    if not (0 <= end_row < size and 0 <= end_col < size):
                        continue
                    var = model.new_bool_var(f"w{index}_{row}_{col}_{direction.value}")
                    word_vars[word].append((var, (word, row, col, direction)))
                    for i in range(length):
                        cell_cover[(row + dr * i, col + dc * i)].append(var)

    # ------------------------------------------------------------------
    # Step 2: Constraints
    # ------------------------------------------------------------------
    for entries in word_vars.values():
        model.add_at_most_one([var for var, _ in entries])

    for covering in cell_cover.values():
        if len(covering) > 1:
            model.add_at_most_one(covering)

    # ------------------------------------------------------------------
    # Step 3: Objective
    # ------------------------------------------------------------------
    # Word count dominates, then total length (longest words first), then
    # a random jitter so equal-value layouts differ between seeds.
    length_scale = 10
    per_word_cap = (size + 1) * length_scale
    word_weight = len(words) * per_word_cap + 1
    objective_terms = []
    for word, entries in word_vars.items():
        for var, _ in entries:
            weight = word_weight + len(word) * length_scale + rng.randrange(length_scale)
            objective_terms.append(weight * var)
    model.maximize(sum(objective_terms))

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 1
    solver.parameters.random_seed = rng.randrange(1_000_000)

    LOGGER.info(
        "CP-SAT: %d words, %d candidate placements, solving (timeout=%0.1fs)...",
        len(words),
        sum(len(entries) for entries in word_vars.values()),
        timeout,
    )
    status = solver.solve(model)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        return None

    LOGGER.info("CP-SAT: solution found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 5: Extract solution
    # ------------------------------------------------------------------
    result: List[Candidate] = []
    for word in words:
        for var, candidate in word_vars.get(word, []):
            if solver.value(var):
                result.append(candidate)
                break
    return result
