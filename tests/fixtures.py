"""Hand-built puzzle shared by matcher and session tests."""

from wordsearch.core.constants import Direction
from wordsearch.core.models import CellPosition, PuzzleData, WordPlacement, freeze_grid

#      0 1 2 3 4
# 0    C A T E M
# 1    I R O W L
# 2    C D F S S
# 3    O H A B U
# 4    W G K E N
ROWS = [
    "CATEM",
    "IROWL",
    "CDFSS",
    "OHABU",
    "WGKEN",
]

PLACEMENTS = (
    WordPlacement("CAT", CellPosition(0, 0), CellPosition(0, 2), Direction.HORIZONTAL),
    WordPlacement("OWL", CellPosition(1, 2), CellPosition(1, 4), Direction.HORIZONTAL),
    WordPlacement("COW", CellPosition(2, 0), CellPosition(4, 0), Direction.VERTICAL),
    WordPlacement("SUN", CellPosition(2, 4), CellPosition(4, 4), Direction.VERTICAL),
    WordPlacement("GAS", CellPosition(4, 1), CellPosition(2, 3), Direction.DIAGONAL_UP),
)

GRID = freeze_grid(ROWS)
WORD_LIST = tuple(placement.word for placement in PLACEMENTS)


def sample_puzzle() -> PuzzleData:
    return PuzzleData(grid=GRID, words=PLACEMENTS, word_list=WORD_LIST)
