import random
import unittest

from wordsearch.core.constants import ALL_DIRECTIONS, ORTHOGONAL_DIRECTIONS
from wordsearch.engine.grid import LetterGrid
from wordsearch.engine.solver import solve_placement


class SolvePlacementTests(unittest.TestCase):
    def test_empty_word_list(self) -> None:
        self.assertEqual(solve_placement([], 5, ORTHOGONAL_DIRECTIONS, random.Random(0)), [])

    def test_packs_a_full_grid(self) -> None:
        words = ["ABCDE", "FGHIJ", "KLMNO", "PQRST", "UVWXY"]
        solution = solve_placement(words, 5, ORTHOGONAL_DIRECTIONS, random.Random(1))
        assert solution is not None
        self.assertEqual([entry[0] for entry in solution], words)

        grid = LetterGrid(5)
        for word, row, col, direction in solution:
            grid.place_word(word, row, col, direction)
        self.assertTrue(grid.is_complete())

    def test_fits_three_parallel_words(self) -> None:
        # Three 3-letter words fill a 3x3 grid only as parallel lines.
        words = ["ABC", "DEF", "GHI"]
        solution = solve_placement(words, 3, ALL_DIRECTIONS, random.Random(2))
        assert solution is not None
        self.assertEqual(len(solution), 3)

    def test_word_without_room_is_left_out(self) -> None:
        words = ["ABCD", "EF"]
        solution = solve_placement(words, 2, ORTHOGONAL_DIRECTIONS, random.Random(3))
        assert solution is not None
        self.assertEqual([entry[0] for entry in solution], ["EF"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
