"""
Tests for permutation generation and row filtering.
"""

import math
import unittest
import numpy as np

from sudoku_ga.data_models import SudokuGrid
from sudoku_ga.permutations import generate_all, filter_row, clue_mask


def puzzle_with(clues):
    """Build a puzzle from {(row, col): digit}."""
    cells = [0] * 81
    for (row, col), digit in clues.items():
        cells[row * 9 + col] = digit
    return SudokuGrid(cells=tuple(cells))


class TestGenerateAll(unittest.TestCase):
    """Test permutation generation."""

    @classmethod
    def setUpClass(cls):
        cls.table = generate_all()

    def test_count_and_shape(self):
        """Test that exactly 9! permutations of length 9 are produced."""
        self.assertEqual(self.table.shape, (math.factorial(9), 9))

    def test_every_row_is_bijection(self):
        """Test each permutation uses every digit 1-9 exactly once."""
        expected = np.arange(1, 10)
        sorted_rows = np.sort(self.table, axis=1)
        self.assertTrue(np.all(sorted_rows == expected))

    def test_no_duplicates(self):
        """Test no permutation appears twice."""
        unique = np.unique(self.table, axis=0)
        self.assertEqual(len(unique), len(self.table))

    def test_table_is_read_only(self):
        """Test the generated table cannot be modified."""
        with self.assertRaises(ValueError):
            self.table[0, 0] = 9

    def test_deterministic(self):
        """Test two runs give the same table."""
        self.assertTrue(np.array_equal(generate_all(), self.table))

    def test_small_alphabet(self):
        """Test insertion-based generation on three symbols."""
        table = generate_all((1, 2, 3))
        self.assertEqual(
            table.tolist(),
            [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1]]
        )

    def test_single_symbol(self):
        """Test one-symbol alphabet gives one permutation."""
        self.assertEqual(generate_all((7,)).tolist(), [[7]])

    def test_duplicate_symbols_rejected(self):
        """Test alphabet with repeated symbols is rejected."""
        with self.assertRaises(ValueError):
            generate_all((1, 1, 2))


class TestFilterRow(unittest.TestCase):
    """Test filtering permutations against row clues."""

    @classmethod
    def setUpClass(cls):
        cls.table = generate_all()

    def test_no_clues_keeps_everything(self):
        """Test a clue-free row keeps all permutations."""
        filtered = filter_row(self.table, SudokuGrid.empty(), 4)
        self.assertEqual(len(filtered), math.factorial(9))

    def test_single_clue(self):
        """Test one clue leaves 8! permutations, all matching it."""
        puzzle = puzzle_with({(0, 0): 5})
        filtered = filter_row(self.table, puzzle, 0)

        self.assertEqual(len(filtered), math.factorial(8))
        self.assertTrue(np.all(filtered[:, 0] == 5))

    def test_clues_in_other_rows_ignored(self):
        """Test clues outside the filtered row have no effect."""
        puzzle = puzzle_with({(0, 0): 5, (1, 3): 2})
        filtered = filter_row(self.table, puzzle, 2)
        self.assertEqual(len(filtered), math.factorial(9))

    def test_soundness(self):
        """Test every kept permutation matches every clue of the row."""
        puzzle = puzzle_with({(3, 0): 5, (3, 4): 1, (3, 8): 9})
        filtered = filter_row(self.table, puzzle, 3)

        self.assertEqual(len(filtered), math.factorial(6))
        self.assertTrue(np.all(filtered[:, 0] == 5))
        self.assertTrue(np.all(filtered[:, 4] == 1))
        self.assertTrue(np.all(filtered[:, 8] == 9))

    def test_completeness_and_order(self):
        """Test every dropped permutation violates a clue and order is kept."""
        puzzle = puzzle_with({(6, 1): 4, (6, 2): 7, (6, 7): 3})
        filtered = filter_row(self.table, puzzle, 6)

        expected = [
            perm for perm in self.table.tolist()
            if perm[1] == 4 and perm[2] == 7 and perm[7] == 3
        ]
        self.assertEqual(filtered.tolist(), expected)

    def test_count_non_increasing_as_clues_added(self):
        """Test each added clue never grows the row's permutation set."""
        clues = {}
        previous = len(filter_row(self.table, SudokuGrid.empty(), 5))
        self.assertEqual(previous, math.factorial(9))

        for col, digit in [(0, 3), (2, 8), (5, 1), (8, 6)]:
            clues[(5, col)] = digit
            count = len(filter_row(self.table, puzzle_with(clues), 5))
            self.assertLessEqual(count, previous)
            previous = count

        self.assertEqual(previous, math.factorial(5))

    def test_duplicate_clue_digit_gives_empty_set(self):
        """Test the same digit twice in one row admits no permutation."""
        puzzle = puzzle_with({(0, 0): 3, (0, 1): 3})
        filtered = filter_row(self.table, puzzle, 0)

        self.assertEqual(filtered.shape, (0, 9))

    def test_full_row_keeps_one(self):
        """Test a fully clued row keeps exactly that permutation."""
        row = [4, 2, 6, 8, 5, 3, 7, 9, 1]
        puzzle = puzzle_with({(8, col): digit for col, digit in enumerate(row)})
        filtered = filter_row(self.table, puzzle, 8)

        self.assertEqual(filtered.tolist(), [row])

    def test_filtered_is_read_only(self):
        """Test filtered sets cannot be modified."""
        filtered = filter_row(self.table, puzzle_with({(0, 0): 5}), 0)
        with self.assertRaises(ValueError):
            filtered[0, 0] = 1

    def test_clue_mask(self):
        """Test extracting a row's clue vector."""
        puzzle = puzzle_with({(2, 0): 9, (2, 5): 4})
        self.assertEqual(clue_mask(puzzle, 2).tolist(), [9, 0, 0, 0, 0, 4, 0, 0, 0])

    def test_invalid_row_index(self):
        """Test row index outside the grid is rejected."""
        with self.assertRaises(IndexError):
            filter_row(self.table, SudokuGrid.empty(), 9)


if __name__ == '__main__':
    unittest.main()
