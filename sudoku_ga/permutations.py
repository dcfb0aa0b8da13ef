"""
Row permutation generation and filtering.

Builds the table of all digit permutations for a Sudoku row and filters
it down to the permutations compatible with a puzzle's clues.
"""

from typing import Sequence
import numpy as np

from .data_models import ALPHABET, GRID_SIZE, SudokuGrid


def generate_all(alphabet: Sequence[int] = ALPHABET) -> np.ndarray:
    """
    Generate every permutation of the alphabet.

    Permutations of length n are built by extending each permutation of
    length n-1 with every symbol it does not already contain. The result
    is in lexicographic order relative to the alphabet order.

    Args:
        alphabet: Distinct symbols to permute (default: digits 1-9)

    Returns:
        Read-only int8 array of shape (len(alphabet)!, len(alphabet))
    """
    symbols = np.asarray(alphabet, dtype=np.int8)
    n = len(symbols)

    if n == 0:
        permutations = np.empty((1, 0), dtype=np.int8)
        permutations.flags.writeable = False
        return permutations

    if len(np.unique(symbols)) != n:
        raise ValueError(f"Alphabet symbols must be distinct: {list(alphabet)}")

    permutations = symbols.reshape(n, 1)

    for _ in range(1, n):
        count, width = permutations.shape

        # Pair every prefix with every symbol, then drop symbols already used
        prefixes = np.repeat(permutations, n, axis=0)
        extensions = np.tile(symbols, count)
        unused = ~np.any(prefixes == extensions[:, None], axis=1)

        permutations = np.hstack([prefixes, extensions[:, None]])[unused]

    permutations.flags.writeable = False
    return permutations


def clue_mask(puzzle: SudokuGrid, row_index: int) -> np.ndarray:
    """
    Get the clue digits of one row as a vector (0 where unset).

    Args:
        puzzle: Puzzle clues
        row_index: Row index (0-8)

    Returns:
        int8 array of length 9
    """
    if not 0 <= row_index < GRID_SIZE:
        raise IndexError(f"Row index {row_index} is outside the grid")

    return np.array(
        [puzzle.get_cell(row_index, col) or 0 for col in range(GRID_SIZE)],
        dtype=np.int8
    )


def filter_row(
    all_permutations: np.ndarray,
    puzzle: SudokuGrid,
    row_index: int
) -> np.ndarray:
    """
    Keep the permutations that agree with every clue of a puzzle row.

    A permutation is kept iff, for each column, the puzzle has no clue there
    or the clue equals the permutation's digit. Relative order is preserved.
    Clues that no permutation can satisfy (e.g. the same digit twice in one
    row) give an empty result rather than an error.

    Args:
        all_permutations: Array of shape (n, 9)
        puzzle: Puzzle clues
        row_index: Row index (0-8)

    Returns:
        Read-only array of shape (k, 9), k <= n
    """
    clues = clue_mask(puzzle, row_index)
    clued = clues != 0

    if not clued.any():
        filtered = all_permutations.view()
    else:
        matches = np.all(all_permutations[:, clued] == clues[clued], axis=1)
        filtered = all_permutations[matches]

    filtered.flags.writeable = False
    return filtered
