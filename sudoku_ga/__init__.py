"""
Sudoku row-permutation encoding for genetic algorithms

This package encodes a 9x9 Sudoku as a chromosome of nine genes, each gene
selecting one of the digit permutations that respect the clues of its row.
Every decoded candidate therefore satisfies row and clue constraints; the
external GA engine and fitness function deal with columns and boxes.

Key Features:
- Row permutation sets computed once per distinct puzzle and cached
- Thread-safe lazy initialization (no duplicated filtering work)
- Decode stays total for out-of-range genes (modulo wrap-around)

Modules:
- data_models: SudokuGrid (puzzle clues and candidate grids)
- permutations: Permutation generation and per-row clue filtering
- permutation_cache: Memoized row permutation sets per puzzle
- chromosome: Chromosome base and SudokuPermutationsChromosome
- io_utils: Puzzle file loading, population CSV export
- orchestration: Population seeding workflow
- cli: Run configuration loading and validation
"""

__version__ = "0.1.0"

from .data_models import SudokuGrid, ALPHABET, GRID_SIZE
from .permutation_cache import PermutationCache, get_default_cache, row_permutations_for
from .chromosome import ChromosomeBase, SudokuPermutationsChromosome, ContradictoryCluesError

__all__ = [
    "SudokuGrid",
    "ALPHABET",
    "GRID_SIZE",
    "PermutationCache",
    "get_default_cache",
    "row_permutations_for",
    "ChromosomeBase",
    "SudokuPermutationsChromosome",
    "ContradictoryCluesError",
]
