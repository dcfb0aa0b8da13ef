"""
Chromosome encoding for the Sudoku GA.

Each of the nine genes holds the index of a row permutation amongst those
that respect the puzzle's clues, so every decoded candidate already
satisfies row uniqueness and the clues. Column and box constraints are
left to the external fitness function.
"""

import copy
from typing import List, Optional, Sequence
import numpy as np

from .data_models import GRID_SIZE, SudokuGrid
from .permutation_cache import PermutationCache, get_default_cache


class ContradictoryCluesError(ValueError):
    """Raised when a puzzle row admits no permutation compatible with its clues."""

    def __init__(self, row_index: int, puzzle: Optional[SudokuGrid] = None):
        self.row_index = row_index
        self.puzzle = puzzle
        super().__init__(
            f"Clues in row {row_index} admit no valid arrangement of digits 1-9"
        )


class ChromosomeBase:
    """
    Fixed-length gene vector manipulated by an external GA engine.

    Subclasses define how a gene is generated and how a new chromosome of
    the same kind is created. Genes may be replaced freely by crossover and
    mutation operators.

    Attributes:
        fitness: Score assigned by the external fitness function (None until evaluated)
    """

    def __init__(self, length: int):
        if length < 2:
            raise ValueError(f"Chromosome length must be at least 2, got {length}")

        self._genes: List[int] = [0] * length
        self.fitness: Optional[float] = None

    @property
    def length(self) -> int:
        """Number of genes."""
        return len(self._genes)

    def get_gene(self, index: int) -> int:
        self._check_index(index)
        return self._genes[index]

    def replace_gene(self, index: int, value: int) -> None:
        """
        Replace one gene value.

        Invalidates the fitness, since the chromosome has changed.
        """
        self._check_index(index)
        self._genes[index] = int(value)
        self.fitness = None

    def get_genes(self) -> List[int]:
        """Copy of the gene vector."""
        return list(self._genes)

    def replace_genes(self, start_index: int, values: Sequence[int]) -> None:
        """
        Replace consecutive genes starting at start_index.

        Raises:
            IndexError: If the values do not fit in the chromosome
        """
        self._check_index(start_index)
        if start_index + len(values) > self.length:
            raise IndexError(
                f"Cannot replace {len(values)} genes from index {start_index} "
                f"in a chromosome of length {self.length}"
            )

        for offset, value in enumerate(values):
            self._genes[start_index + offset] = int(value)
        self.fitness = None

    def generate_gene(self, index: int) -> int:
        """Draw a random value for the gene at index."""
        raise NotImplementedError

    def create_new(self) -> "ChromosomeBase":
        """Create a new, independently randomized chromosome of the same kind."""
        raise NotImplementedError

    def clone(self) -> "ChromosomeBase":
        """
        Create a copy of this chromosome with the same genes and fitness.

        No random draws are made, so cloning leaves a shared generator untouched.

        Returns:
            New chromosome; its gene vector is not shared with this one
        """
        duplicate = copy.copy(self)
        duplicate._genes = list(self._genes)
        return duplicate

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.length:
            raise IndexError(
                f"Gene index {index} is out of range for chromosome of length {self.length}"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(genes={self._genes}, fitness={self.fitness})"


class SudokuPermutationsChromosome(ChromosomeBase):
    """
    Sudoku chromosome whose genes select whole-row permutations.

    Row permutation sets come from a PermutationCache, computed once per
    distinct puzzle and shared by every chromosome built for it.

    Decoding reduces each gene modulo the size of its row's permutation
    set. Crossover and mutation operators are allowed to produce values
    outside the original sampling range, and decode() stays total for any
    integer gene instead of rejecting them.
    """

    def __init__(
        self,
        puzzle: Optional[SudokuGrid] = None,
        length: int = GRID_SIZE,
        rng: Optional[np.random.Generator] = None,
        cache: Optional[PermutationCache] = None
    ):
        """
        Build a chromosome with random genes for a puzzle.

        Args:
            puzzle: Puzzle clues, or None for an unconstrained chromosome
            length: Number of genes (at most 9)
            rng: Random number generator (default: fresh default_rng())
            cache: Permutation cache (default: process-wide cache)

        Raises:
            ContradictoryCluesError: If a row's clues admit no permutation
            ValueError: If length is out of range
        """
        if length > GRID_SIZE:
            raise ValueError(f"Chromosome length must be at most {GRID_SIZE}, got {length}")

        super().__init__(length)

        self.puzzle = puzzle
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cache = cache if cache is not None else get_default_cache()
        self.row_permutations = self.cache.row_permutations_for(puzzle)

        for row_index in range(self.length):
            if len(self.row_permutations[row_index]) == 0:
                raise ContradictoryCluesError(row_index, puzzle)

        for index in range(self.length):
            self._genes[index] = self.generate_gene(index)

    def generate_gene(self, index: int) -> int:
        """Draw a permutation index uniformly from the row's permutation set."""
        return int(self.rng.integers(0, len(self.row_permutations[index])))

    def create_new(self) -> "SudokuPermutationsChromosome":
        return SudokuPermutationsChromosome(
            puzzle=self.puzzle,
            length=self.length,
            rng=self.rng,
            cache=self.cache
        )

    def get_permutation_index(self, row_index: int) -> int:
        return self.get_gene(row_index)

    def get_row_permutation_count(self, row_index: int) -> int:
        """Number of clue-compatible permutations for a row."""
        return len(self.row_permutations[row_index])

    def decode(self) -> SudokuGrid:
        """
        Build the candidate grid selected by the genes.

        Returns:
            Complete SudokuGrid whose rows are the selected permutations

        Raises:
            ValueError: If the chromosome has fewer genes than grid rows
        """
        if self.length < GRID_SIZE:
            raise ValueError(
                f"Decoding needs {GRID_SIZE} genes, chromosome has {self.length}"
            )

        rows = []
        for row_index in range(GRID_SIZE):
            permutations = self.row_permutations[row_index]
            selected = self.get_permutation_index(row_index) % len(permutations)
            rows.append(permutations[selected])

        return SudokuGrid(cells=tuple(np.concatenate(rows).tolist()))

    def get_sudokus(self) -> List[SudokuGrid]:
        """Decoded candidates, as a list for engines that expect several."""
        return [self.decode()]
