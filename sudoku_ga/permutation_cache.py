"""
Memoized row-permutation sets per puzzle.

The permutation table and the per-puzzle filtered sets are expensive to
build (9! rows, filtered once per row), so they are computed lazily and
kept for the lifetime of the cache. All lazy initialization uses
double-checked locking: lookups of computed entries take no lock, and a
puzzle seen for the first time is filtered exactly once even when several
threads ask for it at the same moment.
"""

import threading
from typing import Dict, Optional, Tuple
import numpy as np

from .data_models import GRID_SIZE, SudokuGrid
from .permutations import generate_all, filter_row


RowPermutations = Tuple[np.ndarray, ...]


class PermutationCache:
    """
    Cache of row-permutation sets keyed by puzzle value.

    Instances are independent, so tests can use a fresh cache instead of
    the process-wide default returned by get_default_cache().
    """

    def __init__(self):
        self._all_permutations: Optional[np.ndarray] = None
        self._unfiltered: Optional[RowPermutations] = None
        self._entries: Dict[SudokuGrid, RowPermutations] = {}

        self._table_lock = threading.Lock()
        # Guards _key_locks only; filtering happens under the per-puzzle lock
        self._key_locks_guard = threading.Lock()
        self._key_locks: Dict[SudokuGrid, threading.Lock] = {}

        self.filter_runs = 0

    @property
    def all_permutations(self) -> np.ndarray:
        """All 9! permutations of the digits 1-9 (read-only)."""
        if self._all_permutations is None:
            with self._table_lock:
                if self._all_permutations is None:
                    self._all_permutations = generate_all()
        return self._all_permutations

    @property
    def unfiltered(self) -> RowPermutations:
        """Nine references to the full permutation table, one per row."""
        if self._unfiltered is None:
            table = self.all_permutations
            with self._table_lock:
                if self._unfiltered is None:
                    self._unfiltered = (table,) * GRID_SIZE
        return self._unfiltered

    def row_permutations_for(self, puzzle: Optional[SudokuGrid]) -> RowPermutations:
        """
        Get the permutations compatible with each row of a puzzle.

        Args:
            puzzle: Puzzle clues, or None for the unconstrained baseline

        Returns:
            Tuple of nine read-only arrays, one per row. A row whose clues
            admit no permutation gives an empty array.
        """
        if puzzle is None:
            return self.unfiltered

        entry = self._entries.get(puzzle)
        if entry is not None:
            return entry

        with self._lock_for(puzzle):
            entry = self._entries.get(puzzle)
            if entry is None:
                table = self.all_permutations
                entry = tuple(
                    filter_row(table, puzzle, row_index)
                    for row_index in range(GRID_SIZE)
                )
                with self._key_locks_guard:
                    self._entries[puzzle] = entry
                    self.filter_runs += 1

        with self._key_locks_guard:
            self._key_locks.pop(puzzle, None)

        return entry

    def _lock_for(self, puzzle: SudokuGrid) -> threading.Lock:
        """Get (or create) the lock serializing first computation for one puzzle."""
        with self._key_locks_guard:
            lock = self._key_locks.get(puzzle)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[puzzle] = lock
            return lock

    def clear(self) -> None:
        """
        Drop all per-puzzle entries. The permutation table is kept.

        Meant for tests. Per-puzzle locks still held by an in-flight
        computation are left in place, so a caller arriving during that
        computation waits on the same lock instead of filtering again.
        """
        with self._key_locks_guard:
            self._entries = {}

    def __contains__(self, puzzle: SudokuGrid) -> bool:
        return puzzle in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_default_cache: Optional[PermutationCache] = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> PermutationCache:
    """Get the process-wide cache, creating it on first use."""
    global _default_cache

    if _default_cache is None:
        with _default_cache_lock:
            if _default_cache is None:
                _default_cache = PermutationCache()
    return _default_cache


def row_permutations_for(puzzle: Optional[SudokuGrid]) -> RowPermutations:
    """Row permutations for a puzzle from the process-wide cache."""
    return get_default_cache().row_permutations_for(puzzle)
