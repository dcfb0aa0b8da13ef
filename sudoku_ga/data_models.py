"""
Data models for the Sudoku GA encoding.

Core data structures representing puzzle clues and decoded candidate grids.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Sequence, Tuple


GRID_SIZE = 9
CELL_COUNT = GRID_SIZE * GRID_SIZE
ALPHABET: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))

UNSET_CHARS = "0._*"
SEPARATOR_CHARS = "|-+"


@dataclass(frozen=True)
class SudokuGrid:
    """
    Represents a 9x9 Sudoku grid as a flat, row-major tuple of 81 cells.

    A value of 0 means the cell is unset. The same type is used both for
    puzzle clues (mostly unset cells) and for decoded candidate grids (all
    cells set). Equality and hashing are by value, so two grids with the
    same cells are interchangeable as dictionary keys.

    Attributes:
        cells: 81 cell values in row-major order, each in 0..9
    """
    cells: Tuple[int, ...]

    def __post_init__(self):
        """Normalize cells to a tuple of ints and validate them."""
        raw_cells = tuple(self.cells)

        if len(raw_cells) != CELL_COUNT:
            raise ValueError(f"Sudoku grid must have {CELL_COUNT} cells, got {len(raw_cells)}")

        # Integral covers numpy integer scalars; bool is Integral but not a digit
        for index, value in enumerate(raw_cells):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(
                    f"Invalid value {value!r} at cell ({index // GRID_SIZE}, {index % GRID_SIZE}): "
                    f"expected an integer"
                )

        cells = tuple(int(value) for value in raw_cells)

        for index, value in enumerate(cells):
            if not 0 <= value <= GRID_SIZE:
                raise ValueError(
                    f"Invalid value {value} at cell ({index // GRID_SIZE}, {index % GRID_SIZE})"
                )

        # Frozen dataclass: bypass __setattr__ to store the normalized tuple
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "SudokuGrid":
        """Create a grid with no clues."""
        return cls(cells=(0,) * CELL_COUNT)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "SudokuGrid":
        """
        Create a grid from a 9x9 nested sequence.

        Args:
            rows: Nine rows of nine values (0 for unset)

        Returns:
            SudokuGrid instance

        Raises:
            ValueError: If the shape is not 9x9
        """
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError(f"Expected {GRID_SIZE} rows of {GRID_SIZE} values")

        return cls(cells=tuple(value for row in rows for value in row))

    @classmethod
    def from_string(cls, text: str) -> "SudokuGrid":
        """
        Parse a grid from text.

        Digits 1-9 are clues; '0', '.', '_' and '*' are unset cells.
        Whitespace and the box-drawing separators '|', '-' and '+' are ignored,
        so both single-line and pretty-printed layouts are accepted.

        Args:
            text: Grid text

        Returns:
            SudokuGrid instance

        Raises:
            ValueError: On unexpected characters or wrong cell count
        """
        cells = []
        for char in text:
            if char.isspace() or char in SEPARATOR_CHARS:
                continue
            if char in UNSET_CHARS:
                cells.append(0)
            elif char.isdigit():
                cells.append(int(char))
            else:
                raise ValueError(f"Unexpected character in Sudoku grid: {char!r}")

        return cls(cells=tuple(cells))

    def get_cell(self, row: int, col: int) -> Optional[int]:
        """
        Get the digit at (row, col).

        Args:
            row: Row index (0-8)
            col: Column index (0-8)

        Returns:
            Digit 1-9, or None if the cell is unset
        """
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise IndexError(f"Cell ({row}, {col}) is outside the grid")

        value = self.cells[row * GRID_SIZE + col]
        return value if value else None

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        """Cell values grouped by row."""
        return tuple(
            self.cells[row * GRID_SIZE:(row + 1) * GRID_SIZE]
            for row in range(GRID_SIZE)
        )

    def columns(self) -> Tuple[Tuple[int, ...], ...]:
        """Cell values grouped by column."""
        return tuple(self.cells[col::GRID_SIZE] for col in range(GRID_SIZE))

    def boxes(self) -> Tuple[Tuple[int, ...], ...]:
        """Cell values grouped by 3x3 box, boxes in row-major order."""
        boxes = []
        for box in range(GRID_SIZE):
            top, left = 3 * (box // 3), 3 * (box % 3)
            boxes.append(tuple(
                self.cells[(top + r) * GRID_SIZE + left + c]
                for r in range(3)
                for c in range(3)
            ))
        return tuple(boxes)

    def clue_count(self) -> int:
        """Number of set cells."""
        return sum(1 for value in self.cells if value)

    def is_complete(self) -> bool:
        """True when every cell is set."""
        return all(self.cells)

    def to_string(self) -> str:
        """Single-line representation with '.' for unset cells."""
        return "".join(str(value) if value else "." for value in self.cells)

    def __str__(self) -> str:
        lines = []
        for row_index, row in enumerate(self.rows()):
            if row_index and row_index % 3 == 0:
                lines.append("------+-------+------")
            chunks = [
                " ".join(str(value) if value else "." for value in row[start:start + 3])
                for start in (0, 3, 6)
            ]
            lines.append(" | ".join(chunks))
        return "\n".join(lines)
