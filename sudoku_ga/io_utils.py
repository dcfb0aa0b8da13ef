"""
I/O utilities for the Sudoku GA encoding.

Handles puzzle file loading and population CSV export.
"""

import csv
from pathlib import Path
from typing import Sequence, Union

from .data_models import GRID_SIZE, SudokuGrid
from .chromosome import SudokuPermutationsChromosome


def parse_puzzle_text(text: str) -> SudokuGrid:
    """
    Parse puzzle text into a SudokuGrid.

    Lines starting with '#' are comments. The remaining text may be a
    single 81-character line or a pretty-printed 9-line grid.

    Args:
        text: Puzzle text

    Returns:
        SudokuGrid with the puzzle's clues

    Raises:
        ValueError: If the text is not a valid grid
    """
    lines = [
        line for line in text.splitlines()
        if not line.lstrip().startswith('#')
    ]
    return SudokuGrid.from_string("\n".join(lines))


def load_puzzle(puzzle_path: Union[str, Path]) -> SudokuGrid:
    """
    Load a puzzle from a text file.

    Args:
        puzzle_path: Path to puzzle file

    Returns:
        SudokuGrid with the puzzle's clues

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file content is not a valid grid
    """
    puzzle_path = Path(puzzle_path)

    if not puzzle_path.exists():
        raise FileNotFoundError(f"Puzzle file not found: {puzzle_path}")

    with open(puzzle_path, 'r') as f:
        text = f.read()

    try:
        return parse_puzzle_text(text)
    except ValueError as e:
        raise ValueError(f"Invalid puzzle in {puzzle_path}: {e}")


def save_population_csv(
    chromosomes: Sequence[SudokuPermutationsChromosome],
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save chromosomes and their decoded grids to CSV.

    CSV format:
        id,gene_0,...,gene_8,grid
        0,1234,...,40000,534678912...

    Args:
        chromosomes: Chromosomes to save
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['id'] + [f'gene_{i}' for i in range(GRID_SIZE)] + ['grid'])

        for index, chromosome in enumerate(chromosomes):
            grid = chromosome.decode()
            writer.writerow([index] + chromosome.get_genes() + [grid.to_string()])

    return output_path
