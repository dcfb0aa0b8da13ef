"""
Orchestration module for the Sudoku GA encoding.

Seeds an initial population of row-permutation chromosomes for a puzzle,
ready to hand over to an external GA engine.
"""

from typing import Dict, List, Optional
from pathlib import Path
import numpy as np

from .data_models import GRID_SIZE, SudokuGrid
from .chromosome import SudokuPermutationsChromosome
from .permutation_cache import PermutationCache
from .io_utils import load_puzzle, parse_puzzle_text, save_population_csv


def seed_population(
    puzzle: Optional[SudokuGrid],
    size: int,
    rng: np.random.Generator,
    cache: Optional[PermutationCache] = None
) -> List[SudokuPermutationsChromosome]:
    """
    Create independently randomized chromosomes for a puzzle.

    The first chromosome is built directly; the rest come from its
    create_new(), the way a GA engine seeds its population.

    Args:
        puzzle: Puzzle clues (None for unconstrained chromosomes)
        size: Number of chromosomes
        rng: Random number generator
        cache: Permutation cache (default: process-wide cache)

    Returns:
        List of chromosomes

    Raises:
        ValueError: If size is not positive
        ContradictoryCluesError: If a puzzle row admits no permutation
    """
    if size <= 0:
        raise ValueError(f"Population size must be positive, got {size}")

    adam = SudokuPermutationsChromosome(puzzle, rng=rng, cache=cache)
    population = [adam]
    for _ in range(size - 1):
        population.append(adam.create_new())

    return population


def run_population_seeding(run_config: Dict) -> None:
    """
    Seed a population from a validated run configuration.

    Args:
        run_config: Run configuration dict from YAML

    Algorithm:
        1. Load the puzzle (inline 'puzzle' or 'puzzle_file')
        2. Setup RNG (run_config['random_seed'] or a fresh seed)
        3. Build the population
        4. Print row permutation counts and the first decoded candidate
        5. Save population CSV if 'output.path' is set

    Returns:
        None
    """
    print("=" * 70)
    print("POPULATION SEEDING")
    print("=" * 70)

    # Load puzzle
    if 'puzzle_file' in run_config:
        print(f"Loading puzzle from: {run_config['puzzle_file']}")
        puzzle = load_puzzle(run_config['puzzle_file'])
    else:
        puzzle = parse_puzzle_text(run_config['puzzle'])

    print(f"Clues: {puzzle.clue_count()}")
    print(puzzle)
    print()

    # Setup RNG
    seed = run_config.get('random_seed')
    if seed is None:
        seed = int(np.random.randint(0, 2**31))
    print(f"Random seed: {seed}")
    rng = np.random.default_rng(seed)

    # Build population
    size = run_config['population']['size']
    print(f"Seeding {size} chromosomes...")
    population = seed_population(puzzle, size, rng)

    adam = population[0]
    print()
    print("Row permutations:")
    for row_index in range(GRID_SIZE):
        print(f"  Row {row_index}: {adam.get_row_permutation_count(row_index)}")

    print()
    print("First candidate:")
    print(adam.decode())

    # Save
    output_path = None
    if 'output' in run_config:
        output_path = save_population_csv(
            population,
            Path(run_config['output']['path']),
            overwrite=run_config['output'].get('overwrite', False)
        )

    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"Generated: {len(population)} chromosomes")
    if output_path is not None:
        print(f"Population CSV: {output_path}")
