#!/usr/bin/env python3
"""
Seed a population of Sudoku row-permutation chromosomes from a YAML run file.

The run file names the puzzle, the population size and, optionally, the
random seed and a CSV path for the seeded population. --seed and --output
override the file's values for one run.
"""

import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the seeding run."""
    parser = argparse.ArgumentParser(
        description="Seed Sudoku GA chromosomes for a puzzle",
        epilog="example: python3 ga_cli.py seed_run.yaml --seed 7",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'run_config',
        help='YAML run configuration (puzzle, population size, output)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        help='Random seed, replaces random_seed from the run file'
    )

    parser.add_argument(
        '--output', '-o',
        help='Population CSV path, replaces output.path from the run file'
    )

    return parser


def main(argv=None):
    """Parse arguments and run the seeding workflow."""
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.seed is not None:
        overrides['random_seed'] = args.seed
    if args.output is not None:
        overrides['output'] = {'path': args.output, 'overwrite': True}

    from sudoku_ga.cli import run_from_config

    try:
        run_from_config(args.run_config, overrides=overrides)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
