"""
Run configuration for seeding Sudoku GA populations.

A run file is YAML with the puzzle (inline text or a file path), the
population size, and optional random seed and CSV output settings.
"""

from typing import Dict, Any, Optional, Union
from pathlib import Path
import yaml


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


def load_run_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML run file into a dictionary.

    Only the YAML structure is checked here; validate_run_config() checks
    the puzzle, population and output fields.

    Raises:
        FileNotFoundError: If the run file is missing
        ConfigValidationError: If the file is empty, not YAML, or not a mapping
    """
    run_file = Path(config_path)
    if not run_file.is_file():
        raise FileNotFoundError(f"Run file not found: {run_file}")

    text = run_file.read_text()
    if not text.strip():
        raise ConfigValidationError(f"Run file is empty: {run_file}")

    try:
        config = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Run file {run_file} is not valid YAML: {e}")

    if not isinstance(config, dict):
        raise ConfigValidationError(
            f"Run file {run_file} must hold a mapping, got {type(config).__name__}"
        )

    return config


def validate_run_config(config: Dict[str, Any]) -> None:
    """
    Validate run configuration structure.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    # Exactly one puzzle source
    has_inline = 'puzzle' in config
    has_file = 'puzzle_file' in config

    if not has_inline and not has_file:
        raise ConfigValidationError("Missing required field: 'puzzle' or 'puzzle_file'")

    if has_inline and has_file:
        raise ConfigValidationError(
            "Configuration cannot have both 'puzzle' and 'puzzle_file'. "
            "Please specify only one."
        )

    if has_inline and not isinstance(config['puzzle'], str):
        raise ConfigValidationError("'puzzle' must be a string of 81 cells")

    if has_file:
        puzzle_path = Path(config['puzzle_file'])
        if not puzzle_path.exists():
            raise ConfigValidationError(f"Puzzle file not found: {puzzle_path}")

    # Validate population section
    if 'population' not in config:
        raise ConfigValidationError("Missing required field: 'population'")

    if not isinstance(config['population'], dict):
        raise ConfigValidationError("'population' must be a dictionary")

    if 'size' not in config['population']:
        raise ConfigValidationError("Missing required field: 'population.size'")

    size = config['population']['size']
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise ConfigValidationError(
            f"'population.size' must be a positive integer, got: {size}"
        )

    # Optional fields
    if 'random_seed' in config and config['random_seed'] is not None:
        seed = config['random_seed']
        if not isinstance(seed, int) or isinstance(seed, bool) or seed < 0:
            raise ConfigValidationError(
                f"'random_seed' must be a non-negative integer, got: {seed}"
            )

    if 'output' in config:
        if not isinstance(config['output'], dict):
            raise ConfigValidationError("'output' must be a dictionary")

        if 'path' not in config['output']:
            raise ConfigValidationError("Missing required field: 'output.path'")


def run_from_config(
    config_path: Union[str, Path],
    overrides: Optional[Dict[str, Any]] = None
) -> None:
    """
    Load a run file, apply command-line overrides, and seed a population.

    Args:
        config_path: Path to the YAML run file
        overrides: Top-level keys replacing the run file's values

    Raises:
        FileNotFoundError: If the run file doesn't exist
        ConfigValidationError: If the (overridden) configuration is invalid
        ContradictoryCluesError: If the puzzle has a row with no valid arrangement
    """
    print(f"Run file: {config_path}")
    config = load_run_config(config_path)

    if overrides:
        config.update(overrides)

    validate_run_config(config)

    from .orchestration import run_population_seeding
    run_population_seeding(config)
