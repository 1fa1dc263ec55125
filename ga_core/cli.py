"""
CLI module for the GA core.

Handles run configuration loading, validation, and dispatching.
"""

from typing import List, Optional, Union
from pathlib import Path

from .config import load_run_config, validate_run_config
from .data_models import Population


def run_from_config(config_path: Union[str, Path]) -> List[Population]:
    """
    Load run configuration and execute the evolution run.

    This is the main entry point called by ga_cli.py.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        History of populations, initial population at index 0

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If config is invalid
    """
    print(f"Loading configuration from: {config_path}")
    config = load_run_config(config_path)

    print("Validating configuration...")
    validate_run_config(config)
    print()

    from .orchestration import run_simulation
    history = run_simulation(config)

    print("\nRun completed successfully!")
    return history


def parse_config_path(argv: List[str]) -> Optional[str]:
    """
    Extract the run configuration path from command-line arguments.

    Accepts `run.yaml`, `--config run.yaml` and `--config=run.yaml`.

    Returns:
        Config path, or None when help was requested or nothing was given
    """
    if not argv or argv[0] in ['-h', '--help', 'help']:
        return None

    config_path = argv[0]
    if config_path.startswith('--config='):
        return config_path.split('=', 1)[1]
    if config_path == '--config':
        if len(argv) < 2:
            raise ValueError("--config requires an argument")
        return argv[1]
    return config_path
