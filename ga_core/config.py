"""
Configuration Loading System

Loads YAML run configurations, validates them and converts them into the
settings used by the evolution driver.
"""

import copy
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

import numpy as np
import yaml


class ConfigurationError(Exception):
    """Raised when configuration is invalid"""
    pass


FITNESS_FUNCTIONS: Dict[str, Callable[[list], Any]] = {
    'sum': sum,
    'mean': lambda values: float(np.mean(values)),
    'max': max,
    'count_nonzero': lambda values: int(np.count_nonzero(values)),
}


DEFAULT_RUN_CONFIG: Dict[str, Any] = {
    'random_seed': None,
    'population': {
        'size': 50,
        'chromosome_size': 10,
    },
    'allele': {
        'low': 0,
        'high': 10,
    },
    'fitness': 'sum',
    'evolution': {
        'generations': 75,
        'crossover_rate': 0.9,
        'mutation_rate': 0.1,
        'elitism': True,
    },
    'output': {
        'history_csv': None,
        'overwrite': False,
    },
}


INTEGER_TYPES = (int, np.integer)
REAL_TYPES = (int, float, np.integer, np.floating)


def _is_integer(value: Any) -> bool:
    return isinstance(value, INTEGER_TYPES) and not isinstance(value, bool)


def check_rate(name: str, value: float) -> None:
    """Ensure a probability lies in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, REAL_TYPES):
        raise ConfigurationError(f"'{name}' must be a number, got: {value!r}")
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"'{name}' must lie in [0, 1], got: {value}")


def check_positive_int(name: str, value: Any) -> None:
    """Ensure a size parameter is a positive integer."""
    if not _is_integer(value) or value <= 0:
        raise ConfigurationError(f"'{name}' must be a positive integer, got: {value!r}")


def check_non_negative_int(name: str, value: Any) -> None:
    """Ensure a count parameter is an integer >= 0."""
    if not _is_integer(value) or value < 0:
        raise ConfigurationError(f"'{name}' must be a non-negative integer, got: {value!r}")


def check_seed(seed: Any) -> None:
    """
    Ensure a random seed is usable by numpy.

    Accepts None, "random", a non-negative integer or a digit string.
    """
    if seed is None or seed == "random":
        return
    if isinstance(seed, str):
        if not seed.isdigit():
            raise ConfigurationError(f"Invalid random seed: {seed!r}")
        return
    if not _is_integer(seed):
        raise ConfigurationError(f"Invalid random seed: {seed!r}")
    if seed < 0:
        raise ConfigurationError(f"Random seed must be non-negative, got: {seed}")


@dataclass
class EvolutionSettings:
    """
    Hyperparameters of a single GA run.

    Attributes:
        population_size: Number of chromosomes per generation (even, > 0)
        chromosome_size: Genotype length (> 0)
        crossover_rate: Probability of recombining a breeding pair
        mutation_rate: Probability of mutating each member of a pair
        elitism: Whether the best chromosome survives into the next generation
        generations: Number of generation steps to run (>= 0)
    """
    population_size: int = 50
    chromosome_size: int = 10
    crossover_rate: float = 0.9
    mutation_rate: float = 0.1
    elitism: bool = True
    generations: int = 75

    def __post_init__(self):
        """Validate settings."""
        check_positive_int('population_size', self.population_size)
        check_positive_int('chromosome_size', self.chromosome_size)

        # Breeding pairs are formed from even and odd positions
        if self.population_size % 2 != 0:
            raise ConfigurationError(
                f"'population_size' must be even so every chromosome has a mate, "
                f"got: {self.population_size}"
            )

        check_rate('crossover_rate', self.crossover_rate)
        check_rate('mutation_rate', self.mutation_rate)

        if not isinstance(self.elitism, bool):
            raise ConfigurationError(f"'elitism' must be a boolean, got: {self.elitism!r}")

        check_non_negative_int('generations', self.generations)


def make_rng(seed: Optional[Union[int, str]] = None) -> Tuple[np.random.Generator, int]:
    """
    Create the random number generator for a run.

    Args:
        seed: Integer seed, a digit string, or None/"random" for a clock-based seed

    Returns:
        Tuple of (generator, seed actually used)
    """
    check_seed(seed)

    if seed is None or seed == "random":
        seed = int(time.time() * 1000000) % 2147483647
    else:
        seed = int(seed)

    return np.random.default_rng(seed), seed


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_run_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Values missing from the file fall back to DEFAULT_RUN_CONFIG.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If config is not valid YAML or is empty
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigurationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigurationError("Configuration file must contain a mapping at top level")

    return _merge(DEFAULT_RUN_CONFIG, config)


def settings_from_config(config: Dict[str, Any]) -> EvolutionSettings:
    """Build validated EvolutionSettings from a run configuration."""
    population = config.get('population', {})
    evolution = config.get('evolution', {})

    return EvolutionSettings(
        population_size=population.get('size', 50),
        chromosome_size=population.get('chromosome_size', 10),
        crossover_rate=evolution.get('crossover_rate', 0.9),
        mutation_rate=evolution.get('mutation_rate', 0.1),
        elitism=evolution.get('elitism', True),
        generations=evolution.get('generations', 75),
    )


def validate_run_config(config: Dict[str, Any]) -> None:
    """
    Validate run configuration structure.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigurationError: If configuration is invalid
    """
    for section in ['population', 'allele', 'evolution', 'output']:
        if section in config and not isinstance(config[section], dict):
            raise ConfigurationError(f"'{section}' must be a dictionary")

    fitness_name = config.get('fitness', 'sum')
    if not isinstance(fitness_name, str) or fitness_name not in FITNESS_FUNCTIONS:
        raise ConfigurationError(
            f"Unknown fitness function: '{fitness_name}'. "
            f"Must be one of: {', '.join(sorted(FITNESS_FUNCTIONS))}"
        )

    allele = config.get('allele', {})
    low = allele.get('low', 0)
    high = allele.get('high', 10)
    for name, value in [('allele.low', low), ('allele.high', high)]:
        if not _is_integer(value):
            raise ConfigurationError(f"'{name}' must be an integer, got: {value!r}")
    if low >= high:
        raise ConfigurationError(
            f"'allele.low' must be smaller than 'allele.high', got: {low} >= {high}"
        )

    check_seed(config.get('random_seed'))

    settings_from_config(config)
