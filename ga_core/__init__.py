"""
Genetic Algorithm Core

This package evolves a fixed-size population of fixed-length chromosomes
across discrete generations using tournament selection, shuffle crossover,
point mutation and optional elitism.

Key Features:
- Explicit, seedable numpy random generator threaded through every operator
- Per-locus genotype-to-phenotype converters
- Fitness recomputed from the phenotype on every access
- Full or streamed generation history with integer row projections

Modules:
- config: YAML run configuration, settings validation, RNG construction
- data_models: Chromosome, population factory, fitness queries
- selection: Binary tournament ("rank") selection
- crossover: Locus-wise shuffle crossover
- mutation: Per-pair mutation policy
- evolution: Generation step and multi-generation loop
- func_utils: Function composition helpers for converters
- io_utils: Integer projections and history CSV export
- orchestration: Configured end-to-end runs
- cli: Command-line interface
"""

__version__ = "0.1.0"

from .config import ConfigurationError, EvolutionSettings, make_rng
from .data_models import (
    Chromosome,
    Population,
    create_population,
    best_chromosome,
    max_fitness,
)
from .selection import rank_selection
from .crossover import shuffle_crossover
from .mutation import mutate_pair
from .evolution import evolve, iter_generations, run_generations

__all__ = [
    "ConfigurationError",
    "EvolutionSettings",
    "make_rng",
    "Chromosome",
    "Population",
    "create_population",
    "best_chromosome",
    "max_fitness",
    "rank_selection",
    "shuffle_crossover",
    "mutate_pair",
    "evolve",
    "iter_generations",
    "run_generations",
]
