"""
Mutation policy for the GA core.

The point mutation itself lives on Chromosome.mutate; this module decides
which members of a breeding pair get mutated.
"""

from typing import Any, Callable, Optional, Tuple
import numpy as np

from .data_models import Chromosome


def maybe_mutate(
    chromosome: Chromosome,
    mutation_rate: float,
    rng: np.random.Generator,
    mutation_fn: Optional[Callable[[], Any]] = None
) -> bool:
    """
    Mutate a chromosome with probability mutation_rate.

    Returns:
        True if the chromosome was mutated
    """
    if rng.random() < mutation_rate:
        chromosome.mutate(rng, mutation_fn)
        return True
    return False


def mutate_pair(
    first: Chromosome,
    second: Chromosome,
    mutation_rate: float,
    rng: np.random.Generator,
    mutation_fn: Optional[Callable[[], Any]] = None
) -> Tuple[bool, bool]:
    """
    Apply independent mutation trials to both members of a breeding pair.

    Each chromosome gets its own uniform draw, so the two decisions are not
    linked.

    Args:
        first: First chromosome of the pair (modified in place)
        second: Second chromosome of the pair (modified in place)
        mutation_rate: Per-chromosome mutation probability
        rng: Random number generator
        mutation_fn: Optional allele producer passed to Chromosome.mutate

    Returns:
        Tuple of (first_mutated, second_mutated)
    """
    first_mutated = maybe_mutate(first, mutation_rate, rng, mutation_fn)
    second_mutated = maybe_mutate(second, mutation_rate, rng, mutation_fn)
    return first_mutated, second_mutated
