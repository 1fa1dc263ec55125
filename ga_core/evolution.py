"""
Evolution driver for the GA core.

One generation step turns a population into the next one:
select -> pair -> crossover/mutate -> elitist replacement. The multi-generation
helpers apply that step repeatedly.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple
import numpy as np

from .config import ConfigurationError, check_non_negative_int, check_rate
from .crossover import shuffle_crossover
from .data_models import Chromosome, Population, best_chromosome
from .mutation import mutate_pair
from .selection import rank_selection


SelectionFn = Callable[[Sequence[Chromosome], np.random.Generator], Sequence[Chromosome]]
CrossoverFn = Callable[[Chromosome, Chromosome, np.random.Generator], Any]


def breeding_pairs(elites: Sequence[Chromosome]) -> List[Tuple[Chromosome, Chromosome]]:
    """
    Pair even-indexed with odd-indexed chromosomes positionally.

    Raises:
        ConfigurationError: If the number of chromosomes is odd
    """
    if len(elites) % 2 != 0:
        raise ConfigurationError(
            f"Population size must be even to form breeding pairs, got {len(elites)}"
        )
    return list(zip(elites[0::2], elites[1::2]))


def evolve(
    population: Sequence[Chromosome],
    rng: np.random.Generator,
    selection_fn: SelectionFn = rank_selection,
    crossover_fn: CrossoverFn = shuffle_crossover,
    crossover_rate: float = 0.9,
    mutation_rate: float = 0.1,
    elitism: bool = True,
    mutation_fn: Optional[Callable[[], Any]] = None
) -> Population:
    """
    Produce the next generation from the current population.

    Algorithm:
        1. Select a mating pool of clones with selection_fn
        2. Pair pool[0::2] with pool[1::2]
        3. Per pair: crossover with probability crossover_rate, then an
           independent mutation trial for each member
        4. Concatenate the pairs in order
        5. With elitism, drop the first candidate and append a clone of the
           best chromosome of the input population

    Only the selected clones are modified; the input population and its
    chromosomes stay untouched.

    Args:
        population: Current generation (non-empty, even size)
        rng: Random number generator
        selection_fn: Mating pool selection strategy
        crossover_fn: In-place recombination of a pair
        crossover_rate: Probability of applying crossover to a pair
        mutation_rate: Probability of mutating each pair member
        elitism: Whether to carry over the best chromosome
        mutation_fn: Optional allele producer for mutations

    Returns:
        New population of the same size

    Raises:
        ConfigurationError: On empty or odd-sized population, or rates outside [0, 1]
    """
    if len(population) == 0:
        raise ConfigurationError("Cannot evolve an empty population")
    if len(population) % 2 != 0:
        raise ConfigurationError(
            f"Population size must be even to form breeding pairs, got {len(population)}"
        )
    check_rate('crossover_rate', crossover_rate)
    check_rate('mutation_rate', mutation_rate)

    elites = list(selection_fn(population, rng))

    candidates = []
    for first, second in breeding_pairs(elites):
        if rng.random() < crossover_rate:
            crossover_fn(first, second, rng)
        mutate_pair(first, second, mutation_rate, rng, mutation_fn)
        candidates.extend([first, second])

    if elitism:
        # Replaces the first candidate, which is not necessarily the worst
        candidates = candidates[1:] + [best_chromosome(population).clone()]

    return candidates


def iter_generations(
    initial: Sequence[Chromosome],
    generations: int,
    rng: np.random.Generator,
    **evolve_kwargs
) -> Iterator[Population]:
    """
    Yield each successive generation without retaining earlier ones.

    Arguments are validated when this is called, before any generation
    is produced.

    Args:
        initial: Starting population (not yielded)
        generations: Number of generation steps (>= 0)
        rng: Random number generator
        **evolve_kwargs: Forwarded to evolve()

    Raises:
        ConfigurationError: On a negative generation count, an empty or
            odd-sized population, or rates outside [0, 1]
    """
    check_non_negative_int('generations', generations)
    if len(initial) == 0:
        raise ConfigurationError("Cannot evolve an empty population")
    if len(initial) % 2 != 0:
        raise ConfigurationError(
            f"Population size must be even to form breeding pairs, got {len(initial)}"
        )
    check_rate('crossover_rate', evolve_kwargs.get('crossover_rate', 0.9))
    check_rate('mutation_rate', evolve_kwargs.get('mutation_rate', 0.1))

    return _generations(initial, generations, rng, evolve_kwargs)


def _generations(
    initial: Sequence[Chromosome],
    generations: int,
    rng: np.random.Generator,
    evolve_kwargs: Dict[str, Any]
) -> Iterator[Population]:
    population = initial
    for _ in range(generations):
        population = evolve(population, rng, **evolve_kwargs)
        yield population


def run_generations(
    initial: Sequence[Chromosome],
    generations: int,
    rng: np.random.Generator,
    include_initial: bool = False,
    **evolve_kwargs
) -> List[Population]:
    """
    Evolve for a fixed number of generations and keep the full history.

    Args:
        initial: Starting population
        generations: Number of generation steps (>= 0)
        rng: Random number generator
        include_initial: Prepend the starting population to the history
        **evolve_kwargs: Forwarded to evolve()

    Returns:
        List of populations, one per generation step (plus the initial one
        at index 0 when include_initial is set)
    """
    history = [list(initial)] if include_initial else []
    history.extend(iter_generations(initial, generations, rng, **evolve_kwargs))
    return history
