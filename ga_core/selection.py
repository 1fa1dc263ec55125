"""
Selection operators for the GA core.

Implements binary tournament ("rank") selection.
"""

from typing import List, Sequence
import numpy as np

from .data_models import Chromosome


def tournament(first: Chromosome, second: Chromosome) -> Chromosome:
    """
    Pick the fitter of two chromosomes.

    The second chromosome only wins with strictly greater fitness, so on a
    tie the first one is kept.
    """
    if second.fitness() > first.fitness():
        return second
    return first


def rank_selection(
    population: Sequence[Chromosome],
    rng: np.random.Generator
) -> List[Chromosome]:
    """
    Select a same-size mating pool by repeated binary tournaments.

    For each slot two chromosomes are drawn uniformly with replacement and a
    clone of the tournament winner is kept. The result never shares
    chromosome instances with the input population.

    Args:
        population: Current population
        rng: Random number generator

    Returns:
        List of len(population) cloned chromosomes

    Raises:
        ValueError: If population is empty
        TypeError: If fitness values cannot be compared
    """
    population_size = len(population)
    if population_size == 0:
        raise ValueError("Cannot select from an empty population")

    selected = []
    for _ in range(population_size):
        first = population[int(rng.integers(0, population_size))]
        second = population[int(rng.integers(0, population_size))]
        selected.append(tournament(first, second).clone())

    return selected
