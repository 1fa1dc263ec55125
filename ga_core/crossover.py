"""
Crossover operators for the GA core.

Implements locus-wise shuffle crossover, which recombines two chromosomes
in place.
"""

from typing import List
import numpy as np

from .data_models import Chromosome


def shuffle_crossover(
    first: Chromosome,
    second: Chromosome,
    rng: np.random.Generator
) -> List[int]:
    """
    Swap alleles between two chromosomes locus by locus.

    For every locus a fair coin is drawn; on heads the two chromosomes
    exchange their alleles at that locus. Both genotypes are modified in
    place and no new chromosomes are created.

    Args:
        first: First chromosome (modified in place)
        second: Second chromosome (modified in place)
        rng: Random number generator

    Returns:
        Sorted list of swapped locus indices (the crossover mask)

    Raises:
        ValueError: If the genotypes differ in length
    """
    genes_a = first.genotype
    genes_b = second.genotype

    if len(genes_a) != len(genes_b):
        raise ValueError(
            f"Cannot cross chromosomes of different length: {len(genes_a)} vs {len(genes_b)}"
        )

    swapped = []
    for locus in range(len(genes_a)):
        if int(rng.integers(0, 2)) == 1:
            genes_a[locus], genes_b[locus] = genes_b[locus], genes_a[locus]
            swapped.append(locus)

    return swapped
