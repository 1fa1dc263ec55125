"""
Data models for the GA core.

Core data structures representing chromosomes and populations, plus the
population-level fitness queries used by the evolution driver.
"""

from typing import Any, Callable, List, Optional, Sequence, Tuple
import numpy as np

from .config import ConfigurationError, check_positive_int
from .func_utils import identity


class Chromosome:
    """
    A single candidate solution (individual in GA population).

    The genotype is a fixed-length list of alleles exclusively owned by this
    instance. The phenotype is derived from it on access by applying one
    converter per locus, and fitness is derived from the phenotype on every
    call, so it always reflects the current genotype.

    Attributes:
        initializer: Zero-argument callable producing one random allele
        fitness_fn: Maps a phenotype list to a comparable fitness value
        size: Genotype length
        to_int: Maps an allele to an integer for row projections
        converters: One genotype-to-phenotype function per locus
    """

    def __init__(
        self,
        initializer: Callable[[], Any],
        fitness_fn: Callable[[List[Any]], Any],
        size: int,
        to_int: Callable[[Any], int] = int,
        converters: Optional[Sequence[Callable[[Any], Any]]] = None,
        genotype: Optional[Sequence[Any]] = None
    ):
        """
        Create a chromosome.

        Args:
            initializer: Zero-argument callable producing one random allele
            fitness_fn: Maps a phenotype list to a comparable fitness value
            size: Genotype length (> 0)
            to_int: Maps an allele to an integer for row projections
            converters: Optional per-locus converters (length must equal size)
            genotype: Optional starting genotype; drawn from initializer if omitted

        Raises:
            ConfigurationError: If size is not positive, or converters/genotype
                have the wrong length
        """
        check_positive_int('size', size)

        self.initializer = initializer
        self.fitness_fn = fitness_fn
        self.size = size
        self.to_int = to_int

        if converters is None:
            self._has_converters = False
            self.converters: Tuple[Callable[[Any], Any], ...] = (identity,) * size
        else:
            converters = tuple(converters)
            if len(converters) != size:
                raise ConfigurationError(
                    f"Expected {size} converters (one per locus), got {len(converters)}"
                )
            self._has_converters = True
            self.converters = converters

        if genotype is None:
            self._genotype = [initializer() for _ in range(size)]
        else:
            if len(genotype) != size:
                raise ConfigurationError(
                    f"Genotype length {len(genotype)} does not match chromosome size {size}"
                )
            self._genotype = list(genotype)

    @property
    def genotype(self) -> List[Any]:
        """The owned allele list (mutating it mutates the chromosome)."""
        return self._genotype

    @genotype.setter
    def genotype(self, value: Sequence[Any]) -> None:
        if len(value) != self.size:
            raise ValueError(
                f"Genotype length {len(value)} does not match chromosome size {self.size}"
            )
        self._genotype = list(value)

    @property
    def phenotype(self) -> List[Any]:
        return [convert(allele) for convert, allele in zip(self.converters, self._genotype)]

    @property
    def has_converters(self) -> bool:
        return self._has_converters

    def fitness(self) -> Any:
        """Evaluate the fitness function on the current phenotype."""
        return self.fitness_fn(self.phenotype)

    def clone(self) -> "Chromosome":
        """
        Create a deep copy of this chromosome.

        Returns:
            New Chromosome with the same parameters and a copied genotype
        """
        return Chromosome(
            initializer=self.initializer,
            fitness_fn=self.fitness_fn,
            size=self.size,
            to_int=self.to_int,
            converters=self.converters if self._has_converters else None,
            genotype=self._genotype
        )

    def mutate(
        self,
        rng: np.random.Generator,
        mutation_fn: Optional[Callable[[], Any]] = None
    ) -> int:
        """
        Replace the allele at one uniformly chosen locus.

        Args:
            rng: Random number generator
            mutation_fn: Zero-argument allele producer; defaults to the initializer

        Returns:
            Index of the mutated locus
        """
        locus = int(rng.integers(0, self.size))
        produce = mutation_fn if mutation_fn is not None else self.initializer
        self._genotype[locus] = produce()
        return locus

    def to_rows(self) -> List[List[int]]:
        """
        Integer projection used by external visualization.

        Returns:
            [integer-mapped genotype, integer-mapped phenotype]
        """
        return [
            [self.to_int(allele) for allele in self._genotype],
            [self.to_int(value) for value in self.phenotype],
        ]

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Chromosome(genotype={self._genotype!r})"


Population = List[Chromosome]


def create_population(
    initializer: Callable[[], Any],
    fitness_fn: Callable[[List[Any]], Any],
    population_size: int,
    chromosome_size: int,
    to_int: Callable[[Any], int] = int,
    converters: Optional[Sequence[Callable[[Any], Any]]] = None
) -> Population:
    """
    Generate a population of independently initialized chromosomes.

    Args:
        initializer: Zero-argument callable producing one random allele
        fitness_fn: Maps a phenotype list to a comparable fitness value
        population_size: Number of chromosomes (> 0)
        chromosome_size: Genotype length of every chromosome (> 0)
        to_int: Maps an allele to an integer for row projections
        converters: Optional per-locus converters shared by all chromosomes

    Returns:
        List of population_size chromosomes

    Raises:
        ConfigurationError: If either size is not a positive integer
    """
    check_positive_int('population_size', population_size)
    check_positive_int('chromosome_size', chromosome_size)

    return [
        Chromosome(initializer, fitness_fn, chromosome_size, to_int=to_int, converters=converters)
        for _ in range(population_size)
    ]


def best_chromosome(population: Sequence[Chromosome]) -> Chromosome:
    """
    Find the fittest chromosome.

    Scans the whole population; on ties the earliest chromosome wins.

    Raises:
        ValueError: If population is empty
    """
    if not population:
        raise ValueError("Cannot pick the best chromosome of an empty population")

    best = population[0]
    best_fitness = best.fitness()
    for chromosome in population[1:]:
        fitness = chromosome.fitness()
        if fitness > best_fitness:
            best, best_fitness = chromosome, fitness
    return best


def max_fitness(population: Sequence[Chromosome]) -> Any:
    """Fitness value of the fittest chromosome."""
    return best_chromosome(population).fitness()


def population_fitness(population: Sequence[Chromosome]) -> List[Any]:
    return [chromosome.fitness() for chromosome in population]
