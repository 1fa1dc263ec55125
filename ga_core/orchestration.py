"""
Orchestration module for the GA core.

Builds a population from a run configuration and drives it through the
requested number of generations, reporting progress along the way.
"""

from typing import Any, Dict, List

from .config import FITNESS_FUNCTIONS, make_rng, settings_from_config
from .data_models import Population, create_population, max_fitness
from .evolution import iter_generations
from .io_utils import save_history_to_csv


def run_simulation(run_config: Dict[str, Any]) -> List[Population]:
    """
    Evolve an integer-allele population as described by run_config.

    Args:
        run_config: Validated run configuration dict (see DEFAULT_RUN_CONFIG)

    Algorithm:
        1. Build EvolutionSettings and the RNG (report the seed)
        2. Create the initial population with alleles drawn from [low, high)
        3. Evolve generation by generation, collecting the history
        4. Optionally export the history projection to CSV
        5. Print summary report

    Returns:
        History of populations, initial population at index 0
    """
    print("=" * 70)
    print("EVOLUTION RUN")
    print("=" * 70)

    settings = settings_from_config(run_config)

    rng, seed = make_rng(run_config.get('random_seed'))
    print(f"Random seed: {seed}")

    allele_config = run_config.get('allele', {})
    low = allele_config.get('low', 0)
    high = allele_config.get('high', 10)

    def initializer():
        return int(rng.integers(low, high))

    fitness_name = run_config.get('fitness', 'sum')
    fitness_fn = FITNESS_FUNCTIONS[fitness_name]

    print(f"Population: {settings.population_size} chromosomes x {settings.chromosome_size} loci")
    print(f"Alleles: [{low}, {high})  Fitness: {fitness_name}")
    print(f"Crossover rate: {settings.crossover_rate}  Mutation rate: {settings.mutation_rate}  "
          f"Elitism: {settings.elitism}")
    print()

    initial = create_population(
        initializer,
        fitness_fn,
        settings.population_size,
        settings.chromosome_size
    )

    print(f"Evolving {settings.generations} generations...")
    history = [initial]
    generations = iter_generations(
        initial,
        settings.generations,
        rng,
        crossover_rate=settings.crossover_rate,
        mutation_rate=settings.mutation_rate,
        elitism=settings.elitism
    )
    for g, population in enumerate(generations, start=1):
        history.append(population)

        # Progress reporting
        if g % 10 == 0 or g == settings.generations:
            print(f"  Generation {g}/{settings.generations}: max fitness {max_fitness(population)}")

    output_config = run_config.get('output', {})
    history_csv = output_config.get('history_csv')
    if history_csv:
        csv_path = save_history_to_csv(
            history, history_csv, overwrite=output_config.get('overwrite', False)
        )
        print(f"History written to: {csv_path}")

    # Print summary
    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"max. fitness of the original population: {max_fitness(history[0])}")
    print(f"max. fitness of the resulting population: {max_fitness(history[-1])}")

    return history
