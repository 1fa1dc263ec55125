"""
Tests for GA operations: selection, crossover, and mutation.
"""

import unittest
from unittest.mock import Mock

import numpy as np

from ga_core.data_models import Chromosome
from ga_core.selection import tournament, rank_selection
from ga_core.crossover import shuffle_crossover
from ga_core.mutation import maybe_mutate, mutate_pair


def make_chromosome(genes, fitness_fn=sum):
    return Chromosome(lambda: 0, fitness_fn, len(genes), genotype=genes)


class TestSelection(unittest.TestCase):
    """Test binary tournament selection."""

    def setUp(self):
        self.low = make_chromosome([1, 2])
        self.high = make_chromosome([3, 4])
        self.population = [self.low, self.high]

    def test_tournament_picks_fitter(self):
        self.assertIs(tournament(self.low, self.high), self.high)
        self.assertIs(tournament(self.high, self.low), self.high)

    def test_tournament_tie_keeps_first(self):
        a = make_chromosome([2, 2])
        b = make_chromosome([1, 3])

        self.assertIs(tournament(a, b), a)
        self.assertIs(tournament(b, a), b)

    def test_selection_forced_draws(self):
        """Index 0 vs 1 every time: two clones of the fitter chromosome."""
        rng = Mock()
        rng.integers.side_effect = [0, 1, 0, 1]

        selected = rank_selection(self.population, rng)

        self.assertEqual(len(selected), 2)
        for chromosome in selected:
            self.assertEqual(chromosome.genotype, [3, 4])
            self.assertEqual(chromosome.fitness(), 7)
            self.assertIsNot(chromosome, self.high)
        rng.integers.assert_called_with(0, 2)

    def test_selection_returns_independent_clones(self):
        selected = rank_selection(self.population, np.random.default_rng(1))

        for chromosome in selected:
            self.assertNotIn(chromosome, self.population)
            chromosome.genotype[0] = -100

        self.assertEqual(self.low.genotype, [1, 2])
        self.assertEqual(self.high.genotype, [3, 4])

    def test_selection_single_chromosome(self):
        only = make_chromosome([5])
        selected = rank_selection([only], np.random.default_rng(0))

        self.assertEqual(len(selected), 1)
        self.assertEqual(selected[0].genotype, [5])
        self.assertIsNot(selected[0], only)

    def test_selection_preserves_size(self):
        rng = np.random.default_rng(11)
        population = [make_chromosome([i, i]) for i in range(9)]

        self.assertEqual(len(rank_selection(population, rng)), 9)

    def test_selection_biased_towards_fitness(self):
        rng = np.random.default_rng(5)
        population = [make_chromosome([i]) for i in range(10)]

        selected = rank_selection(population * 10, rng)
        mean_selected = np.mean([c.fitness() for c in selected])

        self.assertGreater(mean_selected, 4.5)

    def test_selection_empty_population(self):
        with self.assertRaises(ValueError):
            rank_selection([], np.random.default_rng(0))

    def test_incomparable_fitness_propagates(self):
        population = [
            make_chromosome([1], fitness_fn=lambda p: None),
            make_chromosome([2], fitness_fn=lambda p: "x"),
        ]
        rng = Mock()
        rng.integers.side_effect = [0, 1, 0, 1]

        with self.assertRaises(TypeError):
            rank_selection(population, rng)


class TestCrossover(unittest.TestCase):
    """Test shuffle crossover."""

    def test_full_swap(self):
        first = make_chromosome([1, 2, 3])
        second = make_chromosome([4, 5, 6])
        rng = Mock()
        rng.integers.return_value = 1

        mask = shuffle_crossover(first, second, rng)

        self.assertEqual(first.genotype, [4, 5, 6])
        self.assertEqual(second.genotype, [1, 2, 3])
        self.assertEqual(mask, [0, 1, 2])

    def test_no_swap(self):
        first = make_chromosome([1, 2, 3])
        second = make_chromosome([4, 5, 6])
        rng = Mock()
        rng.integers.return_value = 0

        mask = shuffle_crossover(first, second, rng)

        self.assertEqual(first.genotype, [1, 2, 3])
        self.assertEqual(second.genotype, [4, 5, 6])
        self.assertEqual(mask, [])

    def test_partial_swap(self):
        first = make_chromosome([1, 2, 3, 4])
        second = make_chromosome([5, 6, 7, 8])
        rng = Mock()
        rng.integers.side_effect = [1, 0, 0, 1]

        mask = shuffle_crossover(first, second, rng)

        self.assertEqual(first.genotype, [5, 2, 3, 8])
        self.assertEqual(second.genotype, [1, 6, 7, 4])
        self.assertEqual(mask, [0, 3])

    def test_in_place_and_allele_conservation(self):
        rng = np.random.default_rng(9)
        first = make_chromosome(list(range(10)))
        second = make_chromosome(list(range(10, 20)))
        first_genes = first.genotype
        second_genes = second.genotype

        shuffle_crossover(first, second, rng)

        self.assertIs(first.genotype, first_genes)
        self.assertIs(second.genotype, second_genes)
        for locus in range(10):
            self.assertEqual(
                sorted([first.genotype[locus], second.genotype[locus]]),
                [locus, locus + 10]
            )

    def test_length_mismatch_fails_before_change(self):
        first = make_chromosome([1, 2, 3])
        second = make_chromosome([4, 5])
        rng = Mock()
        rng.integers.return_value = 1

        with self.assertRaises(ValueError):
            shuffle_crossover(first, second, rng)

        self.assertEqual(first.genotype, [1, 2, 3])
        self.assertEqual(second.genotype, [4, 5])
        rng.integers.assert_not_called()


class TestMutation(unittest.TestCase):
    """Test per-pair mutation policy."""

    def test_rate_zero_never_mutates(self):
        rng = np.random.default_rng(2)
        first = make_chromosome([1, 1, 1])
        second = make_chromosome([2, 2, 2])

        for _ in range(20):
            self.assertEqual(mutate_pair(first, second, 0.0, rng, lambda: 9), (False, False))

        self.assertEqual(first.genotype, [1, 1, 1])
        self.assertEqual(second.genotype, [2, 2, 2])

    def test_rate_one_always_mutates(self):
        rng = np.random.default_rng(2)
        first = make_chromosome([1, 1, 1])
        second = make_chromosome([2, 2, 2])

        self.assertEqual(mutate_pair(first, second, 1.0, rng, lambda: 9), (True, True))
        self.assertEqual(first.genotype.count(9), 1)
        self.assertEqual(second.genotype.count(9), 1)

    def test_independent_trials(self):
        first = make_chromosome([0, 0])
        second = make_chromosome([0, 0])
        rng = Mock()
        rng.random.side_effect = [0.9, 0.1]
        rng.integers.return_value = 1

        result = mutate_pair(first, second, 0.5, rng, lambda: 7)

        self.assertEqual(result, (False, True))
        self.assertEqual(first.genotype, [0, 0])
        self.assertEqual(second.genotype, [0, 7])
        self.assertEqual(rng.random.call_count, 2)

    def test_maybe_mutate_threshold_is_strict(self):
        chromosome = make_chromosome([0, 0])
        rng = Mock()
        rng.random.return_value = 0.5

        self.assertFalse(maybe_mutate(chromosome, 0.5, rng))
        self.assertEqual(chromosome.genotype, [0, 0])


if __name__ == '__main__':
    unittest.main()
