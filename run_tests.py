#!/usr/bin/env python3
"""
Test runner for the genetic algorithm core
"""

import unittest
import sys
from pathlib import Path

# Add current directory to path for imports
sys.path.append(str(Path(__file__).parent))

TEST_DIR = Path(__file__).parent / "tests" / "test_ga_core"


def run_all_tests():
    """Run all test modules"""
    loader = unittest.TestLoader()
    suite = loader.discover(str(TEST_DIR), pattern="test_*.py")

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


def run_integration_test():
    """Run a short seeded evolution and check its basic guarantees"""
    print("\n" + "=" * 50)
    print("INTEGRATION TEST")
    print("=" * 50)

    try:
        from ga_core import create_population, make_rng, max_fitness, run_generations

        rng, seed = make_rng(2024)
        print(f"Creating population (seed {seed})...")
        population = create_population(lambda: int(rng.integers(0, 10)), sum, 50, 10)

        print("Running 75 generations with elitism...")
        history = run_generations(
            population, 75, rng,
            include_initial=True,
            crossover_rate=0.9,
            mutation_rate=0.1,
            elitism=True
        )

        best = [max_fitness(p) for p in history]
        print(f"Max fitness: {best[0]} -> {best[-1]}")

        success = (
            len(history) == 76 and
            all(len(p) == 50 for p in history) and
            all(later >= earlier for earlier, later in zip(best, best[1:]))
        )

        if success:
            print("✓ Integration test PASSED")
        else:
            print("✗ Integration test FAILED")

        return success

    except Exception as e:
        print(f"✗ Integration test FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False


if __name__ == "__main__":
    print("Running Genetic Algorithm Core Tests")
    print("=" * 60)

    # Run unit tests
    print("Running unit tests...")
    unit_success = run_all_tests()

    # Run integration test
    integration_success = run_integration_test()

    # Summary
    print("\n" + "=" * 60)
    print("TEST SUMMARY")
    print("=" * 60)
    print(f"Unit tests: {'PASSED' if unit_success else 'FAILED'}")
    print(f"Integration test: {'PASSED' if integration_success else 'FAILED'}")

    overall_success = unit_success and integration_success
    print(f"Overall: {'PASSED' if overall_success else 'FAILED'}")

    sys.exit(0 if overall_success else 1)
