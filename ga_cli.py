#!/usr/bin/env python3
"""
GA Evolution CLI - Minimal entry point.

This is the command-line interface for the genetic algorithm core.
All configuration is specified in YAML files.

Usage:
    python3 ga_cli.py run_config.yaml
    python3 ga_cli.py --config run_config.yaml
    python3 ga_cli.py --help

Examples:
    # Evolve the default integer population for 75 generations
    python3 ga_cli.py examples/evolve_run.yaml
"""

import sys
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def main():
    """Main entry point for GA CLI."""
    from ga_core.cli import parse_config_path, run_from_config

    try:
        config_path = parse_config_path(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print(__doc__)
        sys.exit(1)

    # Handle help
    if config_path is None:
        print(__doc__)
        sys.exit(0 if len(sys.argv) > 1 else 1)

    try:
        run_from_config(config_path)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
