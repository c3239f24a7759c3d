"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dining_philo.config import ConfigError, parse_settings
from dining_philo.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with the given arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        return 1
    try:
        settings = parse_settings(args)
    except ConfigError as error:
        print(error)
        return 1
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())