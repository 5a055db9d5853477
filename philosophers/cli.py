"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys

from philosophers.parsing import ArgumentError, check_args, check_limits, parse_args
from philosophers.simulation import run_simulation


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return an exit status.

    Arguments: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat].
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        check_args(args)
        settings, philo = parse_args(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        check_limits(settings, philo)
    except ArgumentError as exc:
        print(exc)
        return 1
    try:
        run_simulation(settings, philo)
    except RuntimeError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())