# dining-philo

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. A philosopher takes the fork on each side, eats, puts the forks
down, sleeps and thinks. This repeats until a philosopher starves or every
philosopher has eaten enough meals. A separate monitor watches for both.

## Installation

    pip install .

## Usage

    philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]

The same command can also be started as `python -m dining_philo.cli`.

All times are in milliseconds. Some examples:

    philo 5 800 200 200
    philo 4 410 200 200 7
    philo 1 800 200 200

Every event is printed as one line: the number of milliseconds since the start,
the philosopher's number (from 1), and what happened. The possible events are
`has taken a fork`, `is eating`, `is sleeping`, `is thinking` and `died`. For
example:

    0 2 has taken a fork
    0 2 has taken a fork
    0 2 is eating
    200 2 is sleeping
    400 2 is thinking
    ...
    810 3 died

The simulation stops when a philosopher goes `time_to_die` milliseconds or more
without starting a meal. If `number_of_meals` is given, it also stops once every
philosopher has eaten at least that many times, and then prints
`ALL MEALS HAVE BEEN EATEN`. Odd-numbered philosophers wait one millisecond
before reaching for their first fork, and each philosopher picks up the
lower-numbered of its two forks first.

With a single philosopher there is only one fork: the philosopher takes it,
waits `time_to_die` milliseconds and dies.

Numbers are read leniently: leading whitespace is skipped, a single `+` or `-`
sign is accepted, and reading stops at the first non-digit. Text with no
leading digits, or with more than one sign character, reads as 0.

Arguments must satisfy these limits:

- between 1 and 250 philosophers;
- each of the three times is at least 1;
- `number_of_meals`, if given, is 0 or more.

Invalid values print a message and exit with status 1. A wrong number of
arguments exits with status 1 without a message.

## Library use

    import sys
    from dining_philo.config import parse_settings
    from dining_philo.simulation import Simulation

    settings = parse_settings(["5", "800", "200", "200", "3"])
    Simulation(settings, sys.stdout).run()

- `dining_philo.config.parse_int(text)` reads one number the lenient way
  described above.
- `dining_philo.config.parse_settings(args)` takes the arguments without the
  program name and returns a `Settings`. It raises `ConfigError` (a
  `ValueError`) for a wrong number of arguments or values out of range.
- `Settings(philosophers, time_to_die, time_to_eat, time_to_sleep, meals=None)`
  is a frozen dataclass that checks the same limits when it is built.
- `dining_philo.simulation.Simulation(settings, out=None)` writes its lines to
  `out`, or to standard output when `out` is `None`. `run()` blocks until the
  simulation ends; `stop()` and `is_stopped()` end it and ask whether it has
  ended.

## Running the tests

    pip install ".[test]"
    pytest