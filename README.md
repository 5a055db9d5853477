# philosophers

A simulation of the dining philosophers problem. Every philosopher runs
on its own thread. Philosophers sit at a round table with one fork
between each pair of neighbours, and a philosopher must hold both forks
beside them to eat. The simulation ends when a philosopher starves, or
when every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

The same command is available as `python -m philosophers.cli`.

All times are in milliseconds. Every argument must consist of digits
only (no sign, no spaces). Limits:

- at most 200 philosophers
- each of `time_to_die`, `time_to_eat` and `time_to_sleep` at most 1000000
- every value must fit in a signed 32-bit integer

When `number_of_meals` is left out, the philosophers keep eating until
one of them dies.

Example:

```
philo 5 800 200 200 7
```

Every event prints one line in the form `<ms since start> <philosopher> <action>`:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The actions are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Only the first death is printed, and no
further lines follow it.

The command exits with status 1 when it gets too few or too many
arguments, arguments that are not plain numbers, values outside the
limits, or when a thread cannot be started. Argument errors are
reported on standard error; limit errors are printed on standard output.

## Library use

```python
import sys
from philosophers.parsing import check_args, parse_args, check_limits
from philosophers.simulation import run_simulation

args = ["4", "410", "200", "200", "3"]
check_args(args)
settings, philo = parse_args(args)
check_limits(settings, philo)
run_simulation(settings, philo, sys.stdout)
```

- `philosophers.parsing`: `Settings` (die, eat, sleep, limit), `parse_int`,
  `only_digit`, `check_args`, `parse_args`, `check_limits`. The checks raise
  `ArgumentError`, a subclass of `ValueError`.
- `philosophers.table`: `Table`, the shared forks, stop signals, meal
  progress and timestamped output.
- `philosophers.philosopher`: `Philosopher`, the routine of one diner.
- `philosophers.simulation`: `Simulation` and `run_simulation`, which run
  one thread per philosopher until the dinner ends. A thread that cannot
  be started raises `RuntimeError`.
- `philosophers.timing`: `now_us`, `delta_utime`, `format_number`.
- `philosophers.cli`: `main(argv=None)`, returning the exit status.