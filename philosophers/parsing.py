"""Command-line argument validation and parsing for the dining simulation."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile

INT_MAX = 0x7FFFFFFF
MAX_PHILOSOPHERS = 200
MAX_DURATION_MS = 1_000_000

_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing, malformed or out of range."""


@dataclass(frozen=True)
class Settings:
    """Timing parameters shared by every philosopher, in milliseconds."""

    die: int
    eat: int
    sleep: int
    limit: int = INT_MAX


def parse_int(text: str) -> int:
    """Parse a decimal integer that must fit in a signed 32-bit value.

    Leading spaces and tabs are skipped, one sign is accepted and parsing
    stops at the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(" \t")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    magnitude = int(digits) if digits else 0
    if magnitude > INT_MAX:
        raise ArgumentError("invalid arguments")
    return sign * magnitude


def only_digit(text: str) -> bool:
    """Return True if the text holds nothing but ASCII digits."""
    return all(ch in _DIGITS for ch in text)


def _check_count(args: list[str]) -> None:
    if len(args) < 4:
        raise ArgumentError("too few arguments minimum 4 required")
    if len(args) > 5:
        raise ArgumentError("too many arguments maximum 5 required")


def check_args(args: list[str]) -> None:
    """Validate the argument count and that every argument is a plain number."""
    _check_count(args)
    if not all(only_digit(arg) for arg in args):
        raise ArgumentError("invalid arguments")


def parse_args(args: list[str]) -> tuple[Settings, int]:
    """Turn the arguments into settings and a philosopher count."""
    _check_count(args)
    philo, die, eat, sleep = (parse_int(arg) for arg in args[:4])
    limit = parse_int(args[4]) if len(args) == 5 else INT_MAX
    return Settings(die=die, eat=eat, sleep=sleep, limit=limit), philo


def check_limits(settings: Settings, philo: int) -> None:
    """Reject a philosopher count or durations larger than supported."""
    if philo > MAX_PHILOSOPHERS:
        raise ArgumentError("too many philosophers")
    if settings.die > MAX_DURATION_MS:
        raise ArgumentError("time to die too big")
    if settings.eat > MAX_DURATION_MS:
        raise ArgumentError("time to eat too big")
    if settings.sleep > MAX_DURATION_MS:
        raise ArgumentError("time to sleep too big")