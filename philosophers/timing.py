"""Microsecond clock helpers."""

from __future__ import annotations

import time


def now_us() -> int:
    """Current time of a monotonic clock, in microseconds."""
    return time.monotonic_ns() // 1000


def delta_utime(a: int, b: int) -> int:
    """Microseconds elapsed from timestamp a to timestamp b."""
    return b - a


def format_number(nbr: int) -> str:
    """Decimal text of an integer, with a leading minus when negative."""
    return f"{nbr:d}"