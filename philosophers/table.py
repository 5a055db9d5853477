"""Shared state of the dining table: forks, stop signals, progress and output."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from philosophers.parsing import Settings
from philosophers.timing import delta_utime, now_us

_DEAD = -1


class Table:
    """Forks, per-philosopher stop signals and the shared progress counter.

    The progress counter holds how many philosophers have finished their
    meals, or -1 once one of them has died. After a death nothing more is
    logged.
    """

    def __init__(self, count: int, settings: Settings, out: TextIO | None = None) -> None:
        self.count = count
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self._forks = [True] * count
        self._fork_locks = [threading.Lock() for _ in range(count)]
        self._signals = [threading.Event() for _ in range(count)]
        self._control = threading.Lock()
        self._progress = 0
        self._print = threading.Lock()
        self.start = now_us()
        self.started = threading.Event()

    def left_fork(self, ident: int) -> int:
        """Index of the fork on the left of philosopher ident (1-based)."""
        return ident - 1

    def right_fork(self, ident: int) -> int:
        """Index of the fork on the right of philosopher ident (1-based)."""
        return ident % self.count

    def take_fork(self, index: int) -> bool:
        """Pick up a fork if it is on the table; return whether it was taken."""
        with self._fork_locks[index]:
            if self._forks[index]:
                self._forks[index] = False
                return True
            return False

    def release_fork(self, index: int) -> None:
        """Put a fork back on the table."""
        with self._fork_locks[index]:
            self._forks[index] = True

    def _write(self, ident: int, message: str) -> None:
        with self._print:
            elapsed_ms = delta_utime(self.start, now_us()) // 1000
            print(f"{elapsed_ms} {ident} {message}", file=self.out, flush=True)

    def log(self, ident: int, message: str) -> None:
        """Print a timestamped event unless a philosopher has died."""
        with self._control:
            if self._progress >= 0:
                self._write(ident, message)

    def report_death(self, ident: int) -> bool:
        """Record a death; only the first one is printed. Return whether it was."""
        with self._control:
            if self._progress == _DEAD:
                return False
            self._progress = _DEAD
        self._write(ident, "died")
        return True

    def philosopher_done(self) -> None:
        """Count one more philosopher as having eaten enough."""
        with self._control:
            if self._progress != _DEAD:
                self._progress += 1

    @property
    def done(self) -> int:
        """Number of philosophers that have finished, or -1 after a death."""
        with self._control:
            return self._progress

    @property
    def dead(self) -> bool:
        """True once a philosopher has died."""
        return self.done == _DEAD

    def is_signalled(self, ident: int) -> bool:
        """Whether philosopher ident has been told to stop."""
        return self._signals[ident - 1].is_set()

    def signal_all(self) -> None:
        """Tell every philosopher to stop."""
        for signal in self._signals:
            signal.set()

    def finished(self) -> bool:
        """True once someone died or every philosopher has eaten enough."""
        with self._control:
            return self._progress == _DEAD or self._progress >= self.count

    def start_clock(self) -> None:
        """Reset the reference time and release the waiting philosophers."""
        self.start = now_us()
        self.started.set()