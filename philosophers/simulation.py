"""Running a whole dinner: one thread per philosopher and a supervising loop."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.parsing import Settings
from philosophers.philosopher import Philosopher
from philosophers.table import Table

_SUPERVISE_SECONDS = 0.0002


class Simulation:
    """A table of philosophers run until one dies or all have eaten enough."""

    def __init__(self, settings: Settings, count: int, out: TextIO | None = None) -> None:
        self.table = Table(count, settings, out)
        self.philosophers = [Philosopher(self.table, ident) for ident in range(1, count + 1)]

    def _stop(self, threads: list[threading.Thread]) -> None:
        self.table.signal_all()
        for thread in reversed(threads):
            thread.join()

    def run(self) -> None:
        """Start every philosopher, wait for the end, then stop and join them.

        Raises RuntimeError if a thread cannot be started.
        """
        threads: list[threading.Thread] = []
        try:
            for phil in self.philosophers:
                thread = threading.Thread(
                    target=phil.run, name=f"philosopher-{phil.ident}", daemon=True
                )
                thread.start()
                threads.append(thread)
        except RuntimeError as exc:
            print("pthread_create error", file=sys.stderr)
            self.table.start_clock()
            self._stop(threads)
            raise RuntimeError("pthread_create error") from exc
        self.table.start_clock()
        while not self.table.finished():
            time.sleep(_SUPERVISE_SECONDS)
        self._stop(threads)


def run_simulation(settings: Settings, count: int, out: TextIO | None = None) -> None:
    """Run a simulation of count philosophers to its end."""
    Simulation(settings, count, out).run()