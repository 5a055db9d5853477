"""Behaviour of one philosopher: taking forks, eating, sleeping and thinking."""

from __future__ import annotations

import time

from philosophers.table import Table
from philosophers.timing import delta_utime, now_us

_POLL_SECONDS = 0.0001
_FORK_RETRY_US = 100
_THINK_US = 500


class Philosopher:
    """One diner seated at a table, identified by a 1-based number.

    The methods that can be interrupted return False when the philosopher
    has to stop, either because it was told to or because someone died.
    """

    def __init__(self, table: Table, ident: int) -> None:
        self.table = table
        self.ident = ident
        self.settings = table.settings
        self.last = now_us()
        self.meals = 0

    def run(self) -> None:
        """Live until told to stop, dead, or fed the required number of times."""
        self.last = now_us()
        self.table.started.wait()
        if self.ident % 2 == 0 and not self.sleep_for(self.settings.sleep * 500):
            return
        while not self.table.is_signalled(self.ident):
            if self.meals >= self.settings.limit:
                self.table.philosopher_done()
                return
            if not self.try_live():
                return

    def check_death(self) -> bool:
        """Return True, after reporting it, if the philosopher has starved."""
        if delta_utime(self.last, now_us()) > self.settings.die * 1000:
            self.table.report_death(self.ident)
            return True
        return False

    def sleep_for(self, useconds: int) -> bool:
        """Wait useconds microseconds; return False if interrupted by a stop or death."""
        begin = now_us()
        while delta_utime(begin, now_us()) < useconds:
            if self.table.is_signalled(self.ident):
                return False
            time.sleep(_POLL_SECONDS)
            if self.check_death():
                return False
        return True

    def _take(self, index: int) -> bool:
        while not self.table.is_signalled(self.ident):
            if self.table.take_fork(index):
                self.table.log(self.ident, "has taken a fork")
                return True
            if not self.sleep_for(_FORK_RETRY_US):
                return False
        return False

    def take_left(self) -> bool:
        """Wait for the left fork and take it; return False if interrupted."""
        return self._take(self.table.left_fork(self.ident))

    def take_right(self) -> bool:
        """Wait for the right fork and take it; return False if interrupted."""
        return self._take(self.table.right_fork(self.ident))

    def try_live(self) -> bool:
        """Take both forks and eat once; return False if the philosopher must stop."""
        if self.ident % 2 == 0:
            order = (self.take_left, self.take_right)
        else:
            order = (self.take_right, self.take_left)
        if not all(take() for take in order):
            return False
        if self.check_death():
            return False
        return self.eat()

    def eat(self) -> bool:
        """Eat, put the forks back, then sleep and think unless the meal limit is met."""
        self.table.log(self.ident, "is eating")
        self.last = now_us()
        if not self.sleep_for(self.settings.eat * 1000):
            return False
        self.meals += 1
        self.table.release_fork(self.table.left_fork(self.ident))
        self.table.release_fork(self.table.right_fork(self.ident))
        if self.meals >= self.settings.limit:
            return True
        self.table.log(self.ident, "is sleeping")
        if not self.sleep_for(self.settings.sleep * 1000):
            return False
        self.table.log(self.ident, "is thinking")
        return self.sleep_for(_THINK_US)