import io
import time

from philosophers.parsing import Settings
from philosophers.philosopher import Philosopher
from philosophers.table import Table
from philosophers.timing import now_us


def make(count=2, die=1000, eat=10, sleep=10, limit=0x7FFFFFFF, ident=1):
    out = io.StringIO()
    table = Table(count, Settings(die=die, eat=eat, sleep=sleep, limit=limit), out)
    return table, Philosopher(table, ident), out


def test_fresh_philosopher_is_alive():
    table, phil, out = make()
    assert phil.check_death() is False
    assert table.dead is False
    assert out.getvalue() == ""


def test_starved_philosopher_dies_once():
    table, phil, out = make(die=50)
    phil.last = now_us() - 60_000
    assert phil.check_death() is True
    assert table.dead is True
    assert phil.check_death() is True
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(" 1 died")


def test_sleep_for_zero_completes():
    _, phil, _ = make()
    assert phil.sleep_for(0) is True


def test_sleep_for_waits_requested_time():
    _, phil, _ = make()
    begin = time.monotonic()
    assert phil.sleep_for(20_000) is True
    assert time.monotonic() - begin >= 0.02


def test_sleep_for_interrupted_by_signal():
    table, phil, _ = make()
    table.signal_all()
    begin = time.monotonic()
    assert phil.sleep_for(5_000_000) is False
    assert time.monotonic() - begin < 1.0


def test_sleep_for_interrupted_by_death():
    table, phil, _ = make(die=10)
    assert phil.sleep_for(5_000_000) is False
    assert table.dead is True


def test_take_left_takes_fork_and_logs():
    table, phil, out = make()
    assert phil.take_left() is True
    assert table.take_fork(table.left_fork(1)) is False
    assert out.getvalue().splitlines()[0].endswith(" 1 has taken a fork")


def test_take_right_fails_when_taken_and_signalled():
    table, phil, out = make()
    assert table.take_fork(table.right_fork(1)) is True
    table.signal_all()
    assert phil.take_right() is False
    assert out.getvalue() == ""


def test_eat_with_limit_releases_forks_and_stops_logging():
    table, phil, out = make(eat=5, limit=1)
    assert phil.take_right() and phil.take_left()
    assert phil.eat() is True
    assert phil.meals == 1
    assert table.take_fork(0) is True
    assert table.take_fork(1) is True
    messages = [line.split(" ", 2)[2] for line in out.getvalue().splitlines()]
    assert messages == ["has taken a fork", "has taken a fork", "is eating"]


def test_eat_full_cycle_logs_sleep_and_think():
    _, phil, out = make(eat=5, sleep=5)
    assert phil.try_live() is True
    messages = [line.split(" ", 2)[2] for line in out.getvalue().splitlines()]
    assert messages[-3:] == ["is eating", "is sleeping", "is thinking"]


def test_single_fork_philosopher_cannot_eat():
    table, phil, out = make(count=1, die=30)
    assert phil.try_live() is False
    assert table.dead is True
    assert "is eating" not in out.getvalue()


def test_run_with_zero_limit_counts_as_done():
    table, phil, _ = make(limit=0)
    table.start_clock()
    phil.run()
    assert table.done == 1


def test_run_stops_when_signalled():
    table, phil, out = make(ident=2)
    table.signal_all()
    table.start_clock()
    phil.run()
    assert table.done == 0
    assert out.getvalue() == ""