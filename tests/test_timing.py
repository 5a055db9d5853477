import time

import pytest

from philosophers.timing import delta_utime, format_number, now_us


def test_now_us_is_monotonic():
    first = now_us()
    time.sleep(0.002)
    second = now_us()
    assert second > first
    assert delta_utime(first, second) >= 1000


def test_delta_utime_is_difference():
    assert delta_utime(1_000_000, 1_500_250) == 500_250
    assert delta_utime(10, 10) == 0


def test_delta_utime_antisymmetric():
    assert delta_utime(3, 9) == -delta_utime(9, 3)


def test_format_number_zero():
    assert format_number(0) == "0"


def test_format_number_negative():
    assert format_number(-42) == "-42"


@pytest.mark.parametrize("value", [1, 9, 10, -1, -10, 2**63 - 1, -(2**63)])
def test_format_number_round_trip(value):
    assert int(format_number(value)) == value