import pytest

from models import RawDuration, RoundedDuration
from timesheet.rounding import round_to_nearest_minute


@pytest.mark.parametrize("seconds", range(0, 30))
def test_seconds_below_30_round_down(seconds):
    assert round_to_nearest_minute(RawDuration(1, 10, seconds)) == RoundedDuration(1, 10)


@pytest.mark.parametrize("seconds", range(30, 60))
def test_seconds_from_30_round_up(seconds):
    assert round_to_nearest_minute(RawDuration(1, 10, seconds)) == RoundedDuration(1, 11)


def test_round_up_carries_into_hours():
    assert round_to_nearest_minute(RawDuration(7, 59, 30)) == RoundedDuration(8, 0)
    assert round_to_nearest_minute(RawDuration(999, 59, 59)) == RoundedDuration(1000, 0)


def test_total_hours_example():
    assert round_to_nearest_minute(RawDuration(37, 15, 45)) == RoundedDuration(37, 16)


@pytest.mark.parametrize("raw", [RawDuration(0, 0, 0), RawDuration(5, 45, 10), RawDuration(12, 59, 45)])
def test_rounding_is_idempotent(raw):
    once = round_to_nearest_minute(raw)
    twice = round_to_nearest_minute(RawDuration(once.hours, once.minutes, 0))
    assert twice == once
