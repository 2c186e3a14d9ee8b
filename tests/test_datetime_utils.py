from datetime import date, datetime, time

import pytest

from employee_attendance.common.datetime_utils import (
    combine,
    days_in_range,
    month_range,
    parse_iso_date_or_none,
    parse_time_of_day,
)


@pytest.mark.parametrize(
    "value, expected",
    [("08:30", time(8, 30)), ("17:05:09", time(17, 5, 9)), (" 9:00 ", time(9, 0)), ("", None), ("noon", None), (None, None)],
)
def test_parse_time_of_day(value, expected):
    assert parse_time_of_day(value) == expected


def test_parse_iso_date_or_none():
    assert parse_iso_date_or_none("2026-03-04") == date(2026, 3, 4)
    assert parse_iso_date_or_none("04/03/2026") is None


def test_month_range_handles_leap_years():
    assert month_range(2028, 2) == (date(2028, 2, 1), date(2028, 2, 29))
    assert month_range(2026, 2)[1] == date(2026, 2, 28)


def test_days_in_range_is_inclusive():
    assert days_in_range(date(2026, 4, 1), date(2026, 4, 30)) == 30
    assert days_in_range(date(2026, 4, 1), date(2026, 4, 1)) == 1
    assert days_in_range(date(2026, 4, 2), date(2026, 4, 1)) == 0


def test_combine_drops_microseconds():
    assert combine(date(2026, 3, 4), time(8, 0, 1, 500)) == datetime(2026, 3, 4, 8, 0, 1)
