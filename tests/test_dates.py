from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from milk_subscriptions.core.dates import (
    add_calendar_days,
    add_fixed_days,
    parse_instant,
    to_timestamp,
)

NEW_YORK = ZoneInfo("America/New_York")


def test_date_only_string_is_utc_midnight():
    parsed = parse_instant("2024-01-01")
    assert parsed == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert to_timestamp(parsed) == "2024-01-01T00:00:00.000Z"


def test_date_only_string_ignores_calendar_timezone():
    assert to_timestamp(parse_instant("2024-01-01", NEW_YORK)) == "2024-01-01T00:00:00.000Z"


def test_naive_datetime_uses_calendar_timezone():
    assert to_timestamp(parse_instant("2024-01-10T12:00:00", NEW_YORK)) == "2024-01-10T17:00:00.000Z"


def test_offset_datetime_is_converted_to_utc():
    assert to_timestamp(parse_instant("2024-01-10T05:30:00+05:30")) == "2024-01-10T00:00:00.000Z"
    assert to_timestamp(parse_instant("2024-01-10T10:00:00Z")) == "2024-01-10T10:00:00.000Z"


def test_sub_millisecond_precision_is_truncated():
    assert to_timestamp(parse_instant("2024-01-10T10:00:00.123456Z")) == "2024-01-10T10:00:00.123Z"


def test_numbers_are_epoch_milliseconds():
    assert to_timestamp(parse_instant(1704067200000)) == "2024-01-01T00:00:00.000Z"
    assert to_timestamp(parse_instant(1704067200000.9)) == "2024-01-01T00:00:00.000Z"


@pytest.mark.parametrize(
    "value",
    ["not-a-date", "2024-13-01", "2024-02-30", "", "   ", True, None, {"date": "2024-01-01"}, ["2024-01-01"],
     float("nan"), float("inf"), 10**20],
)
def test_unparseable_values_return_none(value):
    assert parse_instant(value) is None


def test_calendar_days_roll_over_month_and_leap_day():
    start = datetime(2024, 2, 10, tzinfo=timezone.utc)
    assert to_timestamp(add_calendar_days(start, 24)) == "2024-03-05T00:00:00.000Z"
    end_of_year = datetime(2024, 12, 20, 8, 15, tzinfo=timezone.utc)
    assert to_timestamp(add_calendar_days(end_of_year, 24)) == "2025-01-13T08:15:00.000Z"


def test_fixed_and_calendar_addition_agree_in_utc():
    start = datetime(2024, 3, 9, 12, tzinfo=timezone.utc)
    assert add_fixed_days(start, 2) == add_calendar_days(start, 2)


def test_fixed_and_calendar_addition_diverge_across_dst():
    start = parse_instant("2024-03-09T12:00:00", NEW_YORK)
    assert to_timestamp(add_fixed_days(start, 1)) == "2024-03-10T17:00:00.000Z"
    assert to_timestamp(add_calendar_days(start, 1, NEW_YORK)) == "2024-03-10T16:00:00.000Z"


def test_timestamp_pads_small_years():
    assert to_timestamp(datetime(999, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc)) == "0999-01-02T03:04:05.006Z"
