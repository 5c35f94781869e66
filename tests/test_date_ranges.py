"""Tests for date-range classification."""

from datetime import date, datetime, timedelta, timezone

import pytest

from eventready.core.date_ranges import DateRange, days_until, in_range, to_local_date, within_days


@pytest.fixture
def now():
    # Late evening, to catch anything that truncates via UTC
    return datetime(2025, 1, 15, 23, 45)


@pytest.fixture
def today():
    return date(2025, 1, 15)


class TestDateRangeParse:
    def test_known(self):
        assert DateRange.parse("this_week") is DateRange.THIS_WEEK

    def test_unknown_means_all(self):
        assert DateRange.parse("fortnight") is DateRange.ALL
        assert DateRange.parse(None) is DateRange.ALL


class TestToLocalDate:
    def test_aware_datetime_not_shifted_to_utc(self):
        pacific = timezone(timedelta(hours=-8))
        assert to_local_date(datetime(2025, 1, 15, 20, 0, tzinfo=pacific)) == date(2025, 1, 15)

    def test_plain_date(self, today):
        assert to_local_date(today) == today


class TestInRange:
    def test_today_boundary(self, now, today):
        assert in_range(today, "today", now) is True
        assert in_range(today, "upcoming", now) is True
        assert in_range(today, "this_week", now) is True
        assert in_range(today, "past", now) is False

    def test_all_matches_everything(self, now, today):
        assert in_range(None, "all", now) is True
        assert in_range(today - timedelta(days=400), DateRange.ALL, now) is True

    def test_undated_excluded_from_every_other_range(self, now):
        for date_range in DateRange:
            if date_range is DateRange.ALL:
                continue
            assert in_range(None, date_range, now, custom_days=5) is False

    def test_this_week_bounds(self, now, today):
        assert in_range(today + timedelta(days=7), "this_week", now) is True
        assert in_range(today + timedelta(days=8), "this_week", now) is False
        assert in_range(today - timedelta(days=1), "this_week", now) is False

    def test_this_month_includes_past_days(self, now):
        assert in_range(date(2025, 1, 1), "this_month", now) is True
        assert in_range(date(2025, 1, 31), "this_month", now) is True
        assert in_range(date(2025, 2, 1), "this_month", now) is False
        assert in_range(date(2024, 1, 15), "this_month", now) is False

    def test_upcoming_and_past(self, now, today):
        yesterday = today - timedelta(days=1)
        assert in_range(yesterday, "upcoming", now) is False
        assert in_range(yesterday, "past", now) is True

    def test_custom_days_zero_is_today_only(self, now, today):
        assert in_range(today, "custom_days", now, custom_days=0) is True
        assert in_range(today + timedelta(days=1), "custom_days", now, custom_days=0) is False
        assert in_range(today - timedelta(days=1), "custom_days", now, custom_days=0) is False

    def test_custom_days_upper_bound_inclusive(self, now, today):
        assert in_range(today + timedelta(days=30), "custom_days", now, custom_days=30) is True
        assert in_range(today + timedelta(days=31), "custom_days", now, custom_days=30) is False

    def test_custom_days_without_count(self, now, today):
        assert in_range(today - timedelta(days=100), "custom_days", now) is True

    def test_custom_days_negative_matches_nothing(self, now, today):
        assert in_range(today, "custom_days", now, custom_days=-1) is False

    def test_unknown_range_is_all(self, now):
        assert in_range(None, "someday", now) is True

    def test_accepts_date_reference(self, today):
        assert in_range(today, "today", today) is True


class TestDaysUntil:
    def test_future_and_past(self, now, today):
        assert days_until(today + timedelta(days=3), now) == 3
        assert days_until(today - timedelta(days=2), now) == -2
        assert days_until(today, now) == 0

    def test_no_date(self, now):
        assert days_until(None, now) is None


class TestWithinDays:
    def test_window(self, today):
        assert within_days(today, today, 14) is True
        assert within_days(today + timedelta(days=14), today, 14) is True
        assert within_days(today + timedelta(days=15), today, 14) is False
        assert within_days(today - timedelta(days=1), today, 14) is False
        assert within_days(None, today, 14) is False
