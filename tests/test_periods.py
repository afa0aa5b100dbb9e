"""Tests for period resolution."""

from datetime import UTC, datetime, timedelta

import pytest

from app.exceptions import InvalidPeriodError, InvalidRangeError
from app.stats.periods import (
    PREVIOUS_PERIOD_GAP,
    Period,
    PeriodKeyword,
    interval_ending_at,
    resolve_periods,
    shift_months,
)

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=UTC)


class TestKeywordPeriods:
    def test_week_spans_seven_days(self):
        periods = resolve_periods("Week", now=NOW)

        assert periods.current.end == NOW
        assert periods.current.duration == timedelta(days=7)
        assert periods.current.start == datetime(2024, 5, 8, 12, 0, tzinfo=UTC)

    def test_week_previous_period_ends_one_day_before_current(self):
        periods = resolve_periods("Week", now=NOW)

        assert periods.previous.end == periods.current.start - timedelta(days=1)
        assert periods.previous.duration == periods.current.duration
        assert periods.previous.start == datetime(2024, 4, 30, 12, 0, tzinfo=UTC)

    def test_missing_period_defaults_to_month(self):
        periods = resolve_periods(None, now=NOW)

        assert periods.keyword is PeriodKeyword.month
        assert periods.current.start == datetime(2024, 4, 15, 12, 0, tzinfo=UTC)

    def test_month_clamps_to_shorter_month(self):
        now = datetime(2024, 3, 31, 12, 0, tzinfo=UTC)
        periods = resolve_periods("Month", now=now)

        assert periods.current.start == datetime(2024, 2, 29, 12, 0, tzinfo=UTC)
        assert periods.previous.end == datetime(2024, 2, 28, 12, 0, tzinfo=UTC)
        assert periods.previous.start == datetime(2024, 1, 28, 12, 0, tzinfo=UTC)

    def test_quarter_crosses_year_boundary(self):
        now = datetime(2024, 2, 10, tzinfo=UTC)
        periods = resolve_periods("Quarter", now=now)

        assert periods.current.start == datetime(2023, 11, 10, tzinfo=UTC)

    def test_year_from_leap_day(self):
        now = datetime(2024, 2, 29, tzinfo=UTC)
        periods = resolve_periods("Year", now=now)

        assert periods.current.start == datetime(2023, 2, 28, tzinfo=UTC)
        assert periods.keyword.trailing_months == 12

    def test_keyword_is_case_insensitive(self):
        assert resolve_periods("quarter", now=NOW).keyword is PeriodKeyword.quarter
        assert resolve_periods(" WEEK ", now=NOW).keyword is PeriodKeyword.week

    def test_unknown_keyword_is_rejected(self):
        with pytest.raises(InvalidPeriodError) as exc_info:
            resolve_periods("Decade", now=NOW)

        assert exc_info.value.field == "period"
        assert "Decade" in exc_info.value.message
        assert "Week" in exc_info.value.message


class TestExplicitRange:
    def test_explicit_range_is_used_verbatim(self):
        periods = resolve_periods("Month", "2024-01-01", "2024-01-31", now=NOW)

        assert periods.current == Period(
            start=datetime(2024, 1, 1, tzinfo=UTC),
            end=datetime(2024, 1, 31, tzinfo=UTC),
        )

    def test_explicit_range_previous_period_uses_same_gap(self):
        periods = resolve_periods("Month", "2024-01-01", "2024-01-31", now=NOW)

        assert periods.previous.end == datetime(2023, 12, 31, tzinfo=UTC)
        assert periods.previous.start == datetime(2023, 12, 1, tzinfo=UTC)
        assert periods.current.start - periods.previous.end == PREVIOUS_PERIOD_GAP

    def test_inverted_range_is_rejected(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_periods("Month", "2024-03-01", "2024-01-01", now=NOW)

        assert exc_info.value.field == "startDate"

    def test_equal_dates_are_rejected(self):
        with pytest.raises(InvalidRangeError):
            resolve_periods("Month", "2024-03-01", "2024-03-01", now=NOW)

    def test_unparseable_date_names_the_field(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_periods("Month", "2024-01-01", "not-a-date", now=NOW)

        assert exc_info.value.field == "endDate"

    def test_one_sided_range_is_rejected(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_periods("Month", start_date="2024-01-01", now=NOW)

        assert exc_info.value.field == "endDate"

    def test_timezone_offsets_are_normalized_to_utc(self):
        periods = resolve_periods("Month", "2024-01-01T02:00:00+02:00", "2024-01-02", now=NOW)

        assert periods.current.start == datetime(2024, 1, 1, tzinfo=UTC)

    def test_range_at_the_earliest_date_is_rejected(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_periods("Month", "0001-01-02", "0001-01-03", now=NOW)

        assert exc_info.value.field == "startDate"

    def test_offset_before_the_earliest_utc_date_is_rejected(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_periods("Month", "0001-01-01T00:00:00+05:00", "2024-01-01", now=NOW)

        assert exc_info.value.field == "startDate"

    def test_invalid_period_is_rejected_even_with_explicit_dates(self):
        with pytest.raises(InvalidPeriodError):
            resolve_periods("Fortnight", "2024-01-01", "2024-01-31", now=NOW)


def test_shift_months_wraps_backwards_over_january():
    assert shift_months(datetime(2024, 1, 31, tzinfo=UTC), -1) == datetime(
        2023, 12, 31, tzinfo=UTC
    )


def test_interval_ending_at():
    period = interval_ending_at(NOW, timedelta(days=3))

    assert period.end == NOW
    assert period.start == datetime(2024, 5, 12, 12, 0, tzinfo=UTC)


def test_period_days_rounds_up_and_never_drops_below_one():
    assert Period(start=NOW, end=NOW + timedelta(hours=1)).days == 1
    assert Period(start=NOW, end=NOW + timedelta(days=2, hours=1)).days == 3
    assert Period(start=NOW, end=NOW + timedelta(days=30)).days == 30
