"""Resolve analytics periods into concrete date intervals.

Every interval, current or previous, is built by ``interval_ending_at``. The
previous interval always has the current interval's duration and ends
``PREVIOUS_PERIOD_GAP`` before the current one starts, whether the current
interval came from a keyword or from explicit dates.
"""

import calendar
import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import StrEnum

from app.exceptions import InvalidPeriodError, InvalidRangeError
from app.transactions.models import ensure_utc

PREVIOUS_PERIOD_GAP = timedelta(days=1)

_ONE_DAY = timedelta(days=1)


class PeriodKeyword(StrEnum):
    week = "Week"
    month = "Month"
    quarter = "Quarter"
    year = "Year"

    @classmethod
    def parse(cls, value: str | None) -> "PeriodKeyword":
        if value is None or not value.strip():
            return cls.month
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise InvalidPeriodError(value, [member.value for member in cls])

    @property
    def trailing_months(self) -> int:
        return 12 if self is PeriodKeyword.year else 6


_KEYWORD_MONTHS = {
    PeriodKeyword.month: 1,
    PeriodKeyword.quarter: 3,
    PeriodKeyword.year: 12,
}


@dataclass(frozen=True)
class Period:
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def days(self) -> int:
        return max(1, math.ceil(self.duration / _ONE_DAY))


@dataclass(frozen=True)
class ResolvedPeriods:
    keyword: PeriodKeyword
    current: Period
    previous: Period


def shift_months(value: datetime, months: int) -> datetime:
    """Move ``value`` by whole calendar months, clamping the day to the target month."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def keyword_start(anchor: datetime, keyword: PeriodKeyword) -> datetime:
    if keyword is PeriodKeyword.week:
        return anchor - timedelta(days=7)
    return shift_months(anchor, -_KEYWORD_MONTHS[keyword])


def interval_ending_at(anchor: datetime, duration: timedelta) -> Period:
    return Period(start=anchor - duration, end=anchor)


def previous_period(current: Period) -> Period:
    return interval_ending_at(current.start - PREVIOUS_PERIOD_GAP, current.duration)


def parse_date(value: str, field: str) -> datetime:
    try:
        return ensure_utc(datetime.fromisoformat(value.strip()))
    except (ValueError, OverflowError):
        raise InvalidRangeError(
            f"{field} must be an ISO-8601 date, got '{value}'", field=field
        ) from None


def resolve_periods(
    period: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    now: datetime | None = None,
) -> ResolvedPeriods:
    """Validate the request parameters and return current and previous periods.

    Raises InvalidPeriodError for an unknown keyword and InvalidRangeError for
    unparseable, one-sided or inverted explicit ranges.
    """
    keyword = PeriodKeyword.parse(period)
    now = ensure_utc(now) if now is not None else datetime.now(UTC)

    start_date = start_date or None
    end_date = end_date or None

    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            missing = "startDate" if start_date is None else "endDate"
            raise InvalidRangeError(
                "startDate and endDate must be supplied together", field=missing
            )
        start = parse_date(start_date, "startDate")
        end = parse_date(end_date, "endDate")
        if start >= end:
            raise InvalidRangeError("startDate must be before endDate", field="startDate")
        current = Period(start=start, end=end)
    else:
        current = interval_ending_at(now, now - keyword_start(now, keyword))

    try:
        previous = previous_period(current)
    except OverflowError:
        raise InvalidRangeError(
            "startDate leaves no room for a previous period", field="startDate"
        ) from None
    return ResolvedPeriods(keyword=keyword, current=current, previous=previous)
