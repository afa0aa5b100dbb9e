import calendar
from dataclasses import dataclass
from datetime import UTC, datetime

from app.stats.metrics import balance, savings_rate
from app.stats.schemas import IncomeExpenseChart, MonthlyTrends
from app.transactions.models import ensure_utc

# fixed English labels, independent of the process locale
MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True)
class MonthSpan:
    label: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class MonthlyBucket:
    label: str
    income: float
    expenses: float


def trailing_month_spans(now: datetime, count: int) -> list[MonthSpan]:
    """Return ``count`` calendar months ending with the month of ``now``, oldest first."""
    now = ensure_utc(now)
    current_index = now.year * 12 + now.month - 1

    spans: list[MonthSpan] = []
    for offset in range(count - 1, -1, -1):
        year, month_zero = divmod(current_index - offset, 12)
        month = month_zero + 1
        last_day = calendar.monthrange(year, month)[1]
        spans.append(
            MonthSpan(
                label=MONTH_LABELS[month_zero],
                start=datetime(year, month, 1, tzinfo=UTC),
                end=datetime(year, month, last_day, 23, 59, 59, 999999, tzinfo=UTC),
            )
        )
    return spans


def build_series(buckets: list[MonthlyBucket]) -> tuple[IncomeExpenseChart, MonthlyTrends]:
    months = [bucket.label for bucket in buckets]
    chart = IncomeExpenseChart(
        months=months,
        income_data=[bucket.income for bucket in buckets],
        expense_data=[bucket.expenses for bucket in buckets],
    )
    trends = MonthlyTrends(
        months=list(months),
        balance_data=[balance(bucket.income, bucket.expenses) for bucket in buckets],
        savings_rate_data=[savings_rate(bucket.income, bucket.expenses) for bucket in buckets],
    )
    return chart, trends
