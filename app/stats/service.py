from datetime import UTC, datetime

import structlog

from app.stats import metrics
from app.stats.fetcher import AggregateFetcher, AggregateSnapshot
from app.stats.periods import ResolvedPeriods, resolve_periods
from app.stats.repository import StatsRepository
from app.stats.schemas import StatsOverview, Summary, TotalsSummary
from app.stats.trends import build_series, trailing_month_spans

logger = structlog.get_logger()


class StatsService:
    def __init__(self, fetcher: AggregateFetcher, repo: StatsRepository) -> None:
        self._fetcher = fetcher
        self._repo = repo

    async def get_summary(self, user_id: int) -> TotalsSummary:
        totals = await self._repo.totals(user_id)
        return TotalsSummary(
            total_income=totals["total_income"],
            total_expenses=totals["total_expenses"],
            balance=metrics.balance(totals["total_income"], totals["total_expenses"]),
        )

    async def get_analytics(
        self,
        user_id: int,
        period: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        now: datetime | None = None,
    ) -> StatsOverview:
        now = now or datetime.now(UTC)
        # validation runs before any query is issued
        periods = resolve_periods(period, start_date, end_date, now=now)
        months = trailing_month_spans(now, periods.keyword.trailing_months)

        logger.info(
            "stats_analytics_requested",
            user_id=user_id,
            period=periods.keyword,
            start=periods.current.start.isoformat(),
            end=periods.current.end.isoformat(),
        )

        snapshot = await self._fetcher.fetch(user_id, periods, months)
        return build_overview(snapshot, periods)


def build_overview(snapshot: AggregateSnapshot, periods: ResolvedPeriods) -> StatsOverview:
    income = snapshot.current_income
    expenses = snapshot.current_expenses
    chart, trends = build_series(snapshot.monthly)

    return StatsOverview(
        summary=Summary(
            income=income,
            expenses=expenses,
            balance=metrics.balance(income, expenses),
            savings_rate=metrics.savings_rate(income, expenses),
            income_change=metrics.percentage_change(snapshot.previous_income, income),
            expense_change=metrics.percentage_change(snapshot.previous_expenses, expenses),
        ),
        category_distribution=metrics.category_distribution(snapshot.categories),
        income_expense_chart=chart,
        monthly_trends=trends,
        payment_methods=metrics.payment_methods(
            snapshot.cash_expenses,
            snapshot.card_expenses,
            income,
            expenses,
            periods.current,
        ),
        top_categories=metrics.top_categories(snapshot.top_categories),
    )
