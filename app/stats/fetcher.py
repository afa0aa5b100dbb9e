import asyncio
from dataclasses import dataclass

import aiosqlite
import structlog

from app.exceptions import AggregationFailure
from app.stats.metrics import TOP_CATEGORY_LIMIT
from app.stats.periods import ResolvedPeriods
from app.stats.repository import StatsRepository
from app.stats.trends import MonthlyBucket, MonthSpan
from app.transactions.models import PaymentMethod, TransactionKind

logger = structlog.get_logger()


@dataclass(frozen=True)
class AggregateSnapshot:
    current_income: float
    current_expenses: float
    previous_income: float
    previous_expenses: float
    categories: list[dict]
    top_categories: list[dict]
    cash_expenses: float
    card_expenses: float
    monthly: list[MonthlyBucket]


class AggregateFetcher:
    """Runs every aggregate query of an analytics request as one concurrent batch."""

    def __init__(self, repo: StatsRepository, timeout: float | None = None) -> None:
        self._repo = repo
        self._timeout = timeout

    async def fetch(
        self,
        user_id: int,
        periods: ResolvedPeriods,
        months: list[MonthSpan],
    ) -> AggregateSnapshot:
        try:
            return await asyncio.wait_for(
                self._fetch_all(user_id, periods, months), timeout=self._timeout
            )
        except (aiosqlite.Error, ValueError, TimeoutError) as exc:
            logger.error(
                "stats_aggregation_failed",
                user_id=user_id,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise AggregationFailure() from exc

    async def _fetch_all(
        self,
        user_id: int,
        periods: ResolvedPeriods,
        months: list[MonthSpan],
    ) -> AggregateSnapshot:
        current = periods.current
        previous = periods.previous
        income = TransactionKind.income
        expense = TransactionKind.expense

        (
            current_income,
            current_expenses,
            previous_income,
            previous_expenses,
            categories,
            top_categories,
            cash_expenses,
            card_expenses,
            *monthly,
        ) = await asyncio.gather(
            self._repo.sum_amount(user_id, income, current.start, current.end),
            self._repo.sum_amount(user_id, expense, current.start, current.end),
            self._repo.sum_amount(user_id, income, previous.start, previous.end),
            self._repo.sum_amount(user_id, expense, previous.start, previous.end),
            self._repo.sum_by_category(user_id, current.start, current.end),
            self._repo.sum_by_category(
                user_id, current.start, current.end, limit=TOP_CATEGORY_LIMIT
            ),
            self._repo.sum_amount(
                user_id, expense, current.start, current.end, payment_method=PaymentMethod.cash
            ),
            self._repo.sum_amount(
                user_id, expense, current.start, current.end, payment_method=PaymentMethod.card
            ),
            *(self._fetch_month(user_id, span) for span in months),
        )

        logger.debug(
            "stats_aggregates_fetched",
            user_id=user_id,
            period=periods.keyword,
            months=len(monthly),
        )

        return AggregateSnapshot(
            current_income=current_income,
            current_expenses=current_expenses,
            previous_income=previous_income,
            previous_expenses=previous_expenses,
            categories=categories,
            top_categories=top_categories,
            cash_expenses=cash_expenses,
            card_expenses=card_expenses,
            monthly=monthly,
        )

    async def _fetch_month(self, user_id: int, span: MonthSpan) -> MonthlyBucket:
        income = await self._repo.sum_amount(
            user_id, TransactionKind.income, span.start, span.end
        )
        expenses = await self._repo.sum_amount(
            user_id, TransactionKind.expense, span.start, span.end
        )
        return MonthlyBucket(label=span.label, income=income, expenses=expenses)
