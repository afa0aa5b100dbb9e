from datetime import datetime

import aiosqlite

from app.transactions.models import (
    ExpenseCategory,
    PaymentMethod,
    TransactionKind,
    to_storage,
)


def _money(value: float | None) -> float:
    return round(float(value or 0.0), 2)


class StatsRepository:
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def sum_amount(
        self,
        user_id: int,
        kind: TransactionKind,
        start: datetime,
        end: datetime,
        category: ExpenseCategory | None = None,
        payment_method: PaymentMethod | None = None,
    ) -> float:
        conditions: list[str] = ["user_id = ?", "kind = ?", "date >= ?", "date <= ?"]
        params: list = [user_id, kind, to_storage(start), to_storage(end)]

        if category is not None:
            conditions.append("category = ?")
            params.append(category)
        if payment_method is not None:
            conditions.append("payment_method = ?")
            params.append(payment_method)

        where_clause = " AND ".join(conditions)
        cursor = await self._db.execute(
            f"""
            SELECT COALESCE(SUM(amount), 0) AS total
            FROM transactions
            WHERE {where_clause}
            """,
            params,
        )
        row = await cursor.fetchone()
        return _money(row["total"] if row else 0.0)

    async def sum_by_category(
        self,
        user_id: int,
        start: datetime,
        end: datetime,
        limit: int | None = None,
    ) -> list[dict]:
        """Expense totals per category, largest first, ties ordered by category name."""
        params: list = [user_id, TransactionKind.expense, to_storage(start), to_storage(end)]
        limit_clause = ""
        if limit is not None:
            limit_clause = "LIMIT ?"
            params.append(limit)

        cursor = await self._db.execute(
            f"""
            SELECT category, SUM(amount) AS amount
            FROM transactions
            WHERE user_id = ? AND kind = ? AND date >= ? AND date <= ?
                AND category IS NOT NULL
            GROUP BY category
            HAVING SUM(amount) > 0
            ORDER BY amount DESC, category ASC
            {limit_clause}
            """,
            params,
        )
        rows = await cursor.fetchall()
        return [{"category": row["category"], "amount": _money(row["amount"])} for row in rows]

    async def totals(self, user_id: int) -> dict:
        cursor = await self._db.execute(
            """
            SELECT
                COALESCE(SUM(CASE WHEN kind = 'income' THEN amount END), 0) AS total_income,
                COALESCE(SUM(CASE WHEN kind = 'expense' THEN amount END), 0) AS total_expenses
            FROM transactions
            WHERE user_id = ?
            """,
            (user_id,),
        )
        row = await cursor.fetchone()
        return {
            "total_income": _money(row["total_income"] if row else 0.0),
            "total_expenses": _money(row["total_expenses"] if row else 0.0),
        }
