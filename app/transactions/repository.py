from datetime import UTC, datetime

import aiosqlite
import structlog

from app.transactions.models import TransactionKind, to_storage
from app.transactions.schemas import ExpenseCreate, IncomeCreate, TransactionFilter

logger = structlog.get_logger()

_COLUMNS = """
    id, user_id, kind, amount, date, description, note,
    category, payment_method, created_at
"""


class TransactionRepository:
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def create(
        self,
        user_id: int,
        kind: TransactionKind,
        data: IncomeCreate | ExpenseCreate,
    ) -> int:
        category = getattr(data, "category", None)
        cursor = await self._db.execute(
            """
            INSERT INTO transactions (
                user_id, kind, amount, date, description, note,
                category, payment_method, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                kind,
                data.amount,
                to_storage(data.date),
                data.description,
                data.note,
                category,
                data.payment_method,
                to_storage(datetime.now(UTC)),
            ),
        )
        await self._db.commit()
        return cursor.lastrowid

    async def get_by_id(self, transaction_id: int) -> dict | None:
        cursor = await self._db.execute(
            f"SELECT {_COLUMNS} FROM transactions WHERE id = ?",
            (transaction_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return dict(row)

    async def list_filtered(
        self,
        user_id: int,
        kind: TransactionKind,
        filters: TransactionFilter,
    ) -> list[dict]:
        conditions: list[str] = ["user_id = ?", "kind = ?"]
        params: list = [user_id, kind]

        if filters.start_date is not None:
            conditions.append("date >= ?")
            params.append(to_storage(filters.start_date))
        if filters.end_date is not None:
            conditions.append("date <= ?")
            params.append(to_storage(filters.end_date))
        if filters.category is not None:
            conditions.append("category = ?")
            params.append(filters.category)
        if filters.payment_method is not None:
            conditions.append("payment_method = ?")
            params.append(filters.payment_method)

        where_clause = " AND ".join(conditions)
        params.extend([filters.limit, filters.offset])

        cursor = await self._db.execute(
            f"""
            SELECT {_COLUMNS}
            FROM transactions
            WHERE {where_clause}
            ORDER BY date DESC, id DESC
            LIMIT ? OFFSET ?
            """,
            params,
        )
        rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def delete(self, transaction_id: int) -> None:
        await self._db.execute("DELETE FROM transactions WHERE id = ?", (transaction_id,))
        await self._db.commit()
