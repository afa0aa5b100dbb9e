from datetime import UTC, datetime

import aiosqlite

from app.transactions.models import to_storage


class UserRepository:
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def get_by_email(self, email: str) -> dict | None:
        cursor = await self._db.execute(
            "SELECT id, full_name, email, password_hash, created_at FROM users WHERE email = ?",
            (email,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return dict(row)

    async def exists(self, user_id: int) -> bool:
        cursor = await self._db.execute("SELECT 1 FROM users WHERE id = ?", (user_id,))
        row = await cursor.fetchone()
        return row is not None

    async def create(self, full_name: str, email: str, password_hash: str) -> int:
        cursor = await self._db.execute(
            """
            INSERT INTO users (full_name, email, password_hash, created_at)
            VALUES (?, ?, ?, ?)
            """,
            (full_name, email, password_hash, to_storage(datetime.now(UTC))),
        )
        await self._db.commit()
        return cursor.lastrowid
