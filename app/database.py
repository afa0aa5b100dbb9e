import aiosqlite
import structlog
from fastapi import Request

logger = structlog.get_logger()

DDL_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        full_name TEXT NOT NULL,
        email TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        kind TEXT NOT NULL CHECK (kind IN ('income', 'expense')),
        amount REAL NOT NULL CHECK (amount > 0),
        date TEXT NOT NULL,
        description TEXT,
        note TEXT,
        category TEXT,
        payment_method TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_user_kind_date
        ON transactions (user_id, kind, date)
    """,
]


async def init_schema(db: aiosqlite.Connection) -> None:
    for ddl in DDL_STATEMENTS:
        await db.execute(ddl)
    await db.commit()


async def connect_database(path: str) -> aiosqlite.Connection:
    db = await aiosqlite.connect(path)
    db.row_factory = aiosqlite.Row
    if path != ":memory:":
        await db.execute("PRAGMA journal_mode=WAL")
    await db.execute("PRAGMA foreign_keys=ON")
    await init_schema(db)

    logger.info("database_initialized", path=path)
    return db


async def close_database(db: aiosqlite.Connection) -> None:
    await db.close()
    logger.info("database_closed")


def get_db(request: Request) -> aiosqlite.Connection:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database not initialized. Start the app lifespan first.")
    return db


async def check_health(db: aiosqlite.Connection) -> None:
    cursor = await db.execute("SELECT 1")
    await cursor.close()
