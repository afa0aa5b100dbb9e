"""Populate the database with random incomes and expenses for one user.

Usage:
    python -m app.seed --user-id 1
    python -m app.seed --user-id 1 --count 50 --months 6
"""

import argparse
import asyncio
import random
from datetime import UTC, datetime, timedelta

import aiosqlite
import structlog

from app.config import settings
from app.database import close_database, connect_database
from app.exceptions import NotFoundError
from app.logging_config import setup_logging
from app.transactions.models import ExpenseCategory, PaymentMethod, TransactionKind
from app.transactions.repository import TransactionRepository
from app.transactions.schemas import ExpenseCreate, IncomeCreate
from app.users.repository import UserRepository

logger = structlog.get_logger()

INCOME_DESCRIPTIONS = ["Salary", "Freelance project", "Refund", "Gift", "Interest", "Bonus"]
EXPENSE_DESCRIPTIONS = {
    ExpenseCategory.shopping: ["Shoes", "Headphones", "Books", "Kitchenware"],
    ExpenseCategory.food: ["Groceries", "Restaurant", "Coffee", "Bakery"],
    ExpenseCategory.transport: ["Fuel", "Train ticket", "Taxi", "Bus pass"],
    ExpenseCategory.entertainment: ["Cinema", "Concert", "Streaming", "Games"],
    ExpenseCategory.bills: ["Electricity", "Internet", "Phone", "Water"],
    ExpenseCategory.other: ["Donation", "Haircut", "Post office", "Misc"],
}


def _random_amount(rng: random.Random) -> float:
    return round(rng.uniform(1.0, 1000.0), 2)


def _random_date(rng: random.Random, start: datetime, days: int) -> datetime:
    return start + timedelta(days=rng.randrange(days), minutes=rng.randrange(24 * 60))


async def seed_transactions(
    db: aiosqlite.Connection,
    user_id: int,
    count: int = 100,
    months: int = 4,
    rng: random.Random | None = None,
) -> int:
    rng = rng or random.Random()
    if not await UserRepository(db).exists(user_id):
        raise NotFoundError("User", user_id)

    repo = TransactionRepository(db)
    days = 30 * months
    start = datetime.now(UTC) - timedelta(days=days)

    for _ in range(count):
        await repo.create(
            user_id,
            TransactionKind.income,
            IncomeCreate(
                description=rng.choice(INCOME_DESCRIPTIONS),
                amount=_random_amount(rng),
                date=_random_date(rng, start, days),
                note="Generated demo income",
                payment_method=rng.choice(list(PaymentMethod)),
            ),
        )
        category = rng.choice(list(ExpenseCategory))
        await repo.create(
            user_id,
            TransactionKind.expense,
            ExpenseCreate(
                description=rng.choice(EXPENSE_DESCRIPTIONS[category]),
                amount=_random_amount(rng),
                date=_random_date(rng, start, days),
                note="Generated demo expense",
                payment_method=rng.choice(list(PaymentMethod)),
                category=category,
            ),
        )

    logger.info("seed_completed", user_id=user_id, incomes=count, expenses=count)
    return count * 2


async def _run(user_id: int, count: int, months: int, seed: int | None) -> None:
    db = await connect_database(settings.db_path)
    try:
        await seed_transactions(db, user_id, count=count, months=months, rng=random.Random(seed))
    finally:
        await close_database(db)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--user-id", type=int, required=True)
    parser.add_argument("--count", type=_positive_int, default=100)
    parser.add_argument("--months", type=_positive_int, default=4)
    parser.add_argument("--seed", type=int, default=None, help="random seed for repeatable data")
    return parser


def main() -> None:
    args = build_parser().parse_args()

    setup_logging()
    asyncio.run(_run(args.user_id, args.count, args.months, args.seed))


if __name__ == "__main__":
    main()
