from datetime import UTC, datetime
from enum import StrEnum

STORAGE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


class TransactionKind(StrEnum):
    income = "income"
    expense = "expense"


class ExpenseCategory(StrEnum):
    shopping = "SHOPPING"
    food = "FOOD"
    transport = "TRANSPORT"
    entertainment = "ENTERTAINMENT"
    bills = "BILLS"
    other = "OTHER"


class PaymentMethod(StrEnum):
    cash = "CASH"
    card = "CARD"


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def to_storage(value: datetime) -> str:
    """Fixed-width UTC string; lexical order matches chronological order."""
    value = ensure_utc(value)
    # %Y is not zero-padded below year 1000 on every platform
    return f"{value.year:04d}" + value.strftime(STORAGE_FORMAT.removeprefix("%Y"))


def from_storage(value: str) -> datetime:
    return datetime.strptime(value, STORAGE_FORMAT).replace(tzinfo=UTC)
