"""Pure metric calculations over fetched aggregates."""

from decimal import ROUND_FLOOR, Decimal

from app.stats.periods import Period
from app.stats.schemas import CategoryAmount, PaymentMethodBreakdown, TopCategory

TOP_CATEGORY_LIMIT = 3


def round_half_up(value: float, digits: int = 0) -> int | float:
    """Round to ``digits`` places with halves going towards positive infinity."""
    scaled = Decimal(str(value)).scaleb(digits) + Decimal("0.5")
    rounded = scaled.to_integral_value(rounding=ROUND_FLOOR).scaleb(-digits)
    if digits == 0:
        return int(rounded)
    return float(rounded)


def percentage_of(part: float, whole: float) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def balance(income: float, expenses: float) -> float:
    return round(income - expenses, 2)


def savings_rate(income: float, expenses: float) -> int:
    if income <= 0:
        return 0
    return round_half_up(balance(income, expenses) / income * 100)


def percentage_change(previous: float, current: float) -> int | float:
    # no baseline: any activity counts as a full increase
    if previous == 0:
        return 100 if current > 0 else 0
    return round_half_up((current - previous) / previous * 100, 1)


def category_distribution(rows: list[dict]) -> list[CategoryAmount]:
    return [
        CategoryAmount(category=row["category"], amount=row["amount"])
        for row in rows
        if row["amount"] > 0
    ]


def top_categories(rows: list[dict]) -> list[TopCategory]:
    """Annotate the leading categories with their share of the top slice.

    Percentages are relative to the summed amount of the returned categories,
    not to total spending.
    """
    top = [row for row in rows if row["amount"] > 0][:TOP_CATEGORY_LIMIT]
    top_total = sum(row["amount"] for row in top)
    return [
        TopCategory(
            category=row["category"],
            amount=row["amount"],
            percentage=percentage_of(row["amount"], top_total),
        )
        for row in top
    ]


def payment_methods(
    cash_amount: float,
    card_amount: float,
    income: float,
    expenses: float,
    period: Period,
) -> PaymentMethodBreakdown:
    total = cash_amount + card_amount
    days = period.days
    return PaymentMethodBreakdown(
        cash_amount=cash_amount,
        card_amount=card_amount,
        cash_percentage=percentage_of(cash_amount, total),
        card_percentage=percentage_of(card_amount, total),
        daily_income=round_half_up(income / days),
        daily_spending=round_half_up(expenses / days),
    )
