from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.transactions.models import ExpenseCategory


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Summary(_CamelModel):
    income: float
    expenses: float
    balance: float
    savings_rate: int
    income_change: float
    expense_change: float


class CategoryAmount(_CamelModel):
    category: ExpenseCategory
    amount: float


class TopCategory(CategoryAmount):
    percentage: int


class IncomeExpenseChart(_CamelModel):
    months: list[str]
    income_data: list[float]
    expense_data: list[float]


class MonthlyTrends(_CamelModel):
    months: list[str]
    balance_data: list[float]
    savings_rate_data: list[int]


class PaymentMethodBreakdown(_CamelModel):
    cash_amount: float
    card_amount: float
    cash_percentage: int
    card_percentage: int
    daily_income: int
    daily_spending: int


class StatsOverview(_CamelModel):
    summary: Summary
    category_distribution: list[CategoryAmount]
    income_expense_chart: IncomeExpenseChart
    monthly_trends: MonthlyTrends
    payment_methods: PaymentMethodBreakdown
    top_categories: list[TopCategory]


class TotalsSummary(_CamelModel):
    total_income: float
    total_expenses: float
    balance: float
