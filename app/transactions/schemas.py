from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.transactions.models import ExpenseCategory, PaymentMethod, TransactionKind, ensure_utc


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IncomeCreate(_CamelModel):
    description: str | None = Field(default=None, max_length=500)
    amount: float = Field(gt=0, allow_inf_nan=False)
    date: datetime
    note: str | None = Field(default=None, max_length=2000)
    payment_method: PaymentMethod = PaymentMethod.cash

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, value: datetime) -> datetime:
        try:
            return ensure_utc(value)
        except OverflowError:
            raise ValueError("date is out of range once converted to UTC") from None


class ExpenseCreate(IncomeCreate):
    category: ExpenseCategory = ExpenseCategory.other


class TransactionResponse(_CamelModel):
    id: int
    kind: TransactionKind
    amount: float
    date: datetime
    description: str | None
    note: str | None
    category: ExpenseCategory | None
    payment_method: PaymentMethod
    created_at: datetime


class TransactionFilter(BaseModel):
    start_date: datetime | None = None
    end_date: datetime | None = None
    category: ExpenseCategory | None = None
    payment_method: PaymentMethod | None = None
    limit: int = Field(default=50, ge=1, le=500)
    offset: int = Field(default=0, ge=0)
