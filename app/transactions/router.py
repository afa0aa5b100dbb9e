from datetime import datetime

from fastapi import APIRouter, Query

from app.config import settings
from app.dependencies import CurrentUserId, TransactionServiceDep
from app.transactions.models import ExpenseCategory, PaymentMethod, TransactionKind
from app.transactions.schemas import (
    ExpenseCreate,
    IncomeCreate,
    TransactionFilter,
    TransactionResponse,
)

income_router = APIRouter()
expense_router = APIRouter()


@income_router.get("/", response_model=list[TransactionResponse])
async def list_incomes(
    service: TransactionServiceDep,
    user_id: CurrentUserId,
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    payment_method: PaymentMethod | None = Query(default=None, alias="paymentMethod"),
    limit: int = Query(default=settings.list_default_limit, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> list[TransactionResponse]:
    filters = TransactionFilter(
        start_date=start_date,
        end_date=end_date,
        payment_method=payment_method,
        limit=limit,
        offset=offset,
    )
    return await service.list_transactions(user_id, TransactionKind.income, filters)


@income_router.post("/", status_code=201, response_model=TransactionResponse)
async def create_income(
    data: IncomeCreate,
    service: TransactionServiceDep,
    user_id: CurrentUserId,
) -> TransactionResponse:
    return await service.create_income(user_id, data)


@income_router.delete("/{income_id}", status_code=204)
async def delete_income(
    income_id: int,
    service: TransactionServiceDep,
    user_id: CurrentUserId,
) -> None:
    await service.delete(user_id, TransactionKind.income, income_id)


@expense_router.get("/", response_model=list[TransactionResponse])
async def list_expenses(
    service: TransactionServiceDep,
    user_id: CurrentUserId,
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    category: ExpenseCategory | None = None,
    payment_method: PaymentMethod | None = Query(default=None, alias="paymentMethod"),
    limit: int = Query(default=settings.list_default_limit, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> list[TransactionResponse]:
    filters = TransactionFilter(
        start_date=start_date,
        end_date=end_date,
        category=category,
        payment_method=payment_method,
        limit=limit,
        offset=offset,
    )
    return await service.list_transactions(user_id, TransactionKind.expense, filters)


@expense_router.post("/", status_code=201, response_model=TransactionResponse)
async def create_expense(
    data: ExpenseCreate,
    service: TransactionServiceDep,
    user_id: CurrentUserId,
) -> TransactionResponse:
    return await service.create_expense(user_id, data)


@expense_router.delete("/{expense_id}", status_code=204)
async def delete_expense(
    expense_id: int,
    service: TransactionServiceDep,
    user_id: CurrentUserId,
) -> None:
    await service.delete(user_id, TransactionKind.expense, expense_id)
