import structlog

from app.exceptions import ForbiddenError, NotFoundError
from app.transactions.models import TransactionKind, from_storage
from app.transactions.repository import TransactionRepository
from app.transactions.schemas import (
    ExpenseCreate,
    IncomeCreate,
    TransactionFilter,
    TransactionResponse,
)

logger = structlog.get_logger()

_RESOURCE_NAMES = {
    TransactionKind.income: "Income",
    TransactionKind.expense: "Expense",
}


class TransactionService:
    def __init__(self, repo: TransactionRepository) -> None:
        self._repo = repo

    async def create_income(self, user_id: int, data: IncomeCreate) -> TransactionResponse:
        return await self._create(user_id, TransactionKind.income, data)

    async def create_expense(self, user_id: int, data: ExpenseCreate) -> TransactionResponse:
        return await self._create(user_id, TransactionKind.expense, data)

    async def list_transactions(
        self,
        user_id: int,
        kind: TransactionKind,
        filters: TransactionFilter,
    ) -> list[TransactionResponse]:
        rows = await self._repo.list_filtered(user_id, kind, filters)
        return [self._to_response(row) for row in rows]

    async def delete(self, user_id: int, kind: TransactionKind, transaction_id: int) -> None:
        existing = await self._repo.get_by_id(transaction_id)
        if existing is None or existing["kind"] != kind:
            raise NotFoundError(_RESOURCE_NAMES[kind], transaction_id)
        if existing["user_id"] != user_id:
            logger.warning(
                "transaction_delete_forbidden",
                transaction_id=transaction_id,
                user_id=user_id,
            )
            raise ForbiddenError(f"{_RESOURCE_NAMES[kind]} belongs to another user")

        await self._repo.delete(transaction_id)
        logger.info("transaction_deleted", transaction_id=transaction_id, kind=kind)

    async def _create(
        self,
        user_id: int,
        kind: TransactionKind,
        data: IncomeCreate | ExpenseCreate,
    ) -> TransactionResponse:
        transaction_id = await self._repo.create(user_id, kind, data)
        row = await self._repo.get_by_id(transaction_id)
        if row is None:
            raise NotFoundError(_RESOURCE_NAMES[kind], transaction_id)

        logger.info(
            "transaction_created",
            transaction_id=transaction_id,
            kind=kind,
            user_id=user_id,
        )
        return self._to_response(row)

    def _to_response(self, row: dict) -> TransactionResponse:
        return TransactionResponse(
            id=row["id"],
            kind=row["kind"],
            amount=row["amount"],
            date=from_storage(row["date"]),
            description=row["description"],
            note=row["note"],
            category=row["category"],
            payment_method=row["payment_method"],
            created_at=from_storage(row["created_at"]),
        )
