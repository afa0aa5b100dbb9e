from typing import Annotated

import aiosqlite
from fastapi import Depends

from app.auth import user_id_from_claims, verify_token
from app.config import settings
from app.database import get_db
from app.exceptions import UnauthorizedError
from app.stats.fetcher import AggregateFetcher
from app.stats.repository import StatsRepository
from app.stats.service import StatsService
from app.transactions.repository import TransactionRepository
from app.transactions.service import TransactionService
from app.users.repository import UserRepository
from app.users.service import UserService

DBConn = Annotated[aiosqlite.Connection, Depends(get_db)]
TokenClaims = Annotated[dict, Depends(verify_token)]


def get_user_service(db: DBConn) -> UserService:
    return UserService(UserRepository(db))


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


async def get_current_user_id(claims: TokenClaims, users: UserServiceDep) -> int:
    user_id = user_id_from_claims(claims)
    if not await users.user_exists(user_id):
        raise UnauthorizedError("User no longer exists")
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]


def get_transaction_service(db: DBConn) -> TransactionService:
    return TransactionService(TransactionRepository(db))


def get_stats_service(db: DBConn) -> StatsService:
    repo = StatsRepository(db)
    fetcher = AggregateFetcher(repo, timeout=settings.aggregation_timeout_seconds)
    return StatsService(fetcher, repo)


TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
