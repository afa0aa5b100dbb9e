import aiosqlite
import structlog

from app.auth import create_access_token, hash_password, verify_password
from app.exceptions import ConflictError, UnauthorizedError
from app.users.repository import UserRepository
from app.users.schemas import LoginRequest, SignupRequest, TokenResponse

logger = structlog.get_logger()


class UserService:
    def __init__(self, repo: UserRepository) -> None:
        self._repo = repo

    async def signup(self, data: SignupRequest) -> int:
        email = data.email.strip().lower()
        if await self._repo.get_by_email(email) is not None:
            raise ConflictError("User already exists")

        try:
            user_id = await self._repo.create(
                data.full_name.strip(), email, hash_password(data.password)
            )
        except aiosqlite.IntegrityError:
            # lost a race against a concurrent signup with the same email
            raise ConflictError("User already exists") from None

        logger.info("user_registered", user_id=user_id)
        return user_id

    async def login(self, data: LoginRequest) -> TokenResponse:
        user = await self._repo.get_by_email(data.email.strip().lower())
        if user is None or not verify_password(data.password, user["password_hash"]):
            logger.info("login_failed")
            raise UnauthorizedError("Invalid credentials")

        logger.info("user_logged_in", user_id=user["id"])
        return TokenResponse(access_token=create_access_token(user["id"]))

    async def user_exists(self, user_id: int) -> bool:
        return await self._repo.exists(user_id)
