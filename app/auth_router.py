from fastapi import APIRouter

from app.dependencies import UserServiceDep
from app.users.schemas import LoginRequest, MessageResponse, SignupRequest, TokenResponse

router = APIRouter()


@router.post("/signup", status_code=201, response_model=MessageResponse)
async def signup(data: SignupRequest, service: UserServiceDep) -> MessageResponse:
    await service.signup(data)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest, service: UserServiceDep) -> TokenResponse:
    return await service.login(data)
