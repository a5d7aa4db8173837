"""Auth API routes — register, login, protected."""

from fastapi import APIRouter, Depends, status

from bencana_api.application.services.auth_service import TokenService, login_user, register_user
from bencana_api.core.validation import ValidationRoute, validation_failure
from bencana_api.domain.repositories.user_repository import UserRepository
from bencana_api.domain.schemas.auth import (
    LoginRequest,
    LoginResponse,
    ProtectedResponse,
    RegisterRequest,
    TokenIdentity,
)
from bencana_api.domain.schemas.common import MessageResponse
from bencana_api.interfaces.api.deps import get_current_identity, get_token_service
from bencana_api.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api", tags=["Auth"], route_class=ValidationRoute)


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
@validation_failure(status.HTTP_400_BAD_REQUEST, "All fields are required")
async def register(body: RegisterRequest, repo: UserRepository = Depends(get_user_repository)):
    await register_user(repo, body)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
@validation_failure(status.HTTP_400_BAD_REQUEST, "Email and password are required")
async def login(
    body: LoginRequest,
    repo: UserRepository = Depends(get_user_repository),
    tokens: TokenService = Depends(get_token_service),
):
    token = await login_user(repo, tokens, body)
    return LoginResponse(message="Login successful", token=token)


@router.get("/protected", response_model=ProtectedResponse)
async def protected(identity: TokenIdentity = Depends(get_current_identity)):
    return ProtectedResponse(message="This is protected data", user=identity)
