"""Auth service — JWT token management, password hashing, register and login."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from bencana_api.config import Settings
from bencana_api.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    ForbiddenException,
    UnauthorizedException,
)
from bencana_api.domain.models.user import User
from bencana_api.domain.repositories.user_repository import UserRepository
from bencana_api.domain.schemas.auth import LoginRequest, RegisterRequest, TokenIdentity

logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class TokenMissing(UnauthorizedException):
    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class TokenInvalid(ForbiddenException):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class TokenService:
    """Issues and verifies signed bearer tokens.

    Tokens carry ``user_id`` and ``email`` plus an ``exp`` claim; nothing is
    stored server side, so a token is valid exactly as long as its signature
    checks out against ``SECRET_KEY`` and it has not expired.
    """

    def __init__(self, settings: Settings):
        self._secret_key = settings.SECRET_KEY
        self._algorithm = settings.JWT_ALGORITHM
        self._lifetime = timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)

    def issue(self, identity: TokenIdentity, expires_delta: Optional[timedelta] = None) -> str:
        to_encode = identity.model_dump()
        lifetime = self._lifetime if expires_delta is None else expires_delta
        expire = datetime.now(timezone.utc) + lifetime
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenIdentity:
        if not token:
            raise TokenMissing()
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.warning("Token rejected", reason=str(exc))
            raise TokenInvalid() from exc

        user_id, email = payload.get("user_id"), payload.get("email")
        if user_id is None or email is None:
            logger.warning("Token rejected", reason="missing identity claims")
            raise TokenInvalid()
        return TokenIdentity(user_id=user_id, email=email)


async def register_user(repo: UserRepository, body: RegisterRequest) -> User:
    """Create a user unless the email is already taken."""
    if await repo.get_by_email(body.email):
        logger.info("Registration rejected, email exists", email=body.email)
        raise ConflictException("Email already exists")

    # bcrypt is deliberately slow; keep it off the event loop
    password_hash = await run_in_threadpool(hash_password, body.password)
    user = await repo.create(
        {"name": body.name, "email": body.email, "password_hash": password_hash}
    )
    logger.info("User registered", user_id=user.id, email=user.email)
    return user


async def authenticate_user(repo: UserRepository, body: LoginRequest) -> User:
    user = await repo.get_by_email(body.email)
    if user is None:
        raise EntityNotFoundException("User not found")

    if not await run_in_threadpool(verify_password, body.password, user.password_hash):
        logger.info("Login failed", email=body.email)
        raise UnauthorizedException("Invalid email or password")
    return user


async def login_user(repo: UserRepository, tokens: TokenService, body: LoginRequest) -> str:
    """Check credentials and hand back a fresh token."""
    user = await authenticate_user(repo, body)
    token = tokens.issue(TokenIdentity(user_id=user.id, email=user.email))
    logger.info("Login successful", user_id=user.id)
    return token
