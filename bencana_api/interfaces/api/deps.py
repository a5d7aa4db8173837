"""FastAPI dependency — bearer token auth."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from bencana_api.config import Settings, get_settings
from bencana_api.application.services.auth_service import TokenService
from bencana_api.domain.schemas.auth import TokenIdentity

# auto_error off: a missing header must become our 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(settings)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> TokenIdentity:
    """Verify the bearer token and return the identity it carries."""
    token = credentials.credentials if credentials else None
    return tokens.verify(token)
