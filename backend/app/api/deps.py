"""Shared API dependencies: database session, services and the request gate."""
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.database import get_db
from app.errors import Unauthenticated
from app.models.user import User
from app.services.auth import AuthService
from app.services.security import PasswordHasher, TokenIssuer

bearer_scheme = HTTPBearer(auto_error=False)

__all__ = [
    "AuthContext",
    "get_auth_service",
    "get_current_user",
    "get_db",
    "get_password_hasher",
    "get_token_issuer",
    "require_auth",
]


@dataclass(frozen=True)
class AuthContext:
    """Identity attached to a request that passed the bearer token check."""

    user_id: str


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return PasswordHasher.from_settings(settings)


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer.from_settings(settings)


def get_auth_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(db, hasher, tokens)


def require_auth(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthContext:
    """Reject the request unless it carries a valid bearer token.

    Only the token is checked here; the user record is not loaded.
    """
    if credentials is None:
        raise Unauthenticated()

    user_id = tokens.validate(credentials.credentials)
    if user_id is None:
        raise Unauthenticated()

    return AuthContext(user_id=user_id)


def get_current_user(
    context: AuthContext = Depends(require_auth),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Load the user behind an authenticated request."""
    return auth_service.get_user(context.user_id)
