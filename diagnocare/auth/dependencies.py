import logging
from dataclasses import dataclass
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from diagnocare.auth import jwt_handler
from diagnocare.core.exceptions import InvalidTokenError
from diagnocare.models.user import User
from diagnocare.repositories.providers import get_user_repository
from diagnocare.repositories.users_repo import UserRepository

logger = logging.getLogger(__name__)

# Missing headers are answered with our own 401 instead of FastAPI's default.
security = HTTPBearer(auto_error=False)

UNAUTHORIZED_DETAIL = "Unauthorized access"


@dataclass
class AuthContext:
    """Identity decoded from the bearer token of the current request."""

    email: str
    claims: dict[str, Any]
    user: User | None = None


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_authenticated(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthContext:
    if credentials is None:
        raise _unauthorized()

    try:
        claims = jwt_handler.decode_access_token(credentials.credentials)
    except InvalidTokenError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise _unauthorized() from exc

    email = claims.get("email")
    if not isinstance(email, str) or not email.strip():
        raise _unauthorized()

    return AuthContext(email=email.strip().lower(), claims=claims)


def require_admin(
    context: AuthContext = Depends(require_authenticated),
    users: UserRepository = Depends(get_user_repository),
) -> AuthContext:
    user = users.get_by_email(context.email)
    if user is None or not user.is_admin:
        raise _unauthorized()
    context.user = user
    return context
