"""
Authentication dependencies for FastAPI routes
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
import structlog

from hrportal.auth.service import decode_access_token
from hrportal.core.exceptions import AuthenticationError, AuthorizationError
from hrportal.models.user import User
from hrportal.users.repository import UserRepository, get_user_repository

logger = structlog.get_logger()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Get current authenticated user from JWT token
    """
    if token is None:
        raise AuthenticationError("Not authenticated")

    try:
        payload = decode_access_token(token)
    except JWTError:
        raise AuthenticationError("Invalid token")

    username = payload.get("sub")
    if username is None:
        raise AuthenticationError("Invalid token")

    user = users.get(username)
    if user is None:
        raise AuthenticationError("User not found")

    return user


def require_role(role_name: str):
    """
    Dependency factory for role-based access control
    Usage: @router.get("/", dependencies=[Depends(require_role("Admin"))])
    """
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role_name:
            logger.warning(
                "unauthorized_access_attempt",
                username=current_user.username,
                required_role=role_name,
                user_role=current_user.role,
            )
            raise AuthorizationError(
                f"Requires {role_name} role",
                details={"required_role": role_name, "user_role": current_user.role},
            )
        return current_user

    return role_checker
