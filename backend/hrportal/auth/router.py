"""
Authentication routes
"""
from fastapi import APIRouter, Depends
import structlog

from hrportal.auth.schemas import LoginRequest, LoginResponse
from hrportal.auth.service import authenticate_user, token_for
from hrportal.core.config import settings
from hrportal.core.exceptions import AuthenticationError
from hrportal.users.repository import UserRepository, get_user_repository

router = APIRouter(prefix="/api/login", tags=["Authentication"])
logger = structlog.get_logger()


@router.post("/", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
):
    """Authenticate user and return a bearer token"""
    user = authenticate_user(users, credentials.username, credentials.password)
    if not user:
        logger.warning("failed_login_attempt", username=credentials.username)
        raise AuthenticationError("Invalid credentials")

    logger.info("user_logged_in", username=user.username, role=user.role)

    return LoginResponse(
        user={"username": user.username, "role": user.role, "created_at": user.created_at},
        access_token=token_for(user),
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
