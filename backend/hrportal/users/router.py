"""
User administration routes (Admin only)
"""
from fastapi import APIRouter, Depends, status
import structlog

from hrportal.auth.dependencies import require_role
from hrportal.auth.service import get_password_hash
from hrportal.core.exceptions import NotFoundError, ValidationError
from hrportal.core.schemas import MessageResponse
from hrportal.users.repository import UserRepository, get_user_repository
from hrportal.users.schemas import (
    UserCreate,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserRoleUpdate,
)

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
    dependencies=[Depends(require_role("Admin"))],
)
logger = structlog.get_logger()


@router.get("/", response_model=UserListResponse)
def list_users(users: UserRepository = Depends(get_user_repository)):
    """List users, newest first"""
    rows = users.list_all()
    logger.info("users_listed", count=len(rows))
    return UserListResponse(users=[UserResponse.model_validate(u) for u in rows])


@router.post("/", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    users: UserRepository = Depends(get_user_repository),
):
    """Create a new user"""
    if not user_data.username or not user_data.password or not user_data.role:
        raise ValidationError("Username, password and role are required")

    if users.exists(user_data.username):
        logger.warning("duplicate_username", username=user_data.username)
        raise ValidationError("Username already exists", details={"username": user_data.username})

    user = users.create(
        username=user_data.username,
        password_hash=get_password_hash(user_data.password),
        role=user_data.role,
    )
    return UserEnvelope(
        message="User created successfully",
        user=UserResponse.model_validate(user),
    )


@router.put("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    user_data: UserRoleUpdate,
    users: UserRepository = Depends(get_user_repository),
):
    """Change a user's role"""
    if not user_data.role:
        raise ValidationError("Role is required")

    user = users.update_role(username, user_data.role)
    if user is None:
        raise NotFoundError("User", username)

    return UserEnvelope(
        message="User updated successfully",
        user=UserResponse.model_validate(user),
    )


@router.delete("/{username}", response_model=MessageResponse)
def delete_user(
    username: str,
    users: UserRepository = Depends(get_user_repository),
):
    """Delete user"""
    if not users.delete(username):
        raise NotFoundError("User", username)
    return {"success": True, "message": "User deleted successfully"}
