"""
User administration schemas
"""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field

from hrportal.core.schemas import CamelModel

Role = Literal["Admin", "HR"]


class UserCreate(CamelModel):
    """User creation schema; presence is checked by the route"""
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None


class UserRoleUpdate(CamelModel):
    """Only the role of a user can change"""
    role: Optional[Role] = None


class UserResponse(CamelModel):
    """User response schema; the password hash is never exposed"""
    username: str
    role: str
    created_at: Optional[datetime] = None


class UserEnvelope(CamelModel):
    success: bool = True
    message: Optional[str] = None
    user: UserResponse


class UserListResponse(CamelModel):
    success: bool = True
    users: List[UserResponse] = Field(default_factory=list)
