"""
Authentication Pydantic schemas
"""
from hrportal.core.schemas import CamelModel
from hrportal.users.schemas import UserResponse


class LoginRequest(CamelModel):
    """Login request schema"""
    username: str
    password: str


class LoginResponse(CamelModel):
    """Login response: user summary plus a bearer token"""
    success: bool = True
    message: str = "Login successful"
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int
