"""Authentication API schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from yardtrack.api.core.messages import APIResponse
from yardtrack.api.user.schemas import UserModel
from yardtrack.database.models.users import UserRole


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=100)
    password: str = Field(..., min_length=6, max_length=128)
    role: UserRole = UserRole.USER
    yard_id: int | None = None


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)


class AuthSession(BaseModel):
    user: UserModel
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


AuthResponse = APIResponse[AuthSession]
