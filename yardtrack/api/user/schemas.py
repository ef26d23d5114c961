"""User API schemas."""

from pydantic import BaseModel, EmailStr, Field

from yardtrack.api.core.messages import APIResponse, Paginated
from yardtrack.database.models.users import UserRole, UserStatus


class UserModel(BaseModel):
    id: int
    name: str
    email: str
    status: str
    role: UserRole
    yard_id: int | None = None

    model_config = {"from_attributes": True}


class UserWriteRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=100)
    password: str = Field(..., min_length=6, max_length=128)
    role: UserRole = UserRole.USER
    status: str = Field(default=UserStatus.ACTIVE.value, min_length=1, max_length=20)
    yard_id: int | None = None


UserResponse = APIResponse[UserModel]
UserListResponse = APIResponse[Paginated[UserModel]]
UserDeleteResponse = APIResponse[dict[str, bool]]
