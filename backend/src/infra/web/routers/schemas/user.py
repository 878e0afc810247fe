from datetime import datetime

from pydantic import EmailStr, Field

from core.domain.user_role import UserRole
from infra.web.routers.schemas import CamelModel


class UserCreateDTO(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    role: UserRole = UserRole.VIEWER


class UserResponseDTO(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime
