from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.user_role import UserRole


@dataclass
class User:
    id: Optional[int]

    email: str
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.VIEWER

    is_active: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
