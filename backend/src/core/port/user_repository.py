from abc import ABC, abstractmethod
from typing import Optional

from core.domain.user import User


class UserRepository(ABC):
    @abstractmethod
    async def save(self, user: User) -> User:
        raise NotImplementedError

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> list[User]:
        raise NotImplementedError
