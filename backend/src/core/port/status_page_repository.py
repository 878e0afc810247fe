from abc import ABC, abstractmethod
from typing import Optional

from core.domain.status_page import StatusPage


class StatusPageRepository(ABC):
    @abstractmethod
    async def save(self, status_page: StatusPage) -> StatusPage:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, status_page_id: int) -> Optional[StatusPage]:
        raise NotImplementedError

    @abstractmethod
    async def find_all(self, organization_id: Optional[int] = None) -> list[StatusPage]:
        raise NotImplementedError

    @abstractmethod
    async def find_public_by_organization_id(self, organization_id: int) -> Optional[StatusPage]:
        raise NotImplementedError
