from abc import ABC, abstractmethod
from typing import Optional

from core.domain.organization import Organization


class OrganizationRepository(ABC):
    @abstractmethod
    async def save(self, organization: Organization) -> Organization:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, organization_id: int) -> Optional[Organization]:
        raise NotImplementedError

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Organization]:
        raise NotImplementedError

    @abstractmethod
    async def find_all_active(self) -> list[Organization]:
        raise NotImplementedError
