from abc import ABC, abstractmethod
from typing import Optional

from core.domain.incident import Incident
from core.domain.page import Page


class IncidentRepository(ABC):
    @abstractmethod
    async def save(self, incident: Incident) -> Incident:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, incident_id: int) -> Optional[Incident]:
        raise NotImplementedError

    @abstractmethod
    async def find_all_by_status_page_id(self, status_page_id: int, page: int, page_size: int) -> Page[Incident]:
        raise NotImplementedError

    @abstractmethod
    async def find_active_by_status_page_id(self, status_page_id: int) -> list[Incident]:
        raise NotImplementedError
