from abc import ABC, abstractmethod
from datetime import datetime

from core.domain.maintenance_window import MaintenanceWindow


class MaintenanceWindowRepository(ABC):
    @abstractmethod
    async def save(self, maintenance_window: MaintenanceWindow) -> MaintenanceWindow:
        raise NotImplementedError

    @abstractmethod
    async def find_all_by_status_page_id(self, status_page_id: int) -> list[MaintenanceWindow]:
        raise NotImplementedError

    @abstractmethod
    async def find_upcoming_by_status_page_id(self, status_page_id: int, since: datetime) -> list[MaintenanceWindow]:
        raise NotImplementedError

    @abstractmethod
    async def find_unfinished(self) -> list[MaintenanceWindow]:
        raise NotImplementedError
