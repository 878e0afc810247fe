from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from core.domain.component import Component
from core.domain.component_status import ComponentStatus


class ComponentRepository(ABC):
    @abstractmethod
    async def save(self, component: Component) -> Component:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, component_id: int) -> Optional[Component]:
        raise NotImplementedError

    @abstractmethod
    async def find_by_ids(self, component_ids: list[int]) -> list[Component]:
        raise NotImplementedError

    @abstractmethod
    async def find_all_by_status_page_id(self, status_page_id: int, visible_only: bool = False) -> list[Component]:
        raise NotImplementedError

    @abstractmethod
    async def update_status(
        self,
        component_id: int,
        status: ComponentStatus,
        updated_at: datetime,
    ) -> Optional[Component]:
        raise NotImplementedError
