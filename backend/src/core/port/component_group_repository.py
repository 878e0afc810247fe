from abc import ABC, abstractmethod
from typing import Optional

from core.domain.component_group import ComponentGroup


class ComponentGroupRepository(ABC):
    @abstractmethod
    async def save(self, component_group: ComponentGroup) -> ComponentGroup:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, component_group_id: int) -> Optional[ComponentGroup]:
        raise NotImplementedError

    @abstractmethod
    async def find_all_by_status_page_id(self, status_page_id: int) -> list[ComponentGroup]:
        raise NotImplementedError
