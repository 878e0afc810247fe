from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from core.domain.metric import Metric


class MetricRepository(ABC):
    @abstractmethod
    async def add(self, metric: Metric) -> Metric:
        raise NotImplementedError

    @abstractmethod
    async def find_all_by_component_id(
        self,
        component_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Metric]:
        raise NotImplementedError
