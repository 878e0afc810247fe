from datetime import datetime
from typing import Optional

from core.domain.metric import Metric
from core.exceptions.entity_not_found_error import ComponentNotFoundError
from core.port.component_repository import ComponentRepository
from core.port.metric_repository import MetricRepository
from infra.utils.datetimes import ensure_optional_utc


class GetComponentMetricsUseCase:
    def __init__(self, metric_repository: MetricRepository, component_repository: ComponentRepository) -> None:
        self.metric_repository = metric_repository
        self.component_repository = component_repository

    async def execute(
        self,
        component_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Metric]:
        component = await self.component_repository.find_by_id(component_id)

        if not component:
            raise ComponentNotFoundError(component_id)

        return await self.metric_repository.find_all_by_component_id(
            component_id=component_id,
            start=ensure_optional_utc(start),
            end=ensure_optional_utc(end),
        )
