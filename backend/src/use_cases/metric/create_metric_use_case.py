from core.domain.metric import Metric
from core.exceptions.entity_not_found_error import ComponentNotFoundError
from core.port.clock import Clock
from core.port.component_repository import ComponentRepository
from core.port.metric_repository import MetricRepository
from infra.utils.datetimes import ensure_utc
from infra.web.routers.schemas.metric import MetricCreateDTO


class CreateMetricUseCase:
    def __init__(
        self,
        metric_repository: MetricRepository,
        component_repository: ComponentRepository,
        clock: Clock,
    ) -> None:
        self.metric_repository = metric_repository
        self.component_repository = component_repository
        self.clock = clock

    async def execute(self, component_id: int, metric: MetricCreateDTO) -> Metric:
        component = await self.component_repository.find_by_id(component_id)

        if not component:
            raise ComponentNotFoundError(component_id)

        metric_entity = Metric(
            id=None,
            component_id=component_id,
            timestamp=ensure_utc(metric.timestamp),
            status=metric.status,
            response_time=metric.response_time,
            created_at=self.clock.now(),
        )

        return await self.metric_repository.add(metric_entity)
