from core.domain.component import Component
from core.domain.component_status import ComponentStatus
from core.domain.metric import Metric
from core.exceptions.entity_not_found_error import ComponentNotFoundError
from core.port.clock import Clock
from core.port.component_repository import ComponentRepository
from core.port.metric_repository import MetricRepository


class UpdateComponentStatusUseCase:
    def __init__(
        self,
        component_repository: ComponentRepository,
        metric_repository: MetricRepository,
        clock: Clock,
    ) -> None:
        self.component_repository = component_repository
        self.metric_repository = metric_repository
        self.clock = clock

    async def execute(self, component_id: int, status: ComponentStatus) -> Component:
        now = self.clock.now()

        updated_component = await self.component_repository.update_status(
            component_id=component_id,
            status=status,
            updated_at=now,
        )

        if not updated_component:
            raise ComponentNotFoundError(component_id)

        await self.metric_repository.add(
            Metric(
                id=None,
                component_id=component_id,
                timestamp=now,
                status=status,
                response_time=None,
                created_at=now,
            )
        )

        return updated_component
