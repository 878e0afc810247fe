from core.domain.maintenance_status import MaintenanceStatus
from core.domain.maintenance_window import MaintenanceWindow
from core.exceptions.components_not_found_error import ComponentsNotFoundError
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from core.exceptions.invalid_maintenance_window_error import InvalidMaintenanceWindowError
from core.port.clock import Clock
from core.port.component_repository import ComponentRepository
from core.port.maintenance_window_repository import MaintenanceWindowRepository
from core.port.status_page_repository import StatusPageRepository
from infra.utils.datetimes import ensure_utc
from infra.web.routers.schemas.maintenance_window import MaintenanceWindowCreateDTO


class CreateMaintenanceWindowUseCase:
    def __init__(
        self,
        maintenance_window_repository: MaintenanceWindowRepository,
        status_page_repository: StatusPageRepository,
        component_repository: ComponentRepository,
        clock: Clock,
    ) -> None:
        self.maintenance_window_repository = maintenance_window_repository
        self.status_page_repository = status_page_repository
        self.component_repository = component_repository
        self.clock = clock

    async def execute(self, maintenance_window: MaintenanceWindowCreateDTO) -> MaintenanceWindow:
        scheduled_start = ensure_utc(maintenance_window.scheduled_start)
        scheduled_end = ensure_utc(maintenance_window.scheduled_end)

        if scheduled_end <= scheduled_start:
            raise InvalidMaintenanceWindowError(scheduled_start, scheduled_end)

        status_page = await self.status_page_repository.find_by_id(maintenance_window.status_page_id)

        if not status_page:
            raise StatusPageNotFoundError(maintenance_window.status_page_id)

        component_ids = list(dict.fromkeys(maintenance_window.component_ids))

        if component_ids:
            components = await self.component_repository.find_by_ids(component_ids)
            owned_ids = {
                component.id
                for component in components
                if component.status_page_id == maintenance_window.status_page_id
            }
            missing_ids = [component_id for component_id in component_ids if component_id not in owned_ids]

            if missing_ids:
                raise ComponentsNotFoundError(maintenance_window.status_page_id, missing_ids)

        now = self.clock.now()

        maintenance_window_entity = MaintenanceWindow(
            id=None,
            status_page_id=maintenance_window.status_page_id,
            name=maintenance_window.name,
            description=maintenance_window.description,
            status=MaintenanceStatus.SCHEDULED,
            scheduled_start=scheduled_start,
            scheduled_end=scheduled_end,
            created_at=now,
            updated_at=now,
            component_ids=component_ids,
        )

        return await self.maintenance_window_repository.save(maintenance_window_entity)
