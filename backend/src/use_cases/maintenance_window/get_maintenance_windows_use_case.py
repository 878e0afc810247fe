from core.domain.maintenance_window import MaintenanceWindow
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from core.port.maintenance_window_repository import MaintenanceWindowRepository
from core.port.status_page_repository import StatusPageRepository


class GetMaintenanceWindowsUseCase:
    def __init__(
        self,
        maintenance_window_repository: MaintenanceWindowRepository,
        status_page_repository: StatusPageRepository,
    ) -> None:
        self.maintenance_window_repository = maintenance_window_repository
        self.status_page_repository = status_page_repository

    async def execute(self, status_page_id: int) -> list[MaintenanceWindow]:
        status_page = await self.status_page_repository.find_by_id(status_page_id)

        if not status_page:
            raise StatusPageNotFoundError(status_page_id)

        return await self.maintenance_window_repository.find_all_by_status_page_id(status_page_id)
