from core.domain.incident import Incident
from core.domain.page import Page
from core.port.incident_repository import IncidentRepository


class GetIncidentsUseCase:
    def __init__(self, incident_repository: IncidentRepository) -> None:
        self.incident_repository = incident_repository

    async def execute(self, status_page_id: int, page: int, page_size: int) -> Page[Incident]:
        if page < 1:
            page = 1

        if page_size < 1:
            page_size = 10

        return await self.incident_repository.find_all_by_status_page_id(
            status_page_id=status_page_id,
            page=page,
            page_size=page_size,
        )
