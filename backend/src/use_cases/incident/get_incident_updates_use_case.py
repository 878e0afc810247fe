from core.domain.incident_update import IncidentUpdate
from core.exceptions.entity_not_found_error import IncidentNotFoundError
from core.port.incident_repository import IncidentRepository
from core.port.incident_update_repository import IncidentUpdateRepository


class GetIncidentUpdatesUseCase:
    def __init__(
        self,
        incident_update_repository: IncidentUpdateRepository,
        incident_repository: IncidentRepository,
    ) -> None:
        self.incident_update_repository = incident_update_repository
        self.incident_repository = incident_repository

    async def execute(self, incident_id: int) -> list[IncidentUpdate]:
        incident = await self.incident_repository.find_by_id(incident_id)

        if not incident:
            raise IncidentNotFoundError(incident_id)

        return await self.incident_update_repository.find_all_by_incident_id(incident_id)
