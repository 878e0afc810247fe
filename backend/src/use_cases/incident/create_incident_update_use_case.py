from core.domain.incident_transition import transition_incident
from core.domain.incident_update import IncidentUpdate
from core.exceptions.entity_not_found_error import IncidentNotFoundError
from core.port.clock import Clock
from core.port.incident_repository import IncidentRepository
from core.port.incident_update_repository import IncidentUpdateRepository
from infra.web.routers.schemas.incident import IncidentUpdateCreateDTO


class CreateIncidentUpdateUseCase:
    def __init__(
        self,
        incident_update_repository: IncidentUpdateRepository,
        incident_repository: IncidentRepository,
        clock: Clock,
    ) -> None:
        self.incident_update_repository = incident_update_repository
        self.incident_repository = incident_repository
        self.clock = clock

    async def execute(self, incident_id: int, incident_update: IncidentUpdateCreateDTO) -> IncidentUpdate:
        incident = await self.incident_repository.find_by_id(incident_id)

        if not incident:
            raise IncidentNotFoundError(incident_id)

        now = self.clock.now()

        saved_update = await self.incident_update_repository.add(
            IncidentUpdate(
                id=None,
                incident_id=incident_id,
                title=incident_update.title,
                body=incident_update.body,
                status=incident_update.status,
                created_at=now,
                updated_at=now,
            )
        )

        transition = transition_incident(incident, incident_update.status, now)

        if transition.status_changed:
            await self.incident_repository.save(transition.incident)

        return saved_update
