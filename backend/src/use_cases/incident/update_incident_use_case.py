from dataclasses import replace

from core.domain.incident import Incident
from core.domain.incident_transition import transition_incident
from core.exceptions.entity_not_found_error import IncidentNotFoundError
from core.port.clock import Clock
from core.port.incident_repository import IncidentRepository
from infra.web.routers.schemas.incident import IncidentUpdateDTO


class UpdateIncidentUseCase:
    def __init__(self, incident_repository: IncidentRepository, clock: Clock) -> None:
        self.incident_repository = incident_repository
        self.clock = clock

    async def execute(self, incident_id: int, incident: IncidentUpdateDTO) -> Incident:
        existing_incident = await self.incident_repository.find_by_id(incident_id)

        if not existing_incident:
            raise IncidentNotFoundError(incident_id)

        now = self.clock.now()

        patched_incident = replace(
            existing_incident,
            name=incident.name if incident.name is not None else existing_incident.name,
            description=incident.description if incident.description is not None else existing_incident.description,
            impact=incident.impact if incident.impact is not None else existing_incident.impact,
        )

        if patched_incident != existing_incident:
            patched_incident = replace(patched_incident, updated_at=now)

        transition = transition_incident(patched_incident, incident.status, now)

        if transition.incident == existing_incident:
            return existing_incident

        return await self.incident_repository.save(transition.incident)
