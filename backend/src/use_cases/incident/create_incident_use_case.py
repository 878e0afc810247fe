from dataclasses import dataclass

import structlog

from core.domain.impact_propagation import StatusWriteResult, propagate_incident_impact
from core.domain.incident import Incident
from core.exceptions.components_not_found_error import ComponentsNotFoundError
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from core.port.clock import Clock
from core.port.component_repository import ComponentRepository
from core.port.incident_repository import IncidentRepository
from core.port.status_page_repository import StatusPageRepository
from infra.utils.datetimes import ensure_utc
from infra.web.routers.schemas.incident import IncidentCreateDTO
from use_cases.component.apply_component_status_writes_use_case import ApplyComponentStatusWritesUseCase

logger = structlog.stdlib.get_logger(__name__)


@dataclass
class IncidentCreation:
    incident: Incident
    propagation: StatusWriteResult


class CreateIncidentUseCase:
    def __init__(
        self,
        incident_repository: IncidentRepository,
        status_page_repository: StatusPageRepository,
        component_repository: ComponentRepository,
        clock: Clock,
    ) -> None:
        self.incident_repository = incident_repository
        self.status_page_repository = status_page_repository
        self.component_repository = component_repository
        self.clock = clock

    async def execute(self, incident: IncidentCreateDTO) -> IncidentCreation:
        status_page = await self.status_page_repository.find_by_id(incident.status_page_id)

        if not status_page:
            raise StatusPageNotFoundError(incident.status_page_id)

        component_ids = list(dict.fromkeys(incident.component_ids))
        await self._ensure_components_belong_to_page(incident.status_page_id, component_ids)

        now = self.clock.now()
        started_at = ensure_utc(incident.started_at) if incident.started_at else now

        incident_entity = Incident(
            id=None,
            status_page_id=incident.status_page_id,
            name=incident.name,
            description=incident.description,
            status=incident.status,
            impact=incident.impact,
            started_at=started_at,
            resolved_at=None,
            created_at=now,
            updated_at=now,
            component_ids=component_ids,
        )

        saved_incident = await self.incident_repository.save(incident_entity)

        writes = propagate_incident_impact(saved_incident.impact, component_ids)
        propagation = await ApplyComponentStatusWritesUseCase(self.component_repository, self.clock).execute(writes)

        logger.info(
            "Incident created",
            incident_id=saved_incident.id,
            status_page_id=saved_incident.status_page_id,
            impact=saved_incident.impact.value,
            components_updated=len(propagation.applied),
        )

        return IncidentCreation(incident=saved_incident, propagation=propagation)

    async def _ensure_components_belong_to_page(self, status_page_id: int, component_ids: list[int]) -> None:
        if not component_ids:
            return

        components = await self.component_repository.find_by_ids(component_ids)
        owned_ids = {
            component.id
            for component in components
            if component.status_page_id == status_page_id
        }
        missing_ids = [component_id for component_id in component_ids if component_id not in owned_ids]

        if missing_ids:
            raise ComponentsNotFoundError(status_page_id, missing_ids)
