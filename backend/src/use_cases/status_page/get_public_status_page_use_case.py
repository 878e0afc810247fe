import asyncio
from typing import Optional

from core.domain.overall_status import resolve_overall_status
from core.domain.public_status_page import PublicStatusPage
from core.port.clock import Clock
from core.port.component_group_repository import ComponentGroupRepository
from core.port.component_repository import ComponentRepository
from core.port.incident_repository import IncidentRepository
from core.port.maintenance_window_repository import MaintenanceWindowRepository
from core.port.organization_repository import OrganizationRepository
from core.port.status_page_repository import StatusPageRepository


class GetPublicStatusPageUseCase:
    def __init__(
        self,
        organization_repository: OrganizationRepository,
        status_page_repository: StatusPageRepository,
        component_group_repository: ComponentGroupRepository,
        component_repository: ComponentRepository,
        incident_repository: IncidentRepository,
        maintenance_window_repository: MaintenanceWindowRepository,
        clock: Clock,
    ) -> None:
        self.organization_repository = organization_repository
        self.status_page_repository = status_page_repository
        self.component_group_repository = component_group_repository
        self.component_repository = component_repository
        self.incident_repository = incident_repository
        self.maintenance_window_repository = maintenance_window_repository
        self.clock = clock

    async def execute(self, slug: str) -> Optional[PublicStatusPage]:
        organization = await self.organization_repository.find_by_slug(slug)

        if not organization or not organization.is_active or organization.id is None:
            return None

        status_page = await self.status_page_repository.find_public_by_organization_id(organization.id)

        if not status_page or status_page.id is None:
            return None

        component_groups, components, active_incidents, upcoming_maintenance = await asyncio.gather(
            self.component_group_repository.find_all_by_status_page_id(status_page.id),
            self.component_repository.find_all_by_status_page_id(status_page.id, visible_only=True),
            self.incident_repository.find_active_by_status_page_id(status_page.id),
            self.maintenance_window_repository.find_upcoming_by_status_page_id(
                status_page.id,
                since=self.clock.now(),
            ),
        )

        return PublicStatusPage(
            status_page=status_page,
            overall_status=resolve_overall_status(components),
            component_groups=component_groups,
            components=components,
            active_incidents=active_incidents,
            upcoming_maintenance=upcoming_maintenance,
        )
