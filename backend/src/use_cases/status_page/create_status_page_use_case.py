from core.domain.status_page import StatusPage
from core.exceptions.entity_not_found_error import OrganizationNotFoundError
from core.exceptions.organization_inactive_error import OrganizationInactiveError
from core.port.clock import Clock
from core.port.organization_repository import OrganizationRepository
from core.port.status_page_repository import StatusPageRepository
from infra.web.routers.schemas.status_page import StatusPageCreateDTO


class CreateStatusPageUseCase:
    def __init__(
        self,
        status_page_repository: StatusPageRepository,
        organization_repository: OrganizationRepository,
        clock: Clock,
    ) -> None:
        self.status_page_repository = status_page_repository
        self.organization_repository = organization_repository
        self.clock = clock

    async def execute(self, status_page: StatusPageCreateDTO) -> StatusPage:
        organization = await self.organization_repository.find_by_id(status_page.organization_id)

        if not organization:
            raise OrganizationNotFoundError(status_page.organization_id)

        if not organization.is_active:
            raise OrganizationInactiveError(status_page.organization_id)

        now = self.clock.now()

        status_page_entity = StatusPage(
            id=None,
            organization_id=status_page.organization_id,
            name=status_page.name,
            description=status_page.description,
            domain=status_page.domain,
            is_public=status_page.is_public,
            created_at=now,
            updated_at=now,
        )

        return await self.status_page_repository.save(status_page_entity)
