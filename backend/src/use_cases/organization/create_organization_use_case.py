from core.domain.organization import Organization
from core.port.clock import Clock
from core.port.organization_repository import OrganizationRepository
from infra.web.routers.schemas.organization import OrganizationCreateDTO


class CreateOrganizationUseCase:
    def __init__(self, organization_repository: OrganizationRepository, clock: Clock) -> None:
        self.organization_repository = organization_repository
        self.clock = clock

    async def execute(self, organization: OrganizationCreateDTO) -> Organization:
        now = self.clock.now()

        organization_entity = Organization(
            id=None,
            name=organization.name,
            slug=organization.slug,
            subscription_tier=organization.subscription_tier,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

        return await self.organization_repository.save(organization_entity)
