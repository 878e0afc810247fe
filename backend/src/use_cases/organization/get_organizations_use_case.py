from core.domain.organization import Organization
from core.port.organization_repository import OrganizationRepository


class GetOrganizationsUseCase:
    def __init__(self, organization_repository: OrganizationRepository) -> None:
        self.organization_repository = organization_repository

    async def execute(self) -> list[Organization]:
        return await self.organization_repository.find_all_active()
