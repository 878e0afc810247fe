from typing import Optional

from core.domain.status_page import StatusPage
from core.port.status_page_repository import StatusPageRepository


class GetStatusPagesUseCase:
    def __init__(self, status_page_repository: StatusPageRepository) -> None:
        self.status_page_repository = status_page_repository

    async def execute(self, organization_id: Optional[int] = None) -> list[StatusPage]:
        return await self.status_page_repository.find_all(organization_id=organization_id)
