from core.domain.component_group import ComponentGroup
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from core.port.clock import Clock
from core.port.component_group_repository import ComponentGroupRepository
from core.port.status_page_repository import StatusPageRepository
from infra.web.routers.schemas.component import ComponentGroupCreateDTO


class CreateComponentGroupUseCase:
    def __init__(
        self,
        component_group_repository: ComponentGroupRepository,
        status_page_repository: StatusPageRepository,
        clock: Clock,
    ) -> None:
        self.component_group_repository = component_group_repository
        self.status_page_repository = status_page_repository
        self.clock = clock

    async def execute(self, component_group: ComponentGroupCreateDTO) -> ComponentGroup:
        status_page = await self.status_page_repository.find_by_id(component_group.status_page_id)

        if not status_page:
            raise StatusPageNotFoundError(component_group.status_page_id)

        now = self.clock.now()

        component_group_entity = ComponentGroup(
            id=None,
            status_page_id=component_group.status_page_id,
            name=component_group.name,
            description=component_group.description,
            sort_order=component_group.sort_order,
            is_collapsed=component_group.is_collapsed,
            created_at=now,
            updated_at=now,
        )

        return await self.component_group_repository.save(component_group_entity)
