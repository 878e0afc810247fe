from core.domain.component import Component
from core.exceptions.component_group_mismatch_error import ComponentGroupMismatchError
from core.exceptions.entity_not_found_error import ComponentGroupNotFoundError, StatusPageNotFoundError
from core.port.clock import Clock
from core.port.component_group_repository import ComponentGroupRepository
from core.port.component_repository import ComponentRepository
from core.port.status_page_repository import StatusPageRepository
from infra.web.routers.schemas.component import ComponentCreateDTO


class CreateComponentUseCase:
    def __init__(
        self,
        component_repository: ComponentRepository,
        status_page_repository: StatusPageRepository,
        component_group_repository: ComponentGroupRepository,
        clock: Clock,
    ) -> None:
        self.component_repository = component_repository
        self.status_page_repository = status_page_repository
        self.component_group_repository = component_group_repository
        self.clock = clock

    async def execute(self, component: ComponentCreateDTO) -> Component:
        status_page = await self.status_page_repository.find_by_id(component.status_page_id)

        if not status_page:
            raise StatusPageNotFoundError(component.status_page_id)

        if component.component_group_id is not None:
            component_group = await self.component_group_repository.find_by_id(component.component_group_id)

            if not component_group:
                raise ComponentGroupNotFoundError(component.component_group_id)

            if component_group.status_page_id != component.status_page_id:
                raise ComponentGroupMismatchError(component.component_group_id, component.status_page_id)

        now = self.clock.now()

        component_entity = Component(
            id=None,
            status_page_id=component.status_page_id,
            component_group_id=component.component_group_id,
            name=component.name,
            description=component.description,
            status=component.status,
            sort_order=component.sort_order,
            is_visible=component.is_visible,
            created_at=now,
            updated_at=now,
        )

        return await self.component_repository.save(component_entity)
