from core.domain.component import Component
from core.port.component_repository import ComponentRepository


class GetComponentsUseCase:
    def __init__(self, component_repository: ComponentRepository) -> None:
        self.component_repository = component_repository

    async def execute(self, status_page_id: int) -> list[Component]:
        components = await self.component_repository.find_all_by_status_page_id(status_page_id)

        return sorted(components, key=lambda component: (component.sort_order, component.name))
