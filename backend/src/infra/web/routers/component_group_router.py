from fastapi import APIRouter, HTTPException, status

from core.domain.component_group import ComponentGroup
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from infra.adapter.postgres_component_group_repository import get_component_group_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.component import ComponentGroupCreateDTO, ComponentGroupResponseDTO
from use_cases.component_group import CreateComponentGroupUseCase

router = APIRouter(prefix="/component-group", tags=["Component Group"])


@router.post(
    "",
    response_model=ComponentGroupResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_component_group(payload: ComponentGroupCreateDTO) -> ComponentGroup:
    use_case = CreateComponentGroupUseCase(
        component_group_repository=get_component_group_repository(),
        status_page_repository=get_status_page_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(payload)
    except StatusPageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
