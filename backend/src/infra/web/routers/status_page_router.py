from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from core.domain.public_status_page import PublicStatusPage
from core.domain.status_page import StatusPage
from core.exceptions.entity_not_found_error import OrganizationNotFoundError
from core.exceptions.organization_inactive_error import OrganizationInactiveError
from infra.adapter.postgres_component_group_repository import get_component_group_repository
from infra.adapter.postgres_component_repository import get_component_repository
from infra.adapter.postgres_incident_repository import get_incident_repository
from infra.adapter.postgres_maintenance_window_repository import get_maintenance_window_repository
from infra.adapter.postgres_organization_repository import get_organization_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.status_page import (
    PublicStatusPageResponseDTO,
    StatusPageCreateDTO,
    StatusPageResponseDTO,
)
from use_cases.status_page import (
    CreateStatusPageUseCase,
    GetPublicStatusPageUseCase,
    GetStatusPagesUseCase,
)

router = APIRouter(prefix="/status-page", tags=["Status Page"])


@router.post(
    "",
    response_model=StatusPageResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_status_page(payload: StatusPageCreateDTO) -> StatusPage:
    use_case = CreateStatusPageUseCase(
        status_page_repository=get_status_page_repository(),
        organization_repository=get_organization_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(payload)
    except OrganizationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except OrganizationInactiveError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get(
    "",
    response_model=list[StatusPageResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_status_pages(organization_id: Optional[int] = Query(default=None)) -> list[StatusPage]:
    use_case = GetStatusPagesUseCase(get_status_page_repository())

    return await use_case.execute(organization_id=organization_id)


@router.get(
    "/public/{slug}",
    response_model=PublicStatusPageResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_public_status_page(slug: str) -> PublicStatusPage:
    use_case = GetPublicStatusPageUseCase(
        organization_repository=get_organization_repository(),
        status_page_repository=get_status_page_repository(),
        component_group_repository=get_component_group_repository(),
        component_repository=get_component_repository(),
        incident_repository=get_incident_repository(),
        maintenance_window_repository=get_maintenance_window_repository(),
        clock=get_system_clock(),
    )

    public_status_page = await use_case.execute(slug)

    if public_status_page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Status page not found")

    return public_status_page
