from fastapi import APIRouter, HTTPException, status

from core.domain.organization import Organization
from core.exceptions.organization_already_exists_error import OrganizationAlreadyExistsError
from infra.adapter.postgres_organization_repository import get_organization_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.organization import OrganizationCreateDTO, OrganizationResponseDTO
from use_cases.organization import CreateOrganizationUseCase, GetOrganizationsUseCase

router = APIRouter(prefix="/organization", tags=["Organization"])


@router.post(
    "",
    response_model=OrganizationResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_organization(payload: OrganizationCreateDTO) -> Organization:
    use_case = CreateOrganizationUseCase(get_organization_repository(), get_system_clock())

    try:
        return await use_case.execute(payload)
    except OrganizationAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Organization with {e.field}='{e.value}' already exists",
        )


@router.get(
    "",
    response_model=list[OrganizationResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_organizations() -> list[Organization]:
    use_case = GetOrganizationsUseCase(get_organization_repository())

    return await use_case.execute()
