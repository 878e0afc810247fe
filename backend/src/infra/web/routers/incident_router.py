from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, HTTPException, Query, status

from core.domain.incident import Incident
from core.domain.incident_update import IncidentUpdate
from core.domain.page import Page
from core.exceptions.components_not_found_error import ComponentsNotFoundError
from core.exceptions.entity_not_found_error import IncidentNotFoundError, StatusPageNotFoundError
from infra.adapter.postgres_component_repository import get_component_repository
from infra.adapter.postgres_incident_repository import get_incident_repository
from infra.adapter.postgres_incident_update_repository import get_incident_update_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.incident import (
    IncidentCreateDTO,
    IncidentCreatedResponseDTO,
    IncidentResponseDTO,
    IncidentUpdateCreateDTO,
    IncidentUpdateDTO,
    IncidentUpdateResponseDTO,
)
from infra.web.routers.schemas.page import PageDTO
from use_cases.incident import (
    CreateIncidentUpdateUseCase,
    CreateIncidentUseCase,
    GetIncidentsUseCase,
    GetIncidentUpdatesUseCase,
    UpdateIncidentUseCase,
)

router = APIRouter(prefix="/incident", tags=["Incident"])


@router.post(
    "",
    response_model=IncidentCreatedResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_incident(payload: IncidentCreateDTO) -> dict[str, Any]:
    use_case = CreateIncidentUseCase(
        incident_repository=get_incident_repository(),
        status_page_repository=get_status_page_repository(),
        component_repository=get_component_repository(),
        clock=get_system_clock(),
    )

    try:
        creation = await use_case.execute(payload)
    except (StatusPageNotFoundError, ComponentsNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return {**asdict(creation.incident), "propagation": asdict(creation.propagation)}


@router.get(
    "",
    response_model=PageDTO[IncidentResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_incidents(
    status_page_id: int = Query(...),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=10, ge=1, le=100),
) -> Page[Incident]:
    use_case = GetIncidentsUseCase(get_incident_repository())

    return await use_case.execute(status_page_id=status_page_id, page=page, page_size=page_size)


@router.patch(
    "/{incident_id}",
    response_model=IncidentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_incident(incident_id: int, payload: IncidentUpdateDTO) -> Incident:
    use_case = UpdateIncidentUseCase(get_incident_repository(), get_system_clock())

    try:
        return await use_case.execute(incident_id=incident_id, incident=payload)
    except IncidentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Incident not found")


@router.post(
    "/{incident_id}/updates",
    response_model=IncidentUpdateResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_incident_update(incident_id: int, payload: IncidentUpdateCreateDTO) -> IncidentUpdate:
    use_case = CreateIncidentUpdateUseCase(
        incident_update_repository=get_incident_update_repository(),
        incident_repository=get_incident_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(incident_id=incident_id, incident_update=payload)
    except IncidentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Incident not found")


@router.get(
    "/{incident_id}/updates",
    response_model=list[IncidentUpdateResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_incident_updates(incident_id: int) -> list[IncidentUpdate]:
    use_case = GetIncidentUpdatesUseCase(
        incident_update_repository=get_incident_update_repository(),
        incident_repository=get_incident_repository(),
    )

    try:
        return await use_case.execute(incident_id)
    except IncidentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Incident not found")
