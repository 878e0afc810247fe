from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from core.domain.component import Component
from core.domain.metric import Metric
from core.exceptions.component_group_mismatch_error import ComponentGroupMismatchError
from core.exceptions.entity_not_found_error import (
    ComponentGroupNotFoundError,
    ComponentNotFoundError,
    StatusPageNotFoundError,
)
from infra.adapter.postgres_component_group_repository import get_component_group_repository
from infra.adapter.postgres_component_repository import get_component_repository
from infra.adapter.postgres_metric_repository import get_metric_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.component import (
    ComponentCreateDTO,
    ComponentResponseDTO,
    ComponentStatusUpdateDTO,
)
from infra.web.routers.schemas.metric import MetricCreateDTO, MetricResponseDTO
from use_cases.component import (
    CreateComponentUseCase,
    GetComponentsUseCase,
    UpdateComponentStatusUseCase,
)
from use_cases.metric import CreateMetricUseCase, GetComponentMetricsUseCase

router = APIRouter(prefix="/component", tags=["Component"])


@router.post(
    "",
    response_model=ComponentResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_component(payload: ComponentCreateDTO) -> Component:
    use_case = CreateComponentUseCase(
        component_repository=get_component_repository(),
        status_page_repository=get_status_page_repository(),
        component_group_repository=get_component_group_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(payload)
    except (StatusPageNotFoundError, ComponentGroupNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ComponentGroupMismatchError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get(
    "",
    response_model=list[ComponentResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_components(status_page_id: int = Query(...)) -> list[Component]:
    use_case = GetComponentsUseCase(get_component_repository())

    return await use_case.execute(status_page_id)


@router.patch(
    "/{component_id}/status",
    response_model=ComponentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_component_status(component_id: int, payload: ComponentStatusUpdateDTO) -> Component:
    use_case = UpdateComponentStatusUseCase(
        component_repository=get_component_repository(),
        metric_repository=get_metric_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(component_id=component_id, status=payload.status)
    except ComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")


@router.post(
    "/{component_id}/metrics",
    response_model=MetricResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_component_metric(component_id: int, payload: MetricCreateDTO) -> Metric:
    use_case = CreateMetricUseCase(
        metric_repository=get_metric_repository(),
        component_repository=get_component_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(component_id=component_id, metric=payload)
    except ComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")


@router.get(
    "/{component_id}/metrics",
    response_model=list[MetricResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_component_metrics(
    component_id: int,
    start: Optional[datetime] = Query(default=None),
    end: Optional[datetime] = Query(default=None),
) -> list[Metric]:
    use_case = GetComponentMetricsUseCase(
        metric_repository=get_metric_repository(),
        component_repository=get_component_repository(),
    )

    try:
        return await use_case.execute(component_id=component_id, start=start, end=end)
    except ComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
