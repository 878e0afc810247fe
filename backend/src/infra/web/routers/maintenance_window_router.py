from fastapi import APIRouter, HTTPException, Query, status

from core.domain.maintenance_window import MaintenanceWindow
from core.exceptions.components_not_found_error import ComponentsNotFoundError
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from core.exceptions.invalid_maintenance_window_error import InvalidMaintenanceWindowError
from infra.adapter.postgres_component_repository import get_component_repository
from infra.adapter.postgres_maintenance_window_repository import get_maintenance_window_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.maintenance_window import (
    MaintenanceWindowCreateDTO,
    MaintenanceWindowResponseDTO,
)
from use_cases.maintenance_window import CreateMaintenanceWindowUseCase, GetMaintenanceWindowsUseCase

router = APIRouter(prefix="/maintenance-window", tags=["Maintenance Window"])


@router.post(
    "",
    response_model=MaintenanceWindowResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_maintenance_window(payload: MaintenanceWindowCreateDTO) -> MaintenanceWindow:
    use_case = CreateMaintenanceWindowUseCase(
        maintenance_window_repository=get_maintenance_window_repository(),
        status_page_repository=get_status_page_repository(),
        component_repository=get_component_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(payload)
    except (StatusPageNotFoundError, ComponentsNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidMaintenanceWindowError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get(
    "",
    response_model=list[MaintenanceWindowResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_maintenance_windows(status_page_id: int = Query(...)) -> list[MaintenanceWindow]:
    use_case = GetMaintenanceWindowsUseCase(
        maintenance_window_repository=get_maintenance_window_repository(),
        status_page_repository=get_status_page_repository(),
    )

    try:
        return await use_case.execute(status_page_id)
    except StatusPageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
