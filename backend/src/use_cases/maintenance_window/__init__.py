from use_cases.maintenance_window.advance_maintenance_windows_use_case import (
    AdvanceMaintenanceWindowsUseCase,
    MaintenanceAdvance,
)
from use_cases.maintenance_window.create_maintenance_window_use_case import CreateMaintenanceWindowUseCase
from use_cases.maintenance_window.get_maintenance_windows_use_case import GetMaintenanceWindowsUseCase

__all__ = [
    "AdvanceMaintenanceWindowsUseCase",
    "CreateMaintenanceWindowUseCase",
    "GetMaintenanceWindowsUseCase",
    "MaintenanceAdvance",
]
