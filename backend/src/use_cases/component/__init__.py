from use_cases.component.apply_component_status_writes_use_case import ApplyComponentStatusWritesUseCase
from use_cases.component.create_component_use_case import CreateComponentUseCase
from use_cases.component.get_components_use_case import GetComponentsUseCase
from use_cases.component.update_component_status_use_case import UpdateComponentStatusUseCase

__all__ = [
    "ApplyComponentStatusWritesUseCase",
    "CreateComponentUseCase",
    "GetComponentsUseCase",
    "UpdateComponentStatusUseCase",
]
