from use_cases.component_group.create_component_group_use_case import CreateComponentGroupUseCase

__all__ = [
    "CreateComponentGroupUseCase",
]
