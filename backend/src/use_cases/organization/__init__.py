from use_cases.organization.create_organization_use_case import CreateOrganizationUseCase
from use_cases.organization.get_organizations_use_case import GetOrganizationsUseCase

__all__ = [
    "CreateOrganizationUseCase",
    "GetOrganizationsUseCase",
]
