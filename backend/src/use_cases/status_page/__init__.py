from use_cases.status_page.create_status_page_use_case import CreateStatusPageUseCase
from use_cases.status_page.get_public_status_page_use_case import GetPublicStatusPageUseCase
from use_cases.status_page.get_status_pages_use_case import GetStatusPagesUseCase

__all__ = [
    "CreateStatusPageUseCase",
    "GetPublicStatusPageUseCase",
    "GetStatusPagesUseCase",
]
