from datetime import datetime
from typing import Optional

from pydantic import Field

from core.domain.component_status import ComponentStatus
from infra.web.routers.schemas import CamelModel
from infra.web.routers.schemas.component import ComponentGroupResponseDTO, ComponentResponseDTO
from infra.web.routers.schemas.incident import IncidentResponseDTO
from infra.web.routers.schemas.maintenance_window import MaintenanceWindowResponseDTO


class StatusPageCreateDTO(CamelModel):
    organization_id: int
    name: str = Field(min_length=1)
    description: Optional[str] = None
    domain: Optional[str] = None
    is_public: bool = True


class StatusPageResponseDTO(CamelModel):
    id: int
    organization_id: int
    name: str
    description: Optional[str] = None
    domain: Optional[str] = None
    custom_css: Optional[str] = None
    logo_url: Optional[str] = None
    is_public: bool
    created_at: datetime
    updated_at: datetime


class PublicStatusPageResponseDTO(CamelModel):
    status_page: StatusPageResponseDTO
    overall_status: ComponentStatus
    component_groups: list[ComponentGroupResponseDTO] = Field(default_factory=list)
    components: list[ComponentResponseDTO] = Field(default_factory=list)
    active_incidents: list[IncidentResponseDTO] = Field(default_factory=list)
    upcoming_maintenance: list[MaintenanceWindowResponseDTO] = Field(default_factory=list)
