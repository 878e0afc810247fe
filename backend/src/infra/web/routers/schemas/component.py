from datetime import datetime
from typing import Optional

from pydantic import Field

from core.domain.component_status import ComponentStatus
from infra.web.routers.schemas import CamelModel


class ComponentGroupCreateDTO(CamelModel):
    status_page_id: int
    name: str = Field(min_length=1)
    description: Optional[str] = None
    sort_order: int = 0
    is_collapsed: bool = False


class ComponentGroupResponseDTO(CamelModel):
    id: int
    status_page_id: int
    name: str
    description: Optional[str] = None
    sort_order: int
    is_collapsed: bool
    created_at: datetime
    updated_at: datetime


class ComponentCreateDTO(CamelModel):
    status_page_id: int
    component_group_id: Optional[int] = None
    name: str = Field(min_length=1)
    description: Optional[str] = None
    status: ComponentStatus = ComponentStatus.OPERATIONAL
    sort_order: int = 0
    is_visible: bool = True


class ComponentStatusUpdateDTO(CamelModel):
    status: ComponentStatus


class ComponentResponseDTO(CamelModel):
    id: int
    status_page_id: int
    component_group_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    status: ComponentStatus
    sort_order: int
    is_visible: bool
    created_at: datetime
    updated_at: datetime
