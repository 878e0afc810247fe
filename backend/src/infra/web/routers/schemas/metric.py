from datetime import datetime
from typing import Optional

from pydantic import Field

from core.domain.component_status import ComponentStatus
from infra.web.routers.schemas import CamelModel


class MetricCreateDTO(CamelModel):
    timestamp: datetime
    status: ComponentStatus
    response_time: Optional[int] = Field(default=None, ge=0)


class MetricResponseDTO(CamelModel):
    id: int
    component_id: int
    timestamp: datetime
    status: ComponentStatus
    response_time: Optional[int] = None
    created_at: datetime
