from datetime import datetime
from typing import Optional, Self

from pydantic import Field, model_validator

from core.domain.maintenance_status import MaintenanceStatus
from infra.web.routers.schemas import CamelModel


class MaintenanceWindowCreateDTO(CamelModel):
    status_page_id: int
    name: str = Field(min_length=1)
    description: str
    scheduled_start: datetime
    scheduled_end: datetime
    component_ids: list[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_timezone(self) -> Self:
        if self.scheduled_start.tzinfo is None or self.scheduled_end.tzinfo is None:
            raise ValueError("Scheduled start and end must include a timezone offset")

        return self


class MaintenanceWindowResponseDTO(CamelModel):
    id: int
    status_page_id: int
    name: str
    description: str
    status: MaintenanceStatus
    scheduled_start: datetime
    scheduled_end: datetime
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    component_ids: list[int] = Field(default_factory=list)
