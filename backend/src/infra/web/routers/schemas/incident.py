from datetime import datetime
from typing import Optional, Self

from pydantic import Field, field_validator, model_validator

from core.domain.component_status import ComponentStatus
from core.domain.incident_impact import IncidentImpact
from core.domain.incident_status import IncidentStatus
from infra.web.routers.schemas import CamelModel


class IncidentCreateDTO(CamelModel):
    status_page_id: int
    name: str = Field(min_length=1)
    description: str
    status: IncidentStatus = IncidentStatus.INVESTIGATING
    impact: IncidentImpact
    started_at: Optional[datetime] = None
    component_ids: list[int] = Field(default_factory=list)

    @field_validator("status")
    @classmethod
    def check_not_resolved(cls, value: IncidentStatus) -> IncidentStatus:
        if value is IncidentStatus.RESOLVED:
            raise ValueError("Incidents cannot be created as resolved")

        return value


class IncidentUpdateDTO(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[IncidentStatus] = None
    impact: Optional[IncidentImpact] = None

    @model_validator(mode="after")
    def check_update_fields(self) -> Self:
        updates = [
            self.name is not None,
            self.description is not None,
            self.status is not None,
            self.impact is not None,
        ]

        if not any(updates):
            raise ValueError("At least one field must be updated")

        return self


class IncidentUpdateCreateDTO(CamelModel):
    title: str = Field(min_length=1)
    body: str
    status: IncidentStatus


class IncidentResponseDTO(CamelModel):
    id: int
    status_page_id: int
    name: str
    description: str
    status: IncidentStatus
    impact: IncidentImpact
    started_at: datetime
    resolved_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    component_ids: list[int] = Field(default_factory=list)


class ComponentStatusWriteDTO(CamelModel):
    component_id: int
    new_status: ComponentStatus


class ImpactPropagationDTO(CamelModel):
    applied: list[ComponentStatusWriteDTO] = Field(default_factory=list)
    failed: list[ComponentStatusWriteDTO] = Field(default_factory=list)


class IncidentCreatedResponseDTO(IncidentResponseDTO):
    propagation: ImpactPropagationDTO


class IncidentUpdateResponseDTO(CamelModel):
    id: int
    incident_id: int
    title: str
    body: str
    status: IncidentStatus
    created_at: datetime
    updated_at: datetime
