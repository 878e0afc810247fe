from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from core.domain.incident_impact import IncidentImpact
from core.domain.incident_status import IncidentStatus


@dataclass
class Incident:
    id: Optional[int]
    status_page_id: int

    name: str
    description: str
    impact: IncidentImpact
    status: IncidentStatus = IncidentStatus.INVESTIGATING

    started_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Linked once, when the incident is created.
    component_ids: list[int] = field(default_factory=list)
