from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.incident_status import IncidentStatus


@dataclass
class IncidentUpdate:
    id: Optional[int]
    incident_id: int

    title: str
    body: str
    status: IncidentStatus

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
