from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.component_status import ComponentStatus


@dataclass
class Metric:
    id: Optional[int]
    component_id: int

    timestamp: datetime
    status: ComponentStatus
    response_time: Optional[int] = None

    created_at: Optional[datetime] = None
