from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from core.domain.maintenance_status import MaintenanceStatus


@dataclass
class MaintenanceWindow:
    id: Optional[int]
    status_page_id: int

    name: str
    description: str
    scheduled_start: datetime
    scheduled_end: datetime
    status: MaintenanceStatus = MaintenanceStatus.SCHEDULED

    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    component_ids: list[int] = field(default_factory=list)

    def should_start(self, now: datetime) -> bool:
        return self.status is MaintenanceStatus.SCHEDULED and self.scheduled_start <= now < self.scheduled_end

    def should_complete(self, now: datetime) -> bool:
        return self.status is not MaintenanceStatus.COMPLETED and self.scheduled_end <= now
