from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.component_status import ComponentStatus


@dataclass
class Component:
    id: Optional[int]
    status_page_id: int

    name: str
    description: Optional[str] = None
    component_group_id: Optional[int] = None

    status: ComponentStatus = ComponentStatus.OPERATIONAL
    sort_order: int = 0
    is_visible: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
