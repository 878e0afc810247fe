from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ComponentGroup:
    id: Optional[int]
    status_page_id: int

    name: str
    description: Optional[str] = None
    sort_order: int = 0
    is_collapsed: bool = False

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
