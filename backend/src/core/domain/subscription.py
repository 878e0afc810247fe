from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Subscription:
    id: Optional[int]
    status_page_id: int

    email: str
    user_id: Optional[int] = None

    is_active: bool = True
    subscribed_to_incidents: bool = True
    subscribed_to_maintenance: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
