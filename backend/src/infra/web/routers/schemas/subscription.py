from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from infra.web.routers.schemas import CamelModel


class SubscriptionCreateDTO(CamelModel):
    status_page_id: int
    email: EmailStr
    subscribed_to_incidents: bool = True
    subscribed_to_maintenance: bool = True


class SubscriptionResponseDTO(CamelModel):
    id: int
    user_id: Optional[int] = None
    status_page_id: int
    email: str
    is_active: bool
    subscribed_to_incidents: bool
    subscribed_to_maintenance: bool
    created_at: datetime
    updated_at: datetime
