from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class StatusPage:
    id: Optional[int]
    organization_id: int

    name: str
    description: Optional[str] = None
    domain: Optional[str] = None
    custom_css: Optional[str] = None
    logo_url: Optional[str] = None

    is_public: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
