from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.subscription_tier import SubscriptionTier


@dataclass
class Organization:
    id: Optional[int]

    name: str
    slug: str
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE

    is_active: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
