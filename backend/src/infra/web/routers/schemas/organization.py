from datetime import datetime

from pydantic import Field

from core.domain.subscription_tier import SubscriptionTier
from infra.web.routers.schemas import CamelModel


class OrganizationCreateDTO(CamelModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE


class OrganizationResponseDTO(CamelModel):
    id: int
    name: str
    slug: str
    subscription_tier: SubscriptionTier
    is_active: bool
    created_at: datetime
    updated_at: datetime
