from abc import ABC, abstractmethod
from typing import Optional

from core.domain.subscription import Subscription


class SubscriptionRepository(ABC):
    @abstractmethod
    async def save(self, subscription: Subscription) -> Subscription:
        raise NotImplementedError

    @abstractmethod
    async def find_by_email_and_status_page_id(self, email: str, status_page_id: int) -> Optional[Subscription]:
        raise NotImplementedError
