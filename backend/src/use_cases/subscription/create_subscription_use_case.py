from core.domain.subscription import Subscription
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from core.exceptions.status_page_not_public_error import StatusPageNotPublicError
from core.exceptions.subscription_already_exists_error import SubscriptionAlreadyExistsError
from core.port.clock import Clock
from core.port.status_page_repository import StatusPageRepository
from core.port.subscription_repository import SubscriptionRepository
from infra.web.routers.schemas.subscription import SubscriptionCreateDTO


class CreateSubscriptionUseCase:
    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        status_page_repository: StatusPageRepository,
        clock: Clock,
    ) -> None:
        self.subscription_repository = subscription_repository
        self.status_page_repository = status_page_repository
        self.clock = clock

    async def execute(self, subscription: SubscriptionCreateDTO) -> Subscription:
        status_page = await self.status_page_repository.find_by_id(subscription.status_page_id)

        if not status_page:
            raise StatusPageNotFoundError(subscription.status_page_id)

        if not status_page.is_public:
            raise StatusPageNotPublicError(subscription.status_page_id)

        email = str(subscription.email)
        existing = await self.subscription_repository.find_by_email_and_status_page_id(
            email=email,
            status_page_id=subscription.status_page_id,
        )

        if existing:
            raise SubscriptionAlreadyExistsError(email, subscription.status_page_id)

        now = self.clock.now()

        subscription_entity = Subscription(
            id=None,
            status_page_id=subscription.status_page_id,
            email=email,
            user_id=None,
            is_active=True,
            subscribed_to_incidents=subscription.subscribed_to_incidents,
            subscribed_to_maintenance=subscription.subscribed_to_maintenance,
            created_at=now,
            updated_at=now,
        )

        return await self.subscription_repository.save(subscription_entity)
