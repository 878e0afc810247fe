from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.subscription import Subscription
from core.exceptions.subscription_already_exists_error import SubscriptionAlreadyExistsError
from core.port.subscription_repository import SubscriptionRepository
from infra.db.models import SubscriptionModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresSubscriptionRepository(SubscriptionRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, subscription: Subscription) -> Subscription:
        async with self._session_factory() as session:
            try:
                model: Optional[SubscriptionModel] = None

                if subscription.id is not None:
                    model = await session.get(SubscriptionModel, subscription.id)

                if model is None:
                    model = SubscriptionModel(
                        status_page_id=subscription.status_page_id,
                        email=subscription.email,
                        user_id=subscription.user_id,
                        is_active=subscription.is_active,
                        subscribed_to_incidents=subscription.subscribed_to_incidents,
                        subscribed_to_maintenance=subscription.subscribed_to_maintenance,
                        created_at=utc_or_now(subscription.created_at),
                        updated_at=utc_or_now(subscription.updated_at),
                    )
                    session.add(model)
                else:
                    model.is_active = subscription.is_active
                    model.subscribed_to_incidents = subscription.subscribed_to_incidents
                    model.subscribed_to_maintenance = subscription.subscribed_to_maintenance
                    model.updated_at = utc_or_now(subscription.updated_at)

                await session.commit()
                await session.refresh(model)

                return self._to_domain(model)

            except IntegrityError as e:
                await session.rollback()

                error_msg = str(e.orig).lower()

                if "uq_subscriptions_email_status_page_id" in error_msg or "subscriptions.email" in error_msg:
                    raise SubscriptionAlreadyExistsError(subscription.email, subscription.status_page_id)

                raise

    async def find_by_email_and_status_page_id(self, email: str, status_page_id: int) -> Optional[Subscription]:
        async with self._session_factory() as session:
            statement = select(SubscriptionModel).where(
                SubscriptionModel.email == email,
                SubscriptionModel.status_page_id == status_page_id,
            )
            model = (await session.execute(statement)).scalar_one_or_none()

            return self._to_domain(model) if model is not None else None

    def _to_domain(self, model: SubscriptionModel) -> Subscription:
        return Subscription(
            id=model.id,
            status_page_id=model.status_page_id,
            email=model.email,
            user_id=model.user_id,
            is_active=model.is_active,
            subscribed_to_incidents=model.subscribed_to_incidents,
            subscribed_to_maintenance=model.subscribed_to_maintenance,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


@lru_cache
def get_subscription_repository() -> SubscriptionRepository:
    session_factory = get_session_factory()

    return PostgresSubscriptionRepository(session_factory)
