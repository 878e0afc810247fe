from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.organization import Organization
from core.exceptions.organization_already_exists_error import OrganizationAlreadyExistsError
from core.port.organization_repository import OrganizationRepository
from infra.db.models import OrganizationModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresOrganizationRepository(OrganizationRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, organization: Organization) -> Organization:
        async with self._session_factory() as session:
            try:
                model: Optional[OrganizationModel] = None

                if organization.id is not None:
                    model = await session.get(OrganizationModel, organization.id)

                if model is None:
                    model = OrganizationModel(
                        name=organization.name,
                        slug=organization.slug,
                        subscription_tier=organization.subscription_tier,
                        is_active=organization.is_active,
                        created_at=utc_or_now(organization.created_at),
                        updated_at=utc_or_now(organization.updated_at),
                    )
                    session.add(model)
                else:
                    model.name = organization.name
                    model.slug = organization.slug
                    model.subscription_tier = organization.subscription_tier
                    model.is_active = organization.is_active
                    model.updated_at = utc_or_now(organization.updated_at)

                await session.commit()
                await session.refresh(model)

                return self._to_domain(model)

            except IntegrityError as e:
                await session.rollback()

                error_msg = str(e.orig).lower()

                if "slug" in error_msg:
                    raise OrganizationAlreadyExistsError("slug", organization.slug)

                raise

    async def find_by_id(self, organization_id: int) -> Optional[Organization]:
        async with self._session_factory() as session:
            model = await session.get(OrganizationModel, organization_id)

            return self._to_domain(model) if model is not None else None

    async def find_by_slug(self, slug: str) -> Optional[Organization]:
        async with self._session_factory() as session:
            statement = select(OrganizationModel).where(OrganizationModel.slug == slug)
            model = (await session.execute(statement)).scalar_one_or_none()

            return self._to_domain(model) if model is not None else None

    async def find_all_active(self) -> list[Organization]:
        async with self._session_factory() as session:
            statement = (
                select(OrganizationModel)
                .where(OrganizationModel.is_active.is_(True))
                .order_by(OrganizationModel.name.asc(), OrganizationModel.id.asc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    def _to_domain(self, model: OrganizationModel) -> Organization:
        return Organization(
            id=model.id,
            name=model.name,
            slug=model.slug,
            subscription_tier=model.subscription_tier,
            is_active=model.is_active,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


@lru_cache
def get_organization_repository() -> OrganizationRepository:
    session_factory = get_session_factory()

    return PostgresOrganizationRepository(session_factory)
