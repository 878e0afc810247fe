from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.status_page import StatusPage
from core.port.status_page_repository import StatusPageRepository
from infra.db.models import StatusPageModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresStatusPageRepository(StatusPageRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, status_page: StatusPage) -> StatusPage:
        async with self._session_factory() as session:
            model: Optional[StatusPageModel] = None

            if status_page.id is not None:
                model = await session.get(StatusPageModel, status_page.id)

            if model is None:
                model = StatusPageModel(
                    organization_id=status_page.organization_id,
                    name=status_page.name,
                    description=status_page.description,
                    domain=status_page.domain,
                    custom_css=status_page.custom_css,
                    logo_url=status_page.logo_url,
                    is_public=status_page.is_public,
                    created_at=utc_or_now(status_page.created_at),
                    updated_at=utc_or_now(status_page.updated_at),
                )
                session.add(model)
            else:
                model.name = status_page.name
                model.description = status_page.description
                model.domain = status_page.domain
                model.custom_css = status_page.custom_css
                model.logo_url = status_page.logo_url
                model.is_public = status_page.is_public
                model.updated_at = utc_or_now(status_page.updated_at)

            await session.commit()
            await session.refresh(model)

            return self._to_domain(model)

    async def find_by_id(self, status_page_id: int) -> Optional[StatusPage]:
        async with self._session_factory() as session:
            model = await session.get(StatusPageModel, status_page_id)

            return self._to_domain(model) if model is not None else None

    async def find_all(self, organization_id: Optional[int] = None) -> list[StatusPage]:
        async with self._session_factory() as session:
            statement = select(StatusPageModel).order_by(StatusPageModel.id.asc())

            if organization_id is not None:
                statement = statement.where(StatusPageModel.organization_id == organization_id)

            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    async def find_public_by_organization_id(self, organization_id: int) -> Optional[StatusPage]:
        async with self._session_factory() as session:
            statement = (
                select(StatusPageModel)
                .where(
                    StatusPageModel.organization_id == organization_id,
                    StatusPageModel.is_public.is_(True),
                )
                .order_by(StatusPageModel.id.asc())
                .limit(1)
            )
            model = (await session.execute(statement)).scalar_one_or_none()

            return self._to_domain(model) if model is not None else None

    def _to_domain(self, model: StatusPageModel) -> StatusPage:
        return StatusPage(
            id=model.id,
            organization_id=model.organization_id,
            name=model.name,
            description=model.description,
            domain=model.domain,
            custom_css=model.custom_css,
            logo_url=model.logo_url,
            is_public=model.is_public,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


@lru_cache
def get_status_page_repository() -> StatusPageRepository:
    session_factory = get_session_factory()

    return PostgresStatusPageRepository(session_factory)
