from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.component_group import ComponentGroup
from core.port.component_group_repository import ComponentGroupRepository
from infra.db.models import ComponentGroupModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresComponentGroupRepository(ComponentGroupRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, component_group: ComponentGroup) -> ComponentGroup:
        async with self._session_factory() as session:
            model: Optional[ComponentGroupModel] = None

            if component_group.id is not None:
                model = await session.get(ComponentGroupModel, component_group.id)

            if model is None:
                model = ComponentGroupModel(
                    status_page_id=component_group.status_page_id,
                    name=component_group.name,
                    description=component_group.description,
                    sort_order=component_group.sort_order,
                    is_collapsed=component_group.is_collapsed,
                    created_at=utc_or_now(component_group.created_at),
                    updated_at=utc_or_now(component_group.updated_at),
                )
                session.add(model)
            else:
                model.name = component_group.name
                model.description = component_group.description
                model.sort_order = component_group.sort_order
                model.is_collapsed = component_group.is_collapsed
                model.updated_at = utc_or_now(component_group.updated_at)

            await session.commit()
            await session.refresh(model)

            return self._to_domain(model)

    async def find_by_id(self, component_group_id: int) -> Optional[ComponentGroup]:
        async with self._session_factory() as session:
            model = await session.get(ComponentGroupModel, component_group_id)

            return self._to_domain(model) if model is not None else None

    async def find_all_by_status_page_id(self, status_page_id: int) -> list[ComponentGroup]:
        async with self._session_factory() as session:
            statement = (
                select(ComponentGroupModel)
                .where(ComponentGroupModel.status_page_id == status_page_id)
                .order_by(ComponentGroupModel.sort_order.asc(), ComponentGroupModel.name.asc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    def _to_domain(self, model: ComponentGroupModel) -> ComponentGroup:
        return ComponentGroup(
            id=model.id,
            status_page_id=model.status_page_id,
            name=model.name,
            description=model.description,
            sort_order=model.sort_order,
            is_collapsed=model.is_collapsed,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


@lru_cache
def get_component_group_repository() -> ComponentGroupRepository:
    session_factory = get_session_factory()

    return PostgresComponentGroupRepository(session_factory)
