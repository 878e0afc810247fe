from datetime import datetime
from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.component import Component
from core.domain.component_status import ComponentStatus
from core.port.component_repository import ComponentRepository
from infra.db.models import ComponentModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresComponentRepository(ComponentRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, component: Component) -> Component:
        async with self._session_factory() as session:
            model: Optional[ComponentModel] = None

            if component.id is not None:
                model = await session.get(ComponentModel, component.id)

            if model is None:
                model = ComponentModel(
                    status_page_id=component.status_page_id,
                    name=component.name,
                    component_group_id=component.component_group_id,
                    description=component.description,
                    status=component.status,
                    sort_order=component.sort_order,
                    is_visible=component.is_visible,
                    created_at=utc_or_now(component.created_at),
                    updated_at=utc_or_now(component.updated_at),
                )
                session.add(model)
            else:
                model.name = component.name
                model.component_group_id = component.component_group_id
                model.description = component.description
                model.status = component.status
                model.sort_order = component.sort_order
                model.is_visible = component.is_visible
                model.updated_at = utc_or_now(component.updated_at)

            await session.commit()
            await session.refresh(model)

            return self._to_domain(model)

    async def find_by_id(self, component_id: int) -> Optional[Component]:
        async with self._session_factory() as session:
            model = await session.get(ComponentModel, component_id)

            return self._to_domain(model) if model is not None else None

    async def find_by_ids(self, component_ids: list[int]) -> list[Component]:
        if not component_ids:
            return []

        async with self._session_factory() as session:
            statement = (
                select(ComponentModel)
                .where(ComponentModel.id.in_(component_ids))
                .order_by(ComponentModel.id.asc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    async def find_all_by_status_page_id(self, status_page_id: int, visible_only: bool = False) -> list[Component]:
        async with self._session_factory() as session:
            statement = (
                select(ComponentModel)
                .where(ComponentModel.status_page_id == status_page_id)
                .order_by(ComponentModel.sort_order.asc(), ComponentModel.name.asc())
            )

            if visible_only:
                statement = statement.where(ComponentModel.is_visible.is_(True))

            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    async def update_status(
        self,
        component_id: int,
        status: ComponentStatus,
        updated_at: datetime,
    ) -> Optional[Component]:
        async with self._session_factory() as session:
            model = await session.get(ComponentModel, component_id)

            if model is None:
                return None

            model.status = status
            model.updated_at = ensure_utc(updated_at)

            await session.commit()
            await session.refresh(model)

            return self._to_domain(model)

    def _to_domain(self, model: ComponentModel) -> Component:
        return Component(
            id=model.id,
            status_page_id=model.status_page_id,
            component_group_id=model.component_group_id,
            name=model.name,
            description=model.description,
            status=model.status,
            sort_order=model.sort_order,
            is_visible=model.is_visible,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


@lru_cache
def get_component_repository() -> ComponentRepository:
    session_factory = get_session_factory()

    return PostgresComponentRepository(session_factory)
