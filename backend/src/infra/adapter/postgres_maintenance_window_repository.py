from datetime import datetime
from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from core.domain.maintenance_status import MaintenanceStatus
from core.domain.maintenance_window import MaintenanceWindow
from core.port.maintenance_window_repository import MaintenanceWindowRepository
from infra.db.models import MaintenanceComponentModel, MaintenanceWindowModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_optional_utc, ensure_utc, utc_or_now


class PostgresMaintenanceWindowRepository(MaintenanceWindowRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, maintenance_window: MaintenanceWindow) -> MaintenanceWindow:
        async with self._session_factory() as session:
            model: Optional[MaintenanceWindowModel] = None

            if maintenance_window.id is not None:
                model = await session.get(MaintenanceWindowModel, maintenance_window.id)

            if model is None:
                model = MaintenanceWindowModel(
                    status_page_id=maintenance_window.status_page_id,
                    name=maintenance_window.name,
                    description=maintenance_window.description,
                    status=maintenance_window.status,
                    scheduled_start=ensure_utc(maintenance_window.scheduled_start),
                    scheduled_end=ensure_utc(maintenance_window.scheduled_end),
                    actual_start=ensure_optional_utc(maintenance_window.actual_start),
                    actual_end=ensure_optional_utc(maintenance_window.actual_end),
                    created_at=utc_or_now(maintenance_window.created_at),
                    updated_at=utc_or_now(maintenance_window.updated_at),
                    component_links=[
                        MaintenanceComponentModel(component_id=component_id)
                        for component_id in dict.fromkeys(maintenance_window.component_ids)
                    ],
                )
                session.add(model)
            else:
                model.name = maintenance_window.name
                model.description = maintenance_window.description
                model.status = maintenance_window.status
                model.scheduled_start = ensure_utc(maintenance_window.scheduled_start)
                model.scheduled_end = ensure_utc(maintenance_window.scheduled_end)
                model.actual_start = ensure_optional_utc(maintenance_window.actual_start)
                model.actual_end = ensure_optional_utc(maintenance_window.actual_end)
                model.updated_at = utc_or_now(maintenance_window.updated_at)

            await session.commit()

            statement = (
                select(MaintenanceWindowModel)
                .options(selectinload(MaintenanceWindowModel.component_links))
                .where(MaintenanceWindowModel.id == model.id)
                .execution_options(populate_existing=True)
            )
            saved_model = (await session.execute(statement)).scalar_one()

            return self._to_domain(saved_model)

    async def find_all_by_status_page_id(self, status_page_id: int) -> list[MaintenanceWindow]:
        async with self._session_factory() as session:
            statement = (
                select(MaintenanceWindowModel)
                .options(selectinload(MaintenanceWindowModel.component_links))
                .where(MaintenanceWindowModel.status_page_id == status_page_id)
                .order_by(MaintenanceWindowModel.scheduled_start.desc(), MaintenanceWindowModel.id.desc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    async def find_upcoming_by_status_page_id(self, status_page_id: int, since: datetime) -> list[MaintenanceWindow]:
        async with self._session_factory() as session:
            statement = (
                select(MaintenanceWindowModel)
                .options(selectinload(MaintenanceWindowModel.component_links))
                .where(
                    MaintenanceWindowModel.status_page_id == status_page_id,
                    MaintenanceWindowModel.scheduled_start >= ensure_utc(since),
                )
                .order_by(MaintenanceWindowModel.scheduled_start.asc(), MaintenanceWindowModel.id.asc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    async def find_unfinished(self) -> list[MaintenanceWindow]:
        async with self._session_factory() as session:
            statement = (
                select(MaintenanceWindowModel)
                .options(selectinload(MaintenanceWindowModel.component_links))
                .where(MaintenanceWindowModel.status != MaintenanceStatus.COMPLETED)
                .order_by(MaintenanceWindowModel.scheduled_start.asc(), MaintenanceWindowModel.id.asc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    def _to_domain(self, model: MaintenanceWindowModel) -> MaintenanceWindow:
        return MaintenanceWindow(
            id=model.id,
            status_page_id=model.status_page_id,
            name=model.name,
            description=model.description,
            status=model.status,
            scheduled_start=ensure_utc(model.scheduled_start),
            scheduled_end=ensure_utc(model.scheduled_end),
            actual_start=ensure_optional_utc(model.actual_start),
            actual_end=ensure_optional_utc(model.actual_end),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            component_ids=sorted(link.component_id for link in model.component_links),
        )


@lru_cache
def get_maintenance_window_repository() -> MaintenanceWindowRepository:
    session_factory = get_session_factory()

    return PostgresMaintenanceWindowRepository(session_factory)
