from functools import lru_cache
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from core.domain.incident import Incident
from core.domain.incident_status import IncidentStatus
from core.domain.page import Page
from core.port.incident_repository import IncidentRepository
from infra.db.models import IncidentComponentModel, IncidentModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_optional_utc, ensure_utc, utc_or_now


class PostgresIncidentRepository(IncidentRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, incident: Incident) -> Incident:
        async with self._session_factory() as session:
            model: Optional[IncidentModel] = None

            if incident.id is not None:
                model = await session.get(IncidentModel, incident.id)

            if model is None:
                model = IncidentModel(
                    status_page_id=incident.status_page_id,
                    name=incident.name,
                    description=incident.description,
                    status=incident.status,
                    impact=incident.impact,
                    started_at=utc_or_now(incident.started_at),
                    resolved_at=ensure_optional_utc(incident.resolved_at),
                    created_at=utc_or_now(incident.created_at),
                    updated_at=utc_or_now(incident.updated_at),
                    component_links=[
                        IncidentComponentModel(component_id=component_id)
                        for component_id in dict.fromkeys(incident.component_ids)
                    ],
                )
                session.add(model)
            else:
                # Component links are fixed at creation.
                model.name = incident.name
                model.description = incident.description
                model.status = incident.status
                model.impact = incident.impact
                model.resolved_at = ensure_optional_utc(incident.resolved_at)
                model.updated_at = utc_or_now(incident.updated_at)

            await session.commit()

            saved_model = await self._find_model(session, model.id)

            return self._to_domain(saved_model)  # type: ignore[arg-type]

    async def find_by_id(self, incident_id: int) -> Optional[Incident]:
        async with self._session_factory() as session:
            model = await self._find_model(session, incident_id)

            return self._to_domain(model) if model is not None else None

    async def find_all_by_status_page_id(self, status_page_id: int, page: int, page_size: int) -> Page[Incident]:
        async with self._session_factory() as session:
            total_elements_statement = select(func.count(IncidentModel.id)).where(
                IncidentModel.status_page_id == status_page_id
            )
            total_elements = (await session.execute(total_elements_statement)).scalar_one()

            offset = (page - 1) * page_size
            statement = (
                select(IncidentModel)
                .options(selectinload(IncidentModel.component_links))
                .where(IncidentModel.status_page_id == status_page_id)
                .order_by(IncidentModel.created_at.desc(), IncidentModel.id.desc())
                .offset(offset)
                .limit(page_size)
            )
            models = (await session.execute(statement)).scalars().all()

            return Page.of(
                content=[self._to_domain(model) for model in models],
                page_size=page_size,
                total_elements=total_elements,
            )

    async def find_active_by_status_page_id(self, status_page_id: int) -> list[Incident]:
        async with self._session_factory() as session:
            statement = (
                select(IncidentModel)
                .options(selectinload(IncidentModel.component_links))
                .where(
                    IncidentModel.status_page_id == status_page_id,
                    IncidentModel.status != IncidentStatus.RESOLVED,
                )
                .order_by(IncidentModel.started_at.desc(), IncidentModel.id.desc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    async def _find_model(self, session: AsyncSession, incident_id: int) -> Optional[IncidentModel]:
        statement = (
            select(IncidentModel)
            .options(selectinload(IncidentModel.component_links))
            .where(IncidentModel.id == incident_id)
            .execution_options(populate_existing=True)
        )

        return (await session.execute(statement)).scalar_one_or_none()

    def _to_domain(self, model: IncidentModel) -> Incident:
        return Incident(
            id=model.id,
            status_page_id=model.status_page_id,
            name=model.name,
            description=model.description,
            status=model.status,
            impact=model.impact,
            started_at=ensure_utc(model.started_at),
            resolved_at=ensure_optional_utc(model.resolved_at),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            component_ids=sorted(link.component_id for link in model.component_links),
        )


@lru_cache
def get_incident_repository() -> IncidentRepository:
    session_factory = get_session_factory()

    return PostgresIncidentRepository(session_factory)
