from functools import lru_cache

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.incident_update import IncidentUpdate
from core.port.incident_update_repository import IncidentUpdateRepository
from infra.db.models import IncidentUpdateModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresIncidentUpdateRepository(IncidentUpdateRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def add(self, incident_update: IncidentUpdate) -> IncidentUpdate:
        async with self._session_factory() as session:
            model = IncidentUpdateModel(
                incident_id=incident_update.incident_id,
                title=incident_update.title,
                body=incident_update.body,
                status=incident_update.status,
                created_at=utc_or_now(incident_update.created_at),
                updated_at=utc_or_now(incident_update.updated_at),
            )

            session.add(model)
            await session.commit()
            await session.refresh(model)

            return self._to_domain(model)

    async def find_all_by_incident_id(self, incident_id: int) -> list[IncidentUpdate]:
        async with self._session_factory() as session:
            statement = (
                select(IncidentUpdateModel)
                .where(IncidentUpdateModel.incident_id == incident_id)
                .order_by(IncidentUpdateModel.created_at.desc(), IncidentUpdateModel.id.desc())
            )
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    def _to_domain(self, model: IncidentUpdateModel) -> IncidentUpdate:
        return IncidentUpdate(
            id=model.id,
            incident_id=model.incident_id,
            title=model.title,
            body=model.body,
            status=model.status,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


@lru_cache
def get_incident_update_repository() -> IncidentUpdateRepository:
    session_factory = get_session_factory()

    return PostgresIncidentUpdateRepository(session_factory)
