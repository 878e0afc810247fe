from datetime import datetime
from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.metric import Metric
from core.port.metric_repository import MetricRepository
from infra.db.models import MetricModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresMetricRepository(MetricRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def add(self, metric: Metric) -> Metric:
        async with self._session_factory() as session:
            model = MetricModel(
                component_id=metric.component_id,
                timestamp=ensure_utc(metric.timestamp),
                status=metric.status,
                response_time=metric.response_time,
                created_at=utc_or_now(metric.created_at),
            )

            session.add(model)
            await session.commit()
            await session.refresh(model)

            return self._to_domain(model)

    async def find_all_by_component_id(
        self,
        component_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Metric]:
        async with self._session_factory() as session:
            statement = (
                select(MetricModel)
                .where(MetricModel.component_id == component_id)
                .order_by(MetricModel.timestamp.desc(), MetricModel.id.desc())
            )

            if start is not None:
                statement = statement.where(MetricModel.timestamp >= ensure_utc(start))

            if end is not None:
                statement = statement.where(MetricModel.timestamp <= ensure_utc(end))

            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    def _to_domain(self, model: MetricModel) -> Metric:
        return Metric(
            id=model.id,
            component_id=model.component_id,
            timestamp=ensure_utc(model.timestamp),
            status=model.status,
            response_time=model.response_time,
            created_at=ensure_utc(model.created_at),
        )


@lru_cache
def get_metric_repository() -> MetricRepository:
    session_factory = get_session_factory()

    return PostgresMetricRepository(session_factory)
