from collections.abc import AsyncGenerator

import httpx
import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import infra.db.session as db_session
from infra.adapter.local_scheduler import get_local_scheduler
from infra.adapter.pbkdf2_password_hasher import get_password_hasher
from infra.adapter.postgres_component_group_repository import get_component_group_repository
from infra.adapter.postgres_component_repository import get_component_repository
from infra.adapter.postgres_incident_repository import get_incident_repository
from infra.adapter.postgres_incident_update_repository import get_incident_update_repository
from infra.adapter.postgres_maintenance_window_repository import get_maintenance_window_repository
from infra.adapter.postgres_metric_repository import get_metric_repository
from infra.adapter.postgres_organization_repository import get_organization_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.adapter.postgres_subscription_repository import get_subscription_repository
from infra.adapter.postgres_user_repository import get_user_repository
from infra.adapter.system_clock import get_system_clock
from infra.config.config import get_config
from infra.db.models import Base


@pytest.fixture(autouse=True)
def _set_required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_CONFIG__DRIVER", "postgres")
    monkeypatch.setenv("DATABASE_CONFIG__SQLITE_PATH", "./status_page_platform.db")
    monkeypatch.setenv("DATABASE_CONFIG__USER", "status_page_user")
    monkeypatch.setenv("DATABASE_CONFIG__PASSWORD", "1234")
    monkeypatch.setenv("DATABASE_CONFIG__HOST", "localhost")
    monkeypatch.setenv("DATABASE_CONFIG__PORT", "5432")
    monkeypatch.setenv("DATABASE_CONFIG__DATABASE", "status_page_platform")


@pytest.fixture(autouse=True)
def _reset_cached_singletons() -> AsyncGenerator[None, None]:
    cacheables = [
        get_config,
        db_session.get_engine,
        db_session.get_session_factory,
        get_user_repository,
        get_organization_repository,
        get_status_page_repository,
        get_component_group_repository,
        get_component_repository,
        get_incident_repository,
        get_incident_update_repository,
        get_maintenance_window_repository,
        get_subscription_repository,
        get_metric_repository,
        get_system_clock,
        get_local_scheduler,
        get_password_hasher,
    ]

    for cacheable in cacheables:
        cacheable.cache_clear()

    yield

    for cacheable in cacheables:
        cacheable.cache_clear()


@pytest.fixture(autouse=True)
def _block_postgres_engine(monkeypatch: pytest.MonkeyPatch) -> None:
    original_create_async_engine = db_session.create_async_engine

    def guarded_create_async_engine(url, *args, **kwargs):
        if "postgresql+asyncpg" in str(url):
            raise RuntimeError("Tests must not create PostgreSQL engines")

        return original_create_async_engine(url, *args, **kwargs)

    monkeypatch.setattr(db_session, "create_async_engine", guarded_create_async_engine)


@pytest.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    pytest.importorskip("aiosqlite")

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    event.listens_for(engine.sync_engine, "connect")(db_session._enable_sqlite_foreign_keys)

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def sqlite_session_factory(sqlite_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=sqlite_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def async_client_factory() -> AsyncGenerator:
    clients: list[httpx.AsyncClient] = []

    async def _factory(app, *, raise_app_exceptions: bool = True) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        client = httpx.AsyncClient(transport=transport, base_url="http://testserver")
        clients.append(client)
        return client

    try:
        yield _factory
    finally:
        for client in clients:
            await client.aclose()
