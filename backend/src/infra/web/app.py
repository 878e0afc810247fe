from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from infra.adapter.local_scheduler import get_local_scheduler
from infra.adapter.postgres_component_repository import get_component_repository
from infra.adapter.postgres_maintenance_window_repository import get_maintenance_window_repository
from infra.adapter.system_clock import get_system_clock
from infra.config.config import get_config
from infra.db.session import close_engine, create_database_schema
from infra.logging.config import configure_logging
from infra.services.maintenance_service import MaintenanceService
from infra.web.middleware.request_event_log_middleware import RequestEventLogMiddleware
from infra.web.routers.component_group_router import router as component_group_router
from infra.web.routers.component_router import router as component_router
from infra.web.routers.incident_router import router as incident_router
from infra.web.routers.maintenance_window_router import router as maintenance_window_router
from infra.web.routers.organization_router import router as organization_router
from infra.web.routers.stats_router import router as stats_router
from infra.web.routers.status_page_router import router as status_page_router
from infra.web.routers.subscription_router import router as subscription_router
from infra.web.routers.user_router import router as user_router
from use_cases.maintenance_window.advance_maintenance_windows_use_case import (
    AdvanceMaintenanceWindowsUseCase,
)

logger = structlog.stdlib.get_logger(__name__)


def create_app() -> FastAPI:
    config = get_config()

    configure_logging(
        log_level=config.LOGGING_CONFIG.LEVEL,
        json_logs=config.LOGGING_CONFIG.JSON_FORMAT,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        library_log_levels=config.LOGGING_CONFIG.LIBRARY_LOG_LEVELS,
    )

    scheduler = get_local_scheduler()

    maintenance_service = MaintenanceService(
        sync_interval_seconds=config.MAINTENANCE_CONFIG.SYNC_INTERVAL_SECONDS,
        scheduler=scheduler,
        advance_maintenance_windows_use_case=AdvanceMaintenanceWindowsUseCase(
            maintenance_window_repository=get_maintenance_window_repository(),
            component_repository=get_component_repository(),
            clock=get_system_clock(),
        ),
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if config.ENVIRONMENT in ("loc", "dev"):
            logger.info("Creating database schema", environment=config.ENVIRONMENT)
            await create_database_schema()

        scheduler.start()

        if config.MAINTENANCE_CONFIG.ENABLED:
            await maintenance_service.start()
        else:
            logger.info("Maintenance service disabled")

        yield

        await maintenance_service.stop()
        scheduler.stop()

        await close_engine()

    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        root_path=config.ROOT_PATH,
        docs_url="/apidocs",
        lifespan=lifespan,
    )

    app.state.host = config.HOST
    app.state.port = config.PORT

    app.add_middleware(
        RequestEventLogMiddleware,
        excluded_path_suffixes={"/stats/health", "/apidocs", "/openapi.json"},
    )

    app.include_router(stats_router)
    app.include_router(user_router)
    app.include_router(organization_router)
    app.include_router(status_page_router)
    app.include_router(component_group_router)
    app.include_router(component_router)
    app.include_router(incident_router)
    app.include_router(maintenance_window_router)
    app.include_router(subscription_router)

    return app
