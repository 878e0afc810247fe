import structlog

from core.port.scheduler import Scheduler
from use_cases.maintenance_window.advance_maintenance_windows_use_case import (
    AdvanceMaintenanceWindowsUseCase,
)

logger = structlog.stdlib.get_logger(__name__)

ADVANCE_MAINTENANCE_JOB_KEY = "advance_maintenance_windows"


class MaintenanceService:
    def __init__(
        self,
        sync_interval_seconds: int,
        scheduler: Scheduler,
        advance_maintenance_windows_use_case: AdvanceMaintenanceWindowsUseCase,
    ):
        self.SYNC_INTERVAL_SECONDS = sync_interval_seconds
        self.scheduler = scheduler

        self.advance_maintenance_windows_use_case = advance_maintenance_windows_use_case

    async def start(self):
        if self.scheduler.has_job(ADVANCE_MAINTENANCE_JOB_KEY):
            logger.warning("Maintenance service already started")
            return

        logger.info("Maintenance service started", interval_seconds=self.SYNC_INTERVAL_SECONDS)

        self.scheduler.add_job(
            job_key=ADVANCE_MAINTENANCE_JOB_KEY,
            func=self._advance_maintenance_windows,
            interval_seconds=self.SYNC_INTERVAL_SECONDS,
            job_name="Advance maintenance windows",
            run_immediately=True,
        )

    async def stop(self):
        if self.scheduler.remove_job(ADVANCE_MAINTENANCE_JOB_KEY):
            logger.info("Maintenance service stopped")

    async def _advance_maintenance_windows(self):
        logger.debug("Advancing maintenance windows")

        try:
            advance = await self.advance_maintenance_windows_use_case.execute()
        except Exception:
            logger.exception("Error advancing maintenance windows")
            return

        for maintenance_window in advance.started:
            logger.info(
                "Maintenance window started",
                maintenance_window_id=maintenance_window.id,
                status_page_id=maintenance_window.status_page_id,
                components=len(maintenance_window.component_ids),
            )

        for maintenance_window in advance.completed:
            logger.info(
                "Maintenance window completed",
                maintenance_window_id=maintenance_window.id,
                status_page_id=maintenance_window.status_page_id,
                components=len(maintenance_window.component_ids),
            )
