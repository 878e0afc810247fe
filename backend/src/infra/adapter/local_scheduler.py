from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Callable, Optional

import structlog
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.interval import IntervalTrigger

from core.port.scheduler import Scheduler

logger = structlog.stdlib.get_logger(__name__)


class LocalScheduler(Scheduler):
    def __init__(self, scheduler: BaseScheduler) -> None:
        self.scheduler = scheduler
        self._jobs: dict[str, str] = {}

    def start(self) -> None:
        self.scheduler.start()

    def stop(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=True)

        self._jobs.clear()

    def add_job(
        self,
        job_key: str,
        func: Callable[..., Any],
        interval_seconds: int,
        args: tuple = (),
        kwargs: Optional[dict] = None,
        job_name: Optional[str] = None,
        run_immediately: bool = False,
    ) -> str:
        if job_key in self._jobs:
            self.remove_job(job_key)

        job_options: dict[str, Any] = {}

        if run_immediately:
            job_options["next_run_time"] = datetime.now(timezone.utc)

        job = self.scheduler.add_job(
            func=func,
            trigger=IntervalTrigger(seconds=interval_seconds),
            args=args,
            kwargs=kwargs or {},
            id=job_key,
            name=job_name or job_key,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            **job_options,
        )

        self._jobs[job_key] = job.id
        logger.debug("Job scheduled", job_key=job_key, interval_seconds=interval_seconds)

        return job.id

    def remove_job(self, job_key: str) -> bool:
        job_id = self._jobs.pop(job_key, None)

        if job_id is None:
            return False

        try:
            self.scheduler.remove_job(job_id)
        except JobLookupError:
            logger.warning("Job already removed from scheduler", job_key=job_key)
            return False

        return True

    def has_job(self, job_key: str) -> bool:
        return job_key in self._jobs


@lru_cache
def get_local_scheduler() -> Scheduler:
    scheduler = AsyncIOScheduler(timezone=timezone.utc)

    return LocalScheduler(scheduler)
