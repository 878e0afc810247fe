from dataclasses import dataclass, field, replace
from datetime import datetime

import structlog

from core.domain.component_status import ComponentStatus
from core.domain.impact_propagation import ComponentStatusWrite
from core.domain.maintenance_status import MaintenanceStatus
from core.domain.maintenance_window import MaintenanceWindow
from core.port.clock import Clock
from core.port.component_repository import ComponentRepository
from core.port.maintenance_window_repository import MaintenanceWindowRepository
from use_cases.component.apply_component_status_writes_use_case import ApplyComponentStatusWritesUseCase

logger = structlog.stdlib.get_logger(__name__)


@dataclass
class MaintenanceAdvance:
    started: list[MaintenanceWindow] = field(default_factory=list)
    completed: list[MaintenanceWindow] = field(default_factory=list)


class AdvanceMaintenanceWindowsUseCase:
    """Move maintenance windows along scheduled -> in_progress -> completed.

    Starting a window puts its operational components under maintenance; a
    component already in an outage keeps its status. Completing a window
    restores to operational only the components still under maintenance and
    not held by another window that stays in progress.
    """

    def __init__(
        self,
        maintenance_window_repository: MaintenanceWindowRepository,
        component_repository: ComponentRepository,
        clock: Clock,
    ) -> None:
        self.maintenance_window_repository = maintenance_window_repository
        self.component_repository = component_repository
        self.clock = clock

    async def execute(self) -> MaintenanceAdvance:
        now = self.clock.now()
        advance = MaintenanceAdvance()
        apply_writes = ApplyComponentStatusWritesUseCase(self.component_repository, self.clock)

        unfinished = await self.maintenance_window_repository.find_unfinished()
        held_component_ids = {
            component_id
            for maintenance_window in unfinished
            if _in_progress_after(maintenance_window, now)
            for component_id in maintenance_window.component_ids
        }

        for maintenance_window in unfinished:
            if maintenance_window.should_complete(now):
                completed = await self._complete(maintenance_window, now, apply_writes, held_component_ids)
                advance.completed.append(completed)
            elif maintenance_window.should_start(now):
                started = await self._start(maintenance_window, now, apply_writes)
                advance.started.append(started)

        if advance.started or advance.completed:
            logger.info(
                "Maintenance windows advanced",
                started=len(advance.started),
                completed=len(advance.completed),
            )

        return advance

    async def _start(
        self,
        maintenance_window: MaintenanceWindow,
        now: datetime,
        apply_writes: ApplyComponentStatusWritesUseCase,
    ) -> MaintenanceWindow:
        started = await self.maintenance_window_repository.save(
            replace(
                maintenance_window,
                status=MaintenanceStatus.IN_PROGRESS,
                actual_start=now,
                updated_at=now,
            )
        )

        await self._move_components(
            maintenance_window.component_ids,
            from_status=ComponentStatus.OPERATIONAL,
            to_status=ComponentStatus.UNDER_MAINTENANCE,
            apply_writes=apply_writes,
        )

        return started

    async def _complete(
        self,
        maintenance_window: MaintenanceWindow,
        now: datetime,
        apply_writes: ApplyComponentStatusWritesUseCase,
        held_component_ids: set[int],
    ) -> MaintenanceWindow:
        completed = await self.maintenance_window_repository.save(
            replace(
                maintenance_window,
                status=MaintenanceStatus.COMPLETED,
                actual_start=maintenance_window.actual_start or now,
                actual_end=now,
                updated_at=now,
            )
        )

        await self._move_components(
            [
                component_id
                for component_id in maintenance_window.component_ids
                if component_id not in held_component_ids
            ],
            from_status=ComponentStatus.UNDER_MAINTENANCE,
            to_status=ComponentStatus.OPERATIONAL,
            apply_writes=apply_writes,
        )

        return completed

    async def _move_components(
        self,
        component_ids: list[int],
        from_status: ComponentStatus,
        to_status: ComponentStatus,
        apply_writes: ApplyComponentStatusWritesUseCase,
    ) -> None:
        if not component_ids:
            return

        components = await self.component_repository.find_by_ids(component_ids)

        await apply_writes.execute(
            [
                ComponentStatusWrite(component_id=component.id, new_status=to_status)
                for component in components
                if component.id is not None and component.status is from_status
            ]
        )


def _in_progress_after(maintenance_window: MaintenanceWindow, now: datetime) -> bool:
    if maintenance_window.should_complete(now):
        return False

    return maintenance_window.status is MaintenanceStatus.IN_PROGRESS or maintenance_window.should_start(now)
