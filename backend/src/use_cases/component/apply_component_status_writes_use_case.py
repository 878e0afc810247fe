from typing import Iterable

import structlog

from core.domain.impact_propagation import ComponentStatusWrite, StatusWriteResult
from core.port.clock import Clock
from core.port.component_repository import ComponentRepository

logger = structlog.stdlib.get_logger(__name__)


class ApplyComponentStatusWritesUseCase:
    """Apply component status writes one by one.

    Each write is independent: a failing write is logged and reported in
    ``StatusWriteResult.failed`` while the remaining writes still go through.
    A write for a component that no longer exists counts as failed.
    """

    def __init__(self, component_repository: ComponentRepository, clock: Clock) -> None:
        self.component_repository = component_repository
        self.clock = clock

    async def execute(self, writes: Iterable[ComponentStatusWrite]) -> StatusWriteResult:
        result = StatusWriteResult()
        now = self.clock.now()

        for write in writes:
            try:
                updated_component = await self.component_repository.update_status(
                    component_id=write.component_id,
                    status=write.new_status,
                    updated_at=now,
                )
            except Exception:
                logger.exception(
                    "Failed to apply component status write",
                    component_id=write.component_id,
                    new_status=write.new_status.value,
                )
                result.failed.append(write)
                continue

            if not updated_component:
                logger.warning(
                    "Component not found while applying status write",
                    component_id=write.component_id,
                    new_status=write.new_status.value,
                )
                result.failed.append(write)
                continue

            result.applied.append(write)

        if result.is_partial_failure:
            logger.warning(
                "Component status writes partially applied",
                applied=len(result.applied),
                failed=len(result.failed),
            )
        elif result.failed:
            logger.error("No component status writes applied", failed=len(result.failed))

        return result
