from dataclasses import dataclass, field
from typing import Iterable

from core.domain.component_status import ComponentStatus
from core.domain.incident_impact import IncidentImpact


@dataclass(frozen=True)
class ComponentStatusWrite:
    component_id: int
    new_status: ComponentStatus


@dataclass
class StatusWriteResult:
    applied: list[ComponentStatusWrite] = field(default_factory=list)
    failed: list[ComponentStatusWrite] = field(default_factory=list)

    @property
    def is_partial_failure(self) -> bool:
        return bool(self.failed) and bool(self.applied)


def propagate_incident_impact(
    impact: IncidentImpact,
    component_ids: Iterable[int],
) -> list[ComponentStatusWrite]:
    """Compute the component status writes implied by an incident's impact.

    An impact that maps to ``operational`` yields no writes at all: creating an
    incident can raise a component's visible status but never restore it.
    The current status of each component is not consulted.
    """
    target_status = impact.target_component_status

    if target_status is ComponentStatus.OPERATIONAL:
        return []

    deduped_component_ids = list(dict.fromkeys(component_ids))

    return [
        ComponentStatusWrite(component_id=component_id, new_status=target_status)
        for component_id in deduped_component_ids
    ]
