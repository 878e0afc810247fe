from enum import Enum

from core.domain.component_status import ComponentStatus


class IncidentImpact(str, Enum):
    NONE = "none"
    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"

    @property
    def target_component_status(self) -> ComponentStatus:
        mapping = {
            IncidentImpact.CRITICAL: ComponentStatus.MAJOR_OUTAGE,
            IncidentImpact.MAJOR: ComponentStatus.PARTIAL_OUTAGE,
            IncidentImpact.MINOR: ComponentStatus.DEGRADED_PERFORMANCE,
            IncidentImpact.NONE: ComponentStatus.OPERATIONAL,
        }

        return mapping[self]
