from enum import Enum


class ComponentStatus(str, Enum):
    OPERATIONAL = "operational"
    DEGRADED_PERFORMANCE = "degraded_performance"
    PARTIAL_OUTAGE = "partial_outage"
    MAJOR_OUTAGE = "major_outage"
    UNDER_MAINTENANCE = "under_maintenance"

    @property
    def display_precedence(self) -> int:
        """Rank used to pick the status shown for a whole page.

        Every outage-level state outranks maintenance, and maintenance only
        outranks a fully operational page.
        """
        mapping = {
            ComponentStatus.MAJOR_OUTAGE: 4,
            ComponentStatus.PARTIAL_OUTAGE: 3,
            ComponentStatus.DEGRADED_PERFORMANCE: 2,
            ComponentStatus.UNDER_MAINTENANCE: 1,
            ComponentStatus.OPERATIONAL: 0,
        }

        return mapping[self]
