from enum import Enum


class IncidentStatus(str, Enum):
    INVESTIGATING = "investigating"
    IDENTIFIED = "identified"
    MONITORING = "monitoring"
    RESOLVED = "resolved"

    @property
    def is_active(self) -> bool:
        return self is not IncidentStatus.RESOLVED
