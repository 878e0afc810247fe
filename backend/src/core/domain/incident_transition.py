from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from core.domain.incident import Incident
from core.domain.incident_status import IncidentStatus


@dataclass(frozen=True)
class IncidentTransition:
    incident: Incident
    status_changed: bool
    resolved: bool


def transition_incident(
    incident: Incident,
    requested_status: Optional[IncidentStatus],
    now: datetime,
) -> IncidentTransition:
    """Move an incident to ``requested_status``.

    Shared by the direct incident update and by incident update records.
    ``resolved_at`` is stamped the first time the incident is resolved, kept
    while it stays resolved, and cleared when it is reopened.
    """
    if requested_status is None or requested_status is incident.status:
        return IncidentTransition(incident=incident, status_changed=False, resolved=False)

    resolved_at = now if requested_status is IncidentStatus.RESOLVED else None

    updated = replace(
        incident,
        status=requested_status,
        resolved_at=resolved_at,
        updated_at=now,
    )

    return IncidentTransition(
        incident=updated,
        status_changed=True,
        resolved=requested_status is IncidentStatus.RESOLVED,
    )
