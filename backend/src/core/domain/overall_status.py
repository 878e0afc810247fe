from typing import Iterable

from core.domain.component import Component
from core.domain.component_status import ComponentStatus


def resolve_overall_status(components: Iterable[Component]) -> ComponentStatus:
    """Derive the single status shown for a status page.

    The callers pass only the visible components of one page. Outages always
    win over maintenance, so a running maintenance window never hides a real
    outage; maintenance is only reported when nothing else is wrong.
    """
    statuses = [component.status for component in components]

    if not statuses:
        return ComponentStatus.OPERATIONAL

    return max(statuses, key=lambda s: s.display_precedence)
