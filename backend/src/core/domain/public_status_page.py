from dataclasses import dataclass, field

from core.domain.component import Component
from core.domain.component_group import ComponentGroup
from core.domain.component_status import ComponentStatus
from core.domain.incident import Incident
from core.domain.maintenance_window import MaintenanceWindow
from core.domain.status_page import StatusPage


@dataclass
class PublicStatusPage:
    status_page: StatusPage
    overall_status: ComponentStatus

    component_groups: list[ComponentGroup] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    active_incidents: list[Incident] = field(default_factory=list)
    upcoming_maintenance: list[MaintenanceWindow] = field(default_factory=list)
