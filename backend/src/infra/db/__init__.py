from infra.db.models import (
    Base,
    ComponentGroupModel,
    ComponentModel,
    IncidentComponentModel,
    IncidentModel,
    IncidentUpdateModel,
    MaintenanceComponentModel,
    MaintenanceWindowModel,
    MetricModel,
    OrganizationModel,
    StatusPageModel,
    SubscriptionModel,
    UserModel,
)
from infra.db.session import (
    close_engine,
    create_database_schema,
    get_engine,
    get_session,
    get_session_factory,
    session_scope,
)

__all__ = [
    "Base",
    "ComponentGroupModel",
    "ComponentModel",
    "IncidentComponentModel",
    "IncidentModel",
    "IncidentUpdateModel",
    "MaintenanceComponentModel",
    "MaintenanceWindowModel",
    "MetricModel",
    "OrganizationModel",
    "StatusPageModel",
    "SubscriptionModel",
    "UserModel",
    "close_engine",
    "create_database_schema",
    "get_engine",
    "get_session",
    "get_session_factory",
    "session_scope",
]
