from use_cases.incident.create_incident_update_use_case import CreateIncidentUpdateUseCase
from use_cases.incident.create_incident_use_case import CreateIncidentUseCase, IncidentCreation
from use_cases.incident.get_incident_updates_use_case import GetIncidentUpdatesUseCase
from use_cases.incident.get_incidents_use_case import GetIncidentsUseCase
from use_cases.incident.update_incident_use_case import UpdateIncidentUseCase

__all__ = [
    "CreateIncidentUpdateUseCase",
    "CreateIncidentUseCase",
    "GetIncidentUpdatesUseCase",
    "GetIncidentsUseCase",
    "IncidentCreation",
    "UpdateIncidentUseCase",
]
