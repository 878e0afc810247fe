import pytest
from pydantic import ValidationError

from core.domain.incident_impact import IncidentImpact
from core.domain.incident_status import IncidentStatus
from infra.web.routers.schemas.incident import IncidentCreateDTO, IncidentUpdateCreateDTO, IncidentUpdateDTO


def test_incident_create_defaults_to_investigating() -> None:
    dto = IncidentCreateDTO.model_validate(
        {
            "statusPageId": 10,
            "name": "API errors",
            "description": "Elevated 5xx",
            "impact": "major",
            "componentIds": [1, 2],
        }
    )

    assert dto.status is IncidentStatus.INVESTIGATING
    assert dto.impact is IncidentImpact.MAJOR
    assert dto.component_ids == [1, 2]
    assert dto.started_at is None


def test_incident_create_rejects_unknown_impact() -> None:
    with pytest.raises(ValidationError):
        IncidentCreateDTO(status_page_id=10, name="x", description="", impact="catastrophic")


def test_incident_update_requires_at_least_one_field() -> None:
    with pytest.raises(ValidationError, match="At least one field must be updated"):
        IncidentUpdateDTO()


def test_incident_update_accepts_status_only() -> None:
    assert IncidentUpdateDTO(status=IncidentStatus.RESOLVED).status is IncidentStatus.RESOLVED


def test_incident_update_record_requires_title_and_status() -> None:
    with pytest.raises(ValidationError):
        IncidentUpdateCreateDTO(title="", body="", status=IncidentStatus.MONITORING)

    with pytest.raises(ValidationError):
        IncidentUpdateCreateDTO.model_validate({"title": "Update", "body": ""})


def test_incident_create_rejects_resolved_status() -> None:
    with pytest.raises(ValidationError, match="Incidents cannot be created as resolved"):
        IncidentCreateDTO(status_page_id=10, name="Done", description="", impact="minor", status="resolved")


def test_incident_create_accepts_monitoring_status() -> None:
    dto = IncidentCreateDTO(status_page_id=10, name="Watching", description="", impact="minor", status="monitoring")

    assert dto.status is IncidentStatus.MONITORING
