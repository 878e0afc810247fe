from core.domain.component_status import ComponentStatus
from core.domain.impact_propagation import (
    ComponentStatusWrite,
    StatusWriteResult,
    propagate_incident_impact,
)
from core.domain.incident_impact import IncidentImpact


def test_critical_impact_writes_major_outage_for_each_component() -> None:
    writes = propagate_incident_impact(IncidentImpact.CRITICAL, [1, 2])

    assert writes == [
        ComponentStatusWrite(component_id=1, new_status=ComponentStatus.MAJOR_OUTAGE),
        ComponentStatusWrite(component_id=2, new_status=ComponentStatus.MAJOR_OUTAGE),
    ]


def test_none_impact_yields_no_writes() -> None:
    assert propagate_incident_impact(IncidentImpact.NONE, [1]) == []


def test_minor_impact_writes_degraded_performance() -> None:
    writes = propagate_incident_impact(IncidentImpact.MINOR, [7])

    assert writes == [ComponentStatusWrite(component_id=7, new_status=ComponentStatus.DEGRADED_PERFORMANCE)]


def test_major_impact_writes_partial_outage() -> None:
    writes = propagate_incident_impact(IncidentImpact.MAJOR, [3])

    assert [write.new_status for write in writes] == [ComponentStatus.PARTIAL_OUTAGE]


def test_duplicate_component_ids_produce_a_single_write() -> None:
    writes = propagate_incident_impact(IncidentImpact.MINOR, [4, 4, 5, 4])

    assert [write.component_id for write in writes] == [4, 5]


def test_no_components_yields_no_writes() -> None:
    assert propagate_incident_impact(IncidentImpact.CRITICAL, []) == []


def test_status_write_result_reports_partial_failure() -> None:
    applied = ComponentStatusWrite(component_id=1, new_status=ComponentStatus.MAJOR_OUTAGE)
    failed = ComponentStatusWrite(component_id=2, new_status=ComponentStatus.MAJOR_OUTAGE)

    assert StatusWriteResult(applied=[applied], failed=[failed]).is_partial_failure is True
    assert StatusWriteResult(applied=[applied]).is_partial_failure is False
    assert StatusWriteResult(failed=[failed]).is_partial_failure is False
