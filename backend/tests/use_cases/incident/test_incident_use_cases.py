from datetime import datetime, timedelta, timezone

import pytest

from core.domain.component_status import ComponentStatus
from core.domain.incident import Incident
from core.domain.incident_impact import IncidentImpact
from core.domain.incident_status import IncidentStatus
from core.exceptions.components_not_found_error import ComponentsNotFoundError
from core.exceptions.entity_not_found_error import IncidentNotFoundError, StatusPageNotFoundError
from infra.web.routers.schemas.incident import IncidentCreateDTO, IncidentUpdateCreateDTO, IncidentUpdateDTO
from tests.support.fakes import (
    FIXED_NOW,
    FakeComponentRepository,
    FakeIncidentRepository,
    FakeIncidentUpdateRepository,
    FakeStatusPageRepository,
    FixedClock,
    make_component,
    make_status_page,
)
from use_cases.incident import (
    CreateIncidentUpdateUseCase,
    CreateIncidentUseCase,
    GetIncidentsUseCase,
    GetIncidentUpdatesUseCase,
    UpdateIncidentUseCase,
)


def _incident(**overrides) -> Incident:
    values = {
        "id": 1,
        "status_page_id": 10,
        "name": "API errors",
        "description": "Elevated 5xx",
        "impact": IncidentImpact.MAJOR,
        "status": IncidentStatus.INVESTIGATING,
        "started_at": FIXED_NOW,
        "created_at": FIXED_NOW,
        "updated_at": FIXED_NOW,
    }
    values.update(overrides)
    return Incident(**values)


def _create_use_case(
    incident_repository: FakeIncidentRepository,
    component_repository: FakeComponentRepository,
    clock: FixedClock | None = None,
) -> CreateIncidentUseCase:
    return CreateIncidentUseCase(
        incident_repository=incident_repository,
        status_page_repository=FakeStatusPageRepository([make_status_page(id=10)]),
        component_repository=component_repository,
        clock=clock or FixedClock(),
    )


@pytest.mark.asyncio
async def test_critical_incident_sets_linked_components_to_major_outage() -> None:
    components = FakeComponentRepository([make_component(id=1), make_component(id=2), make_component(id=3)])
    incidents = FakeIncidentRepository()

    creation = await _create_use_case(incidents, components).execute(
        IncidentCreateDTO(
            status_page_id=10,
            name="Outage",
            description="Everything is down",
            impact=IncidentImpact.CRITICAL,
            component_ids=[1, 2],
        )
    )

    assert creation.incident.id is not None
    assert creation.incident.resolved_at is None
    assert creation.incident.started_at == FIXED_NOW
    assert creation.incident.component_ids == [1, 2]
    assert [write.component_id for write in creation.propagation.applied] == [1, 2]
    assert creation.propagation.failed == []

    statuses = {component.id: component.status for component in components.items}
    assert statuses == {
        1: ComponentStatus.MAJOR_OUTAGE,
        2: ComponentStatus.MAJOR_OUTAGE,
        3: ComponentStatus.OPERATIONAL,
    }


@pytest.mark.asyncio
async def test_none_impact_incident_never_restores_components() -> None:
    components = FakeComponentRepository([make_component(id=1)])
    incidents = FakeIncidentRepository()
    use_case = _create_use_case(incidents, components)

    first = await use_case.execute(
        IncidentCreateDTO(
            status_page_id=10,
            name="Slow",
            description="",
            impact=IncidentImpact.MINOR,
            component_ids=[1],
        )
    )
    second = await use_case.execute(
        IncidentCreateDTO(
            status_page_id=10,
            name="All clear",
            description="",
            impact=IncidentImpact.NONE,
            component_ids=[1],
        )
    )

    assert len(first.propagation.applied) == 1
    assert second.propagation.applied == []

    component = await components.find_by_id(1)
    assert component is not None
    assert component.status is ComponentStatus.DEGRADED_PERFORMANCE


@pytest.mark.asyncio
async def test_create_incident_keeps_provided_started_at_in_utc() -> None:
    started_at = datetime(2026, 3, 1, 9, 0, tzinfo=timezone(timedelta(hours=-3)))

    creation = await _create_use_case(FakeIncidentRepository(), FakeComponentRepository()).execute(
        IncidentCreateDTO(
            status_page_id=10,
            name="Earlier",
            description="",
            impact=IncidentImpact.MINOR,
            started_at=started_at,
        )
    )

    assert creation.incident.started_at == datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_create_incident_rejects_components_from_other_page() -> None:
    components = FakeComponentRepository([make_component(id=1), make_component(id=2, status_page_id=20)])
    incidents = FakeIncidentRepository()

    with pytest.raises(ComponentsNotFoundError) as error:
        await _create_use_case(incidents, components).execute(
            IncidentCreateDTO(
                status_page_id=10,
                name="Outage",
                description="",
                impact=IncidentImpact.CRITICAL,
                component_ids=[1, 2, 3],
            )
        )

    assert error.value.component_ids == [2, 3]
    assert incidents.items == []
    assert components.status_updates == []


@pytest.mark.asyncio
async def test_create_incident_requires_status_page() -> None:
    use_case = CreateIncidentUseCase(
        FakeIncidentRepository(),
        FakeStatusPageRepository(),
        FakeComponentRepository(),
        FixedClock(),
    )

    with pytest.raises(StatusPageNotFoundError):
        await use_case.execute(
            IncidentCreateDTO(status_page_id=10, name="Outage", description="", impact=IncidentImpact.MINOR)
        )


@pytest.mark.asyncio
async def test_create_incident_reports_partial_propagation_failure() -> None:
    components = FakeComponentRepository(
        [make_component(id=1), make_component(id=2)],
        failing_component_ids={2},
    )

    creation = await _create_use_case(FakeIncidentRepository(), components).execute(
        IncidentCreateDTO(
            status_page_id=10,
            name="Outage",
            description="",
            impact=IncidentImpact.MAJOR,
            component_ids=[1, 2],
        )
    )

    assert creation.incident.id is not None
    assert [write.component_id for write in creation.propagation.applied] == [1]
    assert [write.component_id for write in creation.propagation.failed] == [2]


@pytest.mark.asyncio
async def test_update_incident_resolves_and_stamps_resolved_at() -> None:
    repository = FakeIncidentRepository([_incident()])
    clock = FixedClock()
    resolved_at = clock.advance(hours=1)

    updated = await UpdateIncidentUseCase(repository, clock).execute(
        1,
        IncidentUpdateDTO(status=IncidentStatus.RESOLVED, description="Fixed"),
    )

    assert updated.status is IncidentStatus.RESOLVED
    assert updated.resolved_at == resolved_at
    assert updated.description == "Fixed"
    assert updated.name == "API errors"


@pytest.mark.asyncio
async def test_update_incident_resolving_twice_keeps_first_resolution_time() -> None:
    first_resolution = FIXED_NOW + timedelta(minutes=30)
    repository = FakeIncidentRepository(
        [_incident(status=IncidentStatus.RESOLVED, resolved_at=first_resolution)]
    )
    clock = FixedClock()
    clock.advance(hours=3)

    updated = await UpdateIncidentUseCase(repository, clock).execute(
        1,
        IncidentUpdateDTO(status=IncidentStatus.RESOLVED),
    )

    assert updated.resolved_at == first_resolution


@pytest.mark.asyncio
async def test_update_incident_reopening_clears_resolved_at() -> None:
    repository = FakeIncidentRepository([_incident(status=IncidentStatus.RESOLVED, resolved_at=FIXED_NOW)])

    updated = await UpdateIncidentUseCase(repository, FixedClock()).execute(
        1,
        IncidentUpdateDTO(status=IncidentStatus.IDENTIFIED),
    )

    assert updated.status is IncidentStatus.IDENTIFIED
    assert updated.resolved_at is None


@pytest.mark.asyncio
async def test_update_incident_does_not_touch_component_statuses() -> None:
    repository = FakeIncidentRepository([_incident(component_ids=[1])])

    updated = await UpdateIncidentUseCase(repository, FixedClock()).execute(
        1,
        IncidentUpdateDTO(impact=IncidentImpact.CRITICAL),
    )

    assert updated.impact is IncidentImpact.CRITICAL
    assert updated.component_ids == [1]


@pytest.mark.asyncio
async def test_update_incident_with_unchanged_values_is_a_no_op() -> None:
    repository = FakeIncidentRepository([_incident()])
    clock = FixedClock()
    clock.advance(hours=1)

    updated = await UpdateIncidentUseCase(repository, clock).execute(
        1,
        IncidentUpdateDTO(name="API errors", status=IncidentStatus.INVESTIGATING),
    )

    assert updated.updated_at == FIXED_NOW
    assert repository.save_calls == 0


@pytest.mark.asyncio
async def test_update_incident_field_patch_stamps_updated_at() -> None:
    repository = FakeIncidentRepository([_incident()])
    clock = FixedClock()
    patched_at = clock.advance(minutes=5)

    updated = await UpdateIncidentUseCase(repository, clock).execute(
        1,
        IncidentUpdateDTO(name="API latency"),
    )

    assert updated.name == "API latency"
    assert updated.status is IncidentStatus.INVESTIGATING
    assert updated.updated_at == patched_at
    assert updated.resolved_at is None


@pytest.mark.asyncio
async def test_update_missing_incident() -> None:
    with pytest.raises(IncidentNotFoundError):
        await UpdateIncidentUseCase(FakeIncidentRepository(), FixedClock()).execute(
            1,
            IncidentUpdateDTO(name="x"),
        )


@pytest.mark.asyncio
async def test_incident_update_record_resolves_incident() -> None:
    incidents = FakeIncidentRepository([_incident()])
    updates = FakeIncidentUpdateRepository()
    clock = FixedClock()
    now = clock.advance(minutes=45)

    record = await CreateIncidentUpdateUseCase(updates, incidents, clock).execute(
        1,
        IncidentUpdateCreateDTO(title="Fixed", body="Rolled back", status=IncidentStatus.RESOLVED),
    )

    assert record.incident_id == 1
    assert record.created_at == now

    incident = await incidents.find_by_id(1)
    assert incident is not None
    assert incident.status is IncidentStatus.RESOLVED
    assert incident.resolved_at == now


@pytest.mark.asyncio
async def test_incident_update_record_with_same_status_only_appends() -> None:
    incidents = FakeIncidentRepository([_incident()])
    saves_before = incidents.save_calls
    updates = FakeIncidentUpdateRepository()

    await CreateIncidentUpdateUseCase(updates, incidents, FixedClock()).execute(
        1,
        IncidentUpdateCreateDTO(title="Still looking", body="", status=IncidentStatus.INVESTIGATING),
    )

    assert len(updates.items) == 1
    assert incidents.save_calls == saves_before


@pytest.mark.asyncio
async def test_incident_update_record_requires_incident() -> None:
    updates = FakeIncidentUpdateRepository()

    with pytest.raises(IncidentNotFoundError):
        await CreateIncidentUpdateUseCase(updates, FakeIncidentRepository(), FixedClock()).execute(
            1,
            IncidentUpdateCreateDTO(title="?", body="", status=IncidentStatus.MONITORING),
        )

    assert updates.items == []


@pytest.mark.asyncio
async def test_get_incidents_normalizes_paging_and_orders_newest_first() -> None:
    repository = FakeIncidentRepository(
        [
            _incident(id=index, created_at=FIXED_NOW + timedelta(minutes=index))
            for index in range(1, 13)
        ]
    )

    page = await GetIncidentsUseCase(repository).execute(status_page_id=10, page=0, page_size=0)

    assert page.page_size == 10
    assert page.total_elements == 12
    assert page.total_pages == 2
    assert [incident.id for incident in page][:3] == [12, 11, 10]


@pytest.mark.asyncio
async def test_get_incident_updates_newest_first() -> None:
    incidents = FakeIncidentRepository([_incident()])
    updates = FakeIncidentUpdateRepository()
    clock = FixedClock()
    use_case = CreateIncidentUpdateUseCase(updates, incidents, clock)

    await use_case.execute(1, IncidentUpdateCreateDTO(title="first", body="", status=IncidentStatus.IDENTIFIED))
    clock.advance(minutes=10)
    await use_case.execute(1, IncidentUpdateCreateDTO(title="second", body="", status=IncidentStatus.MONITORING))

    records = await GetIncidentUpdatesUseCase(updates, incidents).execute(1)

    assert [record.title for record in records] == ["second", "first"]


@pytest.mark.asyncio
async def test_get_incident_updates_requires_incident() -> None:
    with pytest.raises(IncidentNotFoundError):
        await GetIncidentUpdatesUseCase(FakeIncidentUpdateRepository(), FakeIncidentRepository()).execute(1)
