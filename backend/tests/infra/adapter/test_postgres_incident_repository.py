from dataclasses import replace
from datetime import timedelta

import pytest

from core.domain.component import Component
from core.domain.incident import Incident
from core.domain.incident_impact import IncidentImpact
from core.domain.incident_status import IncidentStatus
from core.domain.incident_update import IncidentUpdate
from core.domain.organization import Organization
from core.domain.status_page import StatusPage
from infra.adapter.postgres_component_repository import PostgresComponentRepository
from infra.adapter.postgres_incident_repository import PostgresIncidentRepository
from infra.adapter.postgres_incident_update_repository import PostgresIncidentUpdateRepository
from infra.adapter.postgres_organization_repository import PostgresOrganizationRepository
from infra.adapter.postgres_status_page_repository import PostgresStatusPageRepository
from tests.support.fakes import FIXED_NOW


@pytest.fixture
async def seeded(sqlite_session_factory) -> dict:
    organization = await PostgresOrganizationRepository(sqlite_session_factory).save(
        Organization(id=None, name="Acme", slug="acme")
    )
    status_page = await PostgresStatusPageRepository(sqlite_session_factory).save(
        StatusPage(id=None, organization_id=organization.id, name="Acme status")
    )
    components = PostgresComponentRepository(sqlite_session_factory)
    api = await components.save(Component(id=None, status_page_id=status_page.id, name="api"))
    web = await components.save(Component(id=None, status_page_id=status_page.id, name="web"))

    return {"status_page_id": status_page.id, "component_ids": [api.id, web.id]}


def _incident(status_page_id: int, minutes: int = 0, **overrides) -> Incident:
    values = {
        "id": None,
        "status_page_id": status_page_id,
        "name": f"incident-{minutes}",
        "description": "",
        "impact": IncidentImpact.MINOR,
        "started_at": FIXED_NOW + timedelta(minutes=minutes),
        "created_at": FIXED_NOW + timedelta(minutes=minutes),
        "updated_at": FIXED_NOW + timedelta(minutes=minutes),
    }
    values.update(overrides)
    return Incident(**values)


@pytest.mark.asyncio
async def test_incident_keeps_component_links(sqlite_session_factory, seeded: dict) -> None:
    repository = PostgresIncidentRepository(sqlite_session_factory)
    web_id, api_id = reversed(seeded["component_ids"])

    saved = await repository.save(_incident(seeded["status_page_id"], component_ids=[web_id, api_id, web_id]))
    found = await repository.find_by_id(saved.id)

    assert saved.component_ids == sorted([api_id, web_id])
    assert found == saved
    assert found.started_at == FIXED_NOW


@pytest.mark.asyncio
async def test_incident_update_leaves_links_untouched(sqlite_session_factory, seeded: dict) -> None:
    repository = PostgresIncidentRepository(sqlite_session_factory)
    saved = await repository.save(_incident(seeded["status_page_id"], component_ids=seeded["component_ids"]))
    resolved_at = FIXED_NOW + timedelta(hours=1)

    updated = await repository.save(
        replace(
            saved,
            status=IncidentStatus.RESOLVED,
            resolved_at=resolved_at,
            updated_at=resolved_at,
            component_ids=[],
        )
    )

    assert updated.status is IncidentStatus.RESOLVED
    assert updated.resolved_at == resolved_at
    assert updated.component_ids == sorted(seeded["component_ids"])


@pytest.mark.asyncio
async def test_incidents_paged_newest_first(sqlite_session_factory, seeded: dict) -> None:
    repository = PostgresIncidentRepository(sqlite_session_factory)

    for minutes in range(5):
        await repository.save(_incident(seeded["status_page_id"], minutes))

    first_page = await repository.find_all_by_status_page_id(seeded["status_page_id"], page=1, page_size=2)
    last_page = await repository.find_all_by_status_page_id(seeded["status_page_id"], page=3, page_size=2)

    assert [incident.name for incident in first_page] == ["incident-4", "incident-3"]
    assert first_page.total_elements == 5
    assert first_page.total_pages == 3
    assert [incident.name for incident in last_page] == ["incident-0"]


@pytest.mark.asyncio
async def test_active_incidents_exclude_resolved(sqlite_session_factory, seeded: dict) -> None:
    repository = PostgresIncidentRepository(sqlite_session_factory)
    await repository.save(_incident(seeded["status_page_id"], 0, status=IncidentStatus.MONITORING))
    await repository.save(_incident(seeded["status_page_id"], 1, status=IncidentStatus.RESOLVED))
    await repository.save(_incident(seeded["status_page_id"], 2))

    active = await repository.find_active_by_status_page_id(seeded["status_page_id"])

    assert [incident.name for incident in active] == ["incident-2", "incident-0"]


@pytest.mark.asyncio
async def test_incident_updates_newest_first(sqlite_session_factory, seeded: dict) -> None:
    incident = await PostgresIncidentRepository(sqlite_session_factory).save(_incident(seeded["status_page_id"]))
    repository = PostgresIncidentUpdateRepository(sqlite_session_factory)

    for minutes, status in ((5, IncidentStatus.IDENTIFIED), (15, IncidentStatus.RESOLVED)):
        await repository.add(
            IncidentUpdate(
                id=None,
                incident_id=incident.id,
                title=status.value,
                body="",
                status=status,
                created_at=FIXED_NOW + timedelta(minutes=minutes),
                updated_at=FIXED_NOW + timedelta(minutes=minutes),
            )
        )

    updates = await repository.find_all_by_incident_id(incident.id)

    assert [update.status for update in updates] == [IncidentStatus.RESOLVED, IncidentStatus.IDENTIFIED]
    assert updates[0].created_at == FIXED_NOW + timedelta(minutes=15)
