import pytest
from fastapi import FastAPI

import infra.web.routers.incident_router as incident_router_module
from core.domain.component_status import ComponentStatus
from tests.support.fakes import (
    FakeComponentRepository,
    FakeIncidentRepository,
    FakeIncidentUpdateRepository,
    FakeStatusPageRepository,
    FixedClock,
    make_component,
    make_status_page,
)


@pytest.fixture
def components() -> FakeComponentRepository:
    return FakeComponentRepository(
        [make_component(id=1), make_component(id=2), make_component(id=3, status_page_id=20)],
        failing_component_ids={2},
    )


@pytest.fixture
def incident_app(monkeypatch: pytest.MonkeyPatch, components: FakeComponentRepository) -> FastAPI:
    clock = FixedClock()
    incidents = FakeIncidentRepository()
    updates = FakeIncidentUpdateRepository()
    status_pages = FakeStatusPageRepository([make_status_page(id=10), make_status_page(id=20)])

    monkeypatch.setattr(incident_router_module, "get_incident_repository", lambda: incidents)
    monkeypatch.setattr(incident_router_module, "get_incident_update_repository", lambda: updates)
    monkeypatch.setattr(incident_router_module, "get_status_page_repository", lambda: status_pages)
    monkeypatch.setattr(incident_router_module, "get_component_repository", lambda: components)
    monkeypatch.setattr(incident_router_module, "get_system_clock", lambda: clock)

    app = FastAPI()
    app.include_router(incident_router_module.router)
    return app


async def _create_incident(client, **overrides) -> dict:
    body = {"statusPageId": 10, "name": "API errors", "description": "5xx", "impact": "critical"}
    body.update(overrides)

    response = await client.post("/incident", json=body)
    assert response.status_code == 201

    return response.json()


@pytest.mark.asyncio
async def test_create_incident_reports_propagation(
    incident_app: FastAPI,
    async_client_factory,
    components: FakeComponentRepository,
) -> None:
    client = await async_client_factory(incident_app)

    payload = await _create_incident(client, componentIds=[1, 2])

    assert payload["status"] == "investigating"
    assert payload["componentIds"] == [1, 2]
    assert payload["resolvedAt"] is None
    assert payload["propagation"] == {
        "applied": [{"componentId": 1, "newStatus": "major_outage"}],
        "failed": [{"componentId": 2, "newStatus": "major_outage"}],
    }
    assert components.status_updates == [(1, ComponentStatus.MAJOR_OUTAGE)]


@pytest.mark.asyncio
async def test_create_incident_with_foreign_component(incident_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(incident_app)

    response = await client.post(
        "/incident",
        json={"statusPageId": 10, "name": "x", "description": "", "impact": "minor", "componentIds": [3]},
    )

    assert response.status_code == 404
    assert "3" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_incident_as_resolved_is_rejected(
    incident_app: FastAPI,
    async_client_factory,
    components: FakeComponentRepository,
) -> None:
    client = await async_client_factory(incident_app)

    response = await client.post(
        "/incident",
        json={"statusPageId": 10, "name": "Done", "description": "", "impact": "critical", "status": "resolved"},
    )

    assert response.status_code == 422
    assert components.status_updates == []


@pytest.mark.asyncio
async def test_list_incidents_is_paged(incident_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(incident_app)

    for index in range(3):
        await _create_incident(client, name=f"incident-{index}", impact="none")

    response = await client.get("/incident", params={"status_page_id": 10, "page": 1, "page_size": 2})

    assert response.status_code == 200
    payload = response.json()
    assert payload["pageSize"] == 2
    assert payload["pageCount"] == 2
    assert payload["totalElements"] == 3
    assert payload["totalPages"] == 2


@pytest.mark.asyncio
async def test_list_incidents_rejects_oversized_pages(incident_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(incident_app)

    response = await client.get("/incident", params={"status_page_id": 10, "page_size": 101})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_incident_resolves(incident_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(incident_app)
    created = await _create_incident(client)

    response = await client.patch(f"/incident/{created['id']}", json={"status": "resolved"})

    assert response.status_code == 200
    assert response.json()["status"] == "resolved"
    assert response.json()["resolvedAt"] is not None


@pytest.mark.asyncio
async def test_update_incident_errors(incident_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(incident_app)
    created = await _create_incident(client)

    empty_patch = await client.patch(f"/incident/{created['id']}", json={})
    missing = await client.patch("/incident/999", json={"name": "x"})

    assert empty_patch.status_code == 422
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_incident_updates_timeline(incident_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(incident_app)
    created = await _create_incident(client)

    post_response = await client.post(
        f"/incident/{created['id']}/updates",
        json={"title": "Identified", "body": "Bad deploy", "status": "identified"},
    )
    list_response = await client.get(f"/incident/{created['id']}/updates")

    assert post_response.status_code == 201
    assert post_response.json()["incidentId"] == created["id"]
    assert [update["title"] for update in list_response.json()] == ["Identified"]

    incidents = await client.get("/incident", params={"status_page_id": 10})
    assert incidents.json()["content"][0]["status"] == "identified"


@pytest.mark.asyncio
async def test_incident_updates_for_missing_incident(incident_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(incident_app)

    post_response = await client.post(
        "/incident/999/updates",
        json={"title": "?", "body": "", "status": "monitoring"},
    )
    get_response = await client.get("/incident/999/updates")

    assert post_response.status_code == 404
    assert get_response.status_code == 404
