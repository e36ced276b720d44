"""
Tests for the DevelopersClient HTTP wrapper.

Happy paths run against the app through ASGITransport; failure paths use
httpx.MockTransport.
"""
import httpx
import pytest

from devroster.clients.developers_client import DevelopersClient


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver")


@pytest.mark.asyncio
async def test_add_returns_projection_without_id(client, developer_payload):
    roster = DevelopersClient(client)

    created = await roster.add_developer(developer_payload)

    assert created == developer_payload
    developers = await roster.get_developers()
    assert len(developers) == 1
    assert developers[0]["id"]


@pytest.mark.asyncio
async def test_edit_targets_body_id(client, developer_payload):
    roster = DevelopersClient(client)
    await roster.add_developer(developer_payload)
    stored = (await roster.get_developers())[0]

    updated = await roster.edit_developer({**stored, "position": "CTO"})

    assert updated["position"] == "CTO"
    assert "id" not in updated
    assert (await roster.get_developer(stored["id"]))["position"] == "CTO"


@pytest.mark.asyncio
async def test_get_unknown_developer_returns_none(client):
    roster = DevelopersClient(client)
    assert await roster.get_developer("dev_missing") is None


@pytest.mark.asyncio
async def test_transport_failure_returns_none():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as http_client:
        client = DevelopersClient(http_client)
        assert await client.get_developers() is None
        assert await client.add_developer({"name": "Ada"}) is None


@pytest.mark.asyncio
async def test_error_status_returns_none():
    def handler(request):
        return httpx.Response(400, json={"detail": {"error": "Invalid developer data"}})

    async with mock_client(handler) as http_client:
        client = DevelopersClient(http_client)
        assert await client.add_developer({"name": "Ada"}) is None
        assert await client.edit_developer({"id": "dev_1", "name": "Ada"}) is None


@pytest.mark.asyncio
async def test_invalid_json_returns_none():
    def handler(request):
        return httpx.Response(200, content=b"<html>not json</html>")

    async with mock_client(handler) as http_client:
        client = DevelopersClient(http_client)
        assert await client.get_developers() is None


@pytest.mark.asyncio
async def test_edit_without_id_does_not_send_request():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={})

    async with mock_client(handler) as http_client:
        client = DevelopersClient(http_client)
        assert await client.edit_developer({"name": "Ada"}) is None

    assert requests == []


@pytest.mark.asyncio
async def test_base_url_prefixes_paths():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        client = DevelopersClient(http_client, base_url="http://roster.local:8000/")
        assert await client.get_developers() == []

    assert seen == ["http://roster.local:8000/api/devs"]
