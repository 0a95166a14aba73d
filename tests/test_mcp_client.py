import uuid

import pytest

from library_api.mcp.client import LibraryClient


@pytest.mark.asyncio
async def test_client_get_success(client, george):
    lc = LibraryClient(client)
    result = await lc.get("/api/authors")
    assert isinstance(result, list)
    assert result[0]["first_name"] == "George"


@pytest.mark.asyncio
async def test_client_get_404(client):
    lc = LibraryClient(client)
    result = await lc.get(f"/api/authors/{uuid.uuid4()}")
    assert result["error"] is True
    assert result["status"] == 404


@pytest.mark.asyncio
async def test_client_get_406(client, george, game_of_thrones):
    lc = LibraryClient(client)
    result = await lc.get(f"/api/authors/{george.id}/books/{game_of_thrones.id}", headers={"Accept": "text/csv"})
    assert result["error"] is True
    assert result["status"] == 406


@pytest.mark.asyncio
async def test_client_post_returns_location(client, george):
    lc = LibraryClient(client)
    result = await lc.post(f"/api/authors/{george.id}/books", json={"title": "Dying of the Light"})
    assert result["title"] == "Dying of the Light"
    assert result["location"].endswith(f"/books/{result['id']}")


@pytest.mark.asyncio
async def test_client_post_415(client, george):
    lc = LibraryClient(client)
    result = await lc.post(
        f"/api/authors/{george.id}/books",
        content="<book/>",
        headers={"Content-Type": "application/xml"},
    )
    assert result["status"] == 415

