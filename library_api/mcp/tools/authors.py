from library_api.mcp.client import LibraryClient


async def list_authors(client: LibraryClient) -> list[dict]:
    result = await client.get("/api/authors", headers={"Accept": "application/json"})
    if isinstance(result, dict) and result.get("error"):
        return []
    return result


async def find_author(client: LibraryClient, name: str) -> dict | None:
    """Find an author whose full name contains ``name`` (case-insensitive)."""
    needle = name.lower().strip()
    for author in await list_authors(client):
        full_name = f"{author['first_name']} {author['last_name']}".lower()
        if needle and needle in full_name:
            return author
    return None
