from library_api import media_types
from library_api.mcp.client import LibraryClient
from library_api.mcp.tools.authors import find_author


def _author_not_found(author: str) -> dict:
    return {"error": True, "status": 404, "detail": f"No author matching '{author}'"}


async def get_author_books(client: LibraryClient, author: str) -> list[dict] | dict:
    found = await find_author(client, author)
    if found is None:
        return _author_not_found(author)
    return await client.get(
        f"/api/authors/{found['id']}/books",
        headers={"Accept": media_types.JSON},
    )


async def get_book(
    client: LibraryClient,
    author_id: str,
    book_id: str,
    concatenate_author_name: bool = False,
) -> dict:
    accept = media_types.BOOK_WITH_CONCATENATED_AUTHOR_NAME if concatenate_author_name else media_types.BOOK
    return await client.get(f"/api/authors/{author_id}/books/{book_id}", headers={"Accept": accept})


async def add_book(
    client: LibraryClient,
    author: str,
    title: str,
    description: str | None = None,
    amount_of_pages: int | None = None,
) -> dict:
    found = await find_author(client, author)
    if found is None:
        return _author_not_found(author)

    payload = {"title": title, "description": description}
    content_type = media_types.BOOK_FOR_CREATION
    if amount_of_pages is not None:
        payload["amount_of_pages"] = amount_of_pages
        content_type = media_types.BOOK_FOR_CREATION_WITH_AMOUNT_OF_PAGES

    return await client.post(
        f"/api/authors/{found['id']}/books",
        json=payload,
        headers={"Content-Type": content_type},
    )
