from fastmcp import FastMCP

from library_api.mcp.client import LibraryClient
from library_api.mcp.tools.authors import list_authors as _list_authors
from library_api.mcp.tools.books import (
    add_book as _add_book,
    get_author_books as _get_author_books,
    get_book as _get_book,
)


def create_mcp_server(client: LibraryClient) -> FastMCP:
    mcp = FastMCP(
        name="library",
        instructions=(
            "The library holds authors and the books they wrote. Look authors up "
            "by name, list their books, read a single book and add new books."
        ),
    )

    @mcp.tool()
    async def list_authors() -> list[dict]:
        """List every author in the library."""
        return await _list_authors(client)

    @mcp.tool()
    async def get_author_books(author: str) -> list[dict] | dict:
        """List the books of the first author whose name contains the given text."""
        return await _get_author_books(client, author=author)

    @mcp.tool()
    async def get_book(author_id: str, book_id: str, concatenate_author_name: bool = False) -> dict:
        """Get a single book. With concatenate_author_name the book carries the
        author's full name instead of the author id."""
        return await _get_book(
            client, author_id=author_id, book_id=book_id,
            concatenate_author_name=concatenate_author_name,
        )

    @mcp.tool()
    async def add_book(
        author: str,
        title: str,
        description: str | None = None,
        amount_of_pages: int | None = None,
    ) -> dict:
        """Add a book for an existing author, optionally with its page count."""
        return await _add_book(
            client, author=author, title=title,
            description=description, amount_of_pages=amount_of_pages,
        )

    return mcp
