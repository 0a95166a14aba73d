from httpx import AsyncClient, Response


class LibraryClient:
    """Calls the library API and turns every answer into a plain dict or list.

    Client errors come back as ``{"error": True, "status": ..., "detail": ...}``
    so tools can hand them to the model; server errors raise.
    """

    def __init__(self, http: AsyncClient) -> None:
        self.http = http

    async def get(self, path: str, **kwargs) -> dict | list:
        return self._handle(await self.http.get(path, **kwargs))

    async def post(self, path: str, **kwargs) -> dict | list:
        return self._handle(await self.http.post(path, **kwargs))

    def _handle(self, resp: Response) -> dict | list:
        if resp.status_code >= 500:
            raise RuntimeError(f"Server error {resp.status_code}: {resp.text}")
        if resp.is_client_error:
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            return {"error": True, "status": resp.status_code, "detail": detail}
        result = resp.json()
        # Created resources also report where they can be fetched.
        if "location" in resp.headers and isinstance(result, dict):
            result["location"] = resp.headers["location"]
        return result
