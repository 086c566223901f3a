from __future__ import annotations

from typing import Any

import httpx
import structlog

logger = structlog.get_logger()

JSON_ACCEPT = "application/vnd.github+json"
DIFF_ACCEPT = "application/vnd.github.diff"
RAW_JSON_ACCEPT = "application/vnd.github.raw+json"
API_VERSION = "2022-11-28"


class GitHubApiError(RuntimeError):
    """Raised when a GitHub API request fails."""

    def __init__(self, message: str, status_code: int, detail: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class GitHubHttpClient:
    """Thin async wrapper over the GitHub REST API.

    Owns its ``httpx.AsyncClient`` unless one is injected; call ``aclose`` when done.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": JSON_ACCEPT,
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": "pr-diff-annotator",
            },
        )

    async def get_json(self, path: str, *, accept: str = JSON_ACCEPT, params: dict[str, Any] | None = None) -> Any:
        response = await self._request("GET", path, accept=accept, params=params)
        return response.json()

    async def get_text(self, path: str, *, accept: str) -> str:
        response = await self._request("GET", path, accept=accept)
        return response.text

    async def get_paginated(self, path: str) -> list[Any]:
        items: list[Any] = []
        url: str | None = path
        params: dict[str, Any] | None = {"per_page": 100}
        while url:
            response = await self._request("GET", url, params=params)
            items.extend(response.json())
            url = response.links.get("next", {}).get("url")
            params = None  # next links already carry the query string
        return items

    async def post_json(self, path: str, payload: dict[str, Any]) -> Any:
        response = await self._request("POST", path, json=payload)
        return response.json()

    async def delete(self, path: str) -> None:
        await self._request("DELETE", path)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> GitHubHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        accept: str = JSON_ACCEPT,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers={"Accept": accept}
            )
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"GitHub request {method} {path} failed: {exc}", 0) from exc
        if response.is_error:
            detail = _error_detail(response)
            logger.debug("GitHub API error", method=method, path=path, status=response.status_code)
            raise GitHubApiError(
                f"GitHub API responded with status {response.status_code} for {method} {path}",
                response.status_code,
                detail,
            )
        return response


def _error_detail(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
