"""Read-only GitHub REST API proxy used by the GitHub projects page."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

if TYPE_CHECKING:
    from portfolio.core.config import Settings
    from portfolio.core.env_config import EnvConfigStore

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github.v3+json"


class GithubApiError(Exception):
    """Raised when GitHub returns an error status or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _segment(value: str) -> str:
    """Quote a single path segment so user input cannot change the upstream path."""
    return quote(value, safe="")


def _error_message(resp: httpx.Response, default: str) -> str:
    try:
        body = resp.json()
    except ValueError:
        return default
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return default


class GithubClient:
    """
    Forwards GET requests to the GitHub API.

    token_provider is called per request so a token changed through the
    env-config endpoint is picked up without a restart.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], str | None],
        timeout: float = 15.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings, env_store: EnvConfigStore) -> GithubClient:
        return cls(
            base_url=settings.GITHUB_API_BASE_URL,
            token_provider=lambda: env_store.github_token,
            timeout=settings.GITHUB_REQUEST_TIMEOUT_SEC,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": GITHUB_ACCEPT}
        token = self.token_provider()
        if token:
            headers["Authorization"] = f"token {token}"
        return headers

    async def _get(self, path: str, default_error: str) -> Any:
        url = f"{self.base_url}{path}"
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                resp = await client.get(url, headers=self._headers())
        except httpx.TimeoutException as e:
            logger.warning("GitHub request timed out", extra={"path": path})
            raise GithubApiError("GitHub request timed out.") from e
        except httpx.HTTPError as e:
            logger.warning("GitHub request failed", extra={"path": path, "error": str(e)[:200]})
            raise GithubApiError(default_error) from e
        elapsed = time.perf_counter() - start

        if resp.status_code >= 400:
            message = _error_message(resp, default_error)
            logger.info(
                "GitHub returned an error",
                extra={
                    "path": path,
                    "status_code": resp.status_code,
                    "latency_seconds": elapsed,
                },
            )
            raise GithubApiError(message, resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise GithubApiError("GitHub response body is not valid JSON.") from e

    async def user_repos(self, username: str) -> Any:
        return await self._get(
            f"/users/{_segment(username)}/repos",
            "Failed to fetch repositories",
        )

    async def repo(self, owner: str, repo: str) -> Any:
        return await self._get(
            f"/repos/{_segment(owner)}/{_segment(repo)}",
            "Failed to fetch repository",
        )

    async def readme(self, owner: str, repo: str) -> Any:
        return await self._get(
            f"/repos/{_segment(owner)}/{_segment(repo)}/readme",
            "Failed to fetch README",
        )

    async def languages(self, owner: str, repo: str) -> Any:
        return await self._get(
            f"/repos/{_segment(owner)}/{_segment(repo)}/languages",
            "Failed to fetch languages",
        )

    async def contributors(self, owner: str, repo: str) -> Any:
        return await self._get(
            f"/repos/{_segment(owner)}/{_segment(repo)}/contributors",
            "Failed to fetch contributors",
        )
