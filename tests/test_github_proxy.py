"""Tests for the GitHub proxy client and routes. httpx.AsyncClient is mocked; no network calls."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from helpers import ApiTestCase
from portfolio.services.github import GithubApiError, GithubClient


def _response(status_code: int, body: object) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


def _wire(mock_client_class: MagicMock, get: AsyncMock) -> MagicMock:
    mock_instance = MagicMock()
    mock_instance.get = get
    mock_client_class.return_value.__aenter__ = AsyncMock(return_value=mock_instance)
    mock_client_class.return_value.__aexit__ = AsyncMock(return_value=None)
    return mock_instance


class TestGithubClient(unittest.TestCase):
    def _client(self, token: str | None = None) -> GithubClient:
        return GithubClient("https://api.github.test/", lambda: token, timeout=5.0)

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_forwards_path_and_returns_json(self, mock_client_class: MagicMock) -> None:
        get = AsyncMock(return_value=_response(200, [{"name": "hello-world"}]))
        _wire(mock_client_class, get)

        result = asyncio.run(self._client().user_repos("octocat"))

        self.assertEqual(result, [{"name": "hello-world"}])
        url = get.call_args[0][0]
        self.assertEqual(url, "https://api.github.test/users/octocat/repos")
        headers = get.call_args[1]["headers"]
        self.assertEqual(headers["Accept"], "application/vnd.github.v3+json")
        self.assertNotIn("Authorization", headers)

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_token_sent_when_configured(self, mock_client_class: MagicMock) -> None:
        get = AsyncMock(return_value=_response(200, {"Python": 1200}))
        _wire(mock_client_class, get)

        asyncio.run(self._client("ghp_abc").languages("octocat", "hello-world"))

        self.assertEqual(
            get.call_args[0][0],
            "https://api.github.test/repos/octocat/hello-world/languages",
        )
        self.assertEqual(get.call_args[1]["headers"]["Authorization"], "token ghp_abc")

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_path_segments_are_quoted(self, mock_client_class: MagicMock) -> None:
        get = AsyncMock(return_value=_response(200, {}))
        _wire(mock_client_class, get)

        asyncio.run(self._client().repo("octo/../cat", "x y"))

        self.assertEqual(
            get.call_args[0][0],
            "https://api.github.test/repos/octo%2F..%2Fcat/x%20y",
        )

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_upstream_error_message_is_relayed(self, mock_client_class: MagicMock) -> None:
        get = AsyncMock(return_value=_response(404, {"message": "Not Found"}))
        _wire(mock_client_class, get)

        with self.assertRaises(GithubApiError) as ctx:
            asyncio.run(self._client().readme("octocat", "missing"))
        self.assertEqual(ctx.exception.message, "Not Found")
        self.assertEqual(ctx.exception.status_code, 404)

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_error_without_message_uses_default(self, mock_client_class: MagicMock) -> None:
        resp = _response(502, None)
        resp.json.side_effect = ValueError("not json")
        _wire(mock_client_class, AsyncMock(return_value=resp))

        with self.assertRaises(GithubApiError) as ctx:
            asyncio.run(self._client().contributors("octocat", "hello-world"))
        self.assertEqual(ctx.exception.message, "Failed to fetch contributors")

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_transport_failure_raises(self, mock_client_class: MagicMock) -> None:
        _wire(mock_client_class, AsyncMock(side_effect=httpx.ConnectError("refused")))
        with self.assertRaises(GithubApiError) as ctx:
            asyncio.run(self._client().repo("octocat", "hello-world"))
        self.assertEqual(ctx.exception.message, "Failed to fetch repository")

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_timeout_raises(self, mock_client_class: MagicMock) -> None:
        _wire(mock_client_class, AsyncMock(side_effect=httpx.ReadTimeout("slow")))
        with self.assertRaises(GithubApiError) as ctx:
            asyncio.run(self._client().repo("octocat", "hello-world"))
        self.assertEqual(ctx.exception.message, "GitHub request timed out.")


class TestGithubRoutes(ApiTestCase):
    def test_requires_authentication(self) -> None:
        resp = self.client.get("/api/github/user/octocat/repos")
        self.assertEqual(resp.status_code, 401)

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_relays_upstream_body(self, mock_client_class: MagicMock) -> None:
        _wire(mock_client_class, AsyncMock(return_value=_response(200, {"full_name": "octocat/hello"})))
        resp = self.client.get("/api/github/repos/octocat/hello", headers=self.user_headers())
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"full_name": "octocat/hello"})

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_upstream_failure_is_500_with_message(self, mock_client_class: MagicMock) -> None:
        _wire(mock_client_class, AsyncMock(return_value=_response(403, {"message": "API rate limit exceeded"})))
        resp = self.client.get("/api/github/user/octocat/repos", headers=self.user_headers())
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "API rate limit exceeded"})

    @patch("portfolio.services.github.httpx.AsyncClient")
    def test_token_update_applies_to_next_request(self, mock_client_class: MagicMock) -> None:
        get = AsyncMock(return_value=_response(200, []))
        _wire(mock_client_class, get)
        headers = self.admin_headers()

        self.client.get("/api/github/user/octocat/repos", headers=headers)
        self.assertNotIn("Authorization", get.call_args[1]["headers"])

        resp = self.client.put("/api/env-config", json={"GITHUB_TOKEN": "ghp_new"}, headers=headers)
        self.assertEqual(resp.status_code, 200)

        self.client.get("/api/github/user/octocat/repos", headers=headers)
        self.assertEqual(get.call_args[1]["headers"]["Authorization"], "token ghp_new")


if __name__ == "__main__":
    unittest.main()
