"""Dependencies for objects created once at startup and kept on app.state."""

from fastapi import Request

from portfolio.core.config import get_settings
from portfolio.core.env_config import EnvConfigStore
from portfolio.services.github import GithubClient


def get_env_store(request: Request) -> EnvConfigStore:
    return request.app.state.env_store


def get_github_client(request: Request) -> GithubClient:
    """Client bound to the live env store, so token updates apply to the next request."""
    return GithubClient.from_settings(get_settings(), request.app.state.env_store)
