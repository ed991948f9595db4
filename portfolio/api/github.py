"""GitHub proxy routes (authenticated): forward read-only calls to the GitHub API."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from portfolio.api.auth import get_current_user
from portfolio.api.deps import get_github_client
from portfolio.core import errors
from portfolio.schemas.auth import CurrentUser
from portfolio.services.github import GithubApiError, GithubClient

router = APIRouter()

Client = Annotated[GithubClient, Depends(get_github_client)]
User = Annotated[CurrentUser, Depends(get_current_user)]


def _upstream(e: GithubApiError) -> errors.UpstreamError:
    """Upstream failures are relayed with their message and a 500."""
    return errors.UpstreamError(e.message)


@router.get("/user/{username}/repos")
async def user_repos(username: str, client: Client, _user: User) -> Any:
    try:
        return await client.user_repos(username)
    except GithubApiError as e:
        raise _upstream(e) from e


@router.get("/repos/{owner}/{repo}")
async def repo(owner: str, repo: str, client: Client, _user: User) -> Any:
    try:
        return await client.repo(owner, repo)
    except GithubApiError as e:
        raise _upstream(e) from e


@router.get("/repos/{owner}/{repo}/readme")
async def readme(owner: str, repo: str, client: Client, _user: User) -> Any:
    try:
        return await client.readme(owner, repo)
    except GithubApiError as e:
        raise _upstream(e) from e


@router.get("/repos/{owner}/{repo}/languages")
async def languages(owner: str, repo: str, client: Client, _user: User) -> Any:
    try:
        return await client.languages(owner, repo)
    except GithubApiError as e:
        raise _upstream(e) from e


@router.get("/repos/{owner}/{repo}/contributors")
async def contributors(owner: str, repo: str, client: Client, _user: User) -> Any:
    try:
        return await client.contributors(owner, repo)
    except GithubApiError as e:
        raise _upstream(e) from e
