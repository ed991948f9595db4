"""Runtime env configuration (admin only): the GitHub token used by the proxy."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio.api.auth import require_admin
from portfolio.api.deps import get_env_store
from portfolio.core.env_config import EnvConfigStore
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.common import MessageResponse
from portfolio.schemas.env_config import EnvConfig

router = APIRouter()


@router.get("", response_model=EnvConfig)
def get_env_config(
    env_store: Annotated[EnvConfigStore, Depends(get_env_store)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> EnvConfig:
    """Return the GitHub token the proxy is using (empty string when unset)."""
    return EnvConfig(GITHUB_TOKEN=env_store.github_token or "")


@router.put("", response_model=MessageResponse)
def put_env_config(
    body: EnvConfig,
    env_store: Annotated[EnvConfigStore, Depends(get_env_store)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    env_store.update(body.GITHUB_TOKEN)
    return MessageResponse(message="Environment configuration updated successfully")
