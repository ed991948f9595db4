"""Runtime-editable configuration persisted to a .env-style key-value file.

The GitHub token used by the proxy can be changed from the admin dashboard.
EnvConfigStore is created once at startup and injected where needed; all
writes go through update(), which holds a lock while rewriting the file and
swapping the in-memory value so readers never see a partial update.
"""

import logging
import threading
from pathlib import Path

from dotenv import dotenv_values, set_key

from portfolio.core.errors import InternalError

logger = logging.getLogger(__name__)

GITHUB_TOKEN_KEY = "GITHUB_TOKEN"


class EnvConfigStore:
    """Holds the GitHub token and mirrors changes to the env file at `path`."""

    def __init__(self, path: str | Path, github_token: str | None = None) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        if github_token is None:
            github_token = self.read_file().get(GITHUB_TOKEN_KEY) or None
        self._github_token = github_token

    @property
    def github_token(self) -> str | None:
        with self._lock:
            return self._github_token

    def read_file(self) -> dict[str, str]:
        """Parse the env file; a missing or unreadable file yields an empty mapping."""
        if not self.path.is_file():
            return {}
        try:
            values = dotenv_values(self.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading env file %s: %s", self.path, e)
            return {}
        return {k: v for k, v in values.items() if v is not None}

    def update(self, github_token: str | None) -> None:
        """Persist the new token (merged into existing keys), then publish it in memory."""
        value = github_token or ""
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch(exist_ok=True)
                set_key(self.path, GITHUB_TOKEN_KEY, value, quote_mode="never")
            except OSError as e:
                logger.exception("Error writing env file %s", self.path)
                raise InternalError("Failed to update environment configuration") from e
            self._github_token = value or None
        logger.info("Environment configuration updated", extra={"keys": [GITHUB_TOKEN_KEY]})
