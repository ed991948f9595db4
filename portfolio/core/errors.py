"""Application error taxonomy. Each error carries the HTTP status it maps to."""

from typing import Any


class PortfolioError(Exception):
    """Base error; rendered as {"message": ...} with status_code by the app's handlers."""

    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(PortfolioError):
    """Malformed or missing fields in a payload."""

    status_code = 400


class NotFoundError(PortfolioError):
    """No row with the requested id or key."""

    status_code = 404


class UpstreamError(PortfolioError):
    """A call to an external API failed; the message is passed through to the client."""

    status_code = 500


class InternalError(PortfolioError):
    """Unexpected database or IO failure; clients only see the generic message."""

    status_code = 500
