"""Exception handlers: render every error as {"message": ...} with the mapped status."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.core.errors import PortfolioError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Internal server error"
INVALID_REQUEST_MESSAGE = "Invalid request data"


def _normalize_errors(errors: list[dict]) -> list[dict[str, object]]:
    return [
        {
            "field": ".".join(str(item) for item in err.get("loc", ()) if item != "body"),
            "message": err.get("msg"),
            "type": err.get("type"),
        }
        for err in errors
    ]


async def portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
    """Map application errors to their status; details are included only for validation."""
    content: dict[str, object] = {"message": exc.message}
    if exc.status_code == status.HTTP_400_BAD_REQUEST and exc.details is not None:
        content["errors"] = jsonable_encoder(exc.details)
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException detail as message, keeping any headers (e.g. WWW-Authenticate)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/query validation failures are client errors (400)."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": INVALID_REQUEST_MESSAGE,
            "errors": jsonable_encoder(_normalize_errors(list(exc.errors()))),
        },
    )


async def pydantic_validation_handler(request: Request, exc: PydanticValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": INVALID_REQUEST_MESSAGE,
            "errors": jsonable_encoder(_normalize_errors(exc.errors())),
        },
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Database failures never leak internals; full detail goes to the server log."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": DEFAULT_ERROR_MESSAGE},
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": DEFAULT_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all handlers on the app."""
    app.add_exception_handler(PortfolioError, portfolio_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, pydantic_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
