"""Exception handlers mapping domain errors to HTTP responses.

- ValidationError (broken business rule)  → 400 with the rule's messages
- ObjectNotFoundError (unknown aggregate) → 404
- anything else                           → 500 with the exception message
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from groove.utils.logging import get_logger

logger = get_logger(__name__)


def _messages(exc):
    return getattr(exc, "messages", None) or str(exc)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(
        "Request rejected by business rule",
        method=request.method,
        path=request.url.path,
        messages=_messages(exc),
    )
    return JSONResponse(status_code=400, content={"detail": _messages(exc)})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    logger.info("Requested object not found", method=request.method, path=request.url.path)
    return JSONResponse(status_code=404, content={"detail": _messages(exc)})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain exception handlers on an application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
