"""
Global exception handlers.

Every failure leaves the API as {"success": false, "error": "<message>"}:

- BootcampAPIError → its own status code and message
- RequestValidationError → 400 with the Pydantic messages joined by commas
- HTTPException → its status code and detail
- Exception (catch-all) → 500 "Server Error", never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..domain.exceptions import BootcampAPIError

logger = logging.getLogger(__name__)


def error_body(message: str) -> dict:
    return {"success": False, "error": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_exception_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BootcampAPIError)
    async def api_error_handler(request: Request, exc: BootcampAPIError):
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        else:
            logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(_format_validation_errors(exc)),
        )


def _register_http_exception_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Server Error"),
        )


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path"))
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return ", ".join(messages)
