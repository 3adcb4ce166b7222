"""
API error taxonomy.

Services raise these; the handlers installed by `install_error_handlers`
turn every one of them (and FastAPI's own routing/validation errors) into
the uniform `{"error": "..."}` body.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class DataSourceError(ApiError):
    """
    Store unreachable or query failed.

    `detail` keeps the driver message for the logs; callers only ever see
    the generic message.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(GENERIC_ERROR_MESSAGE)
        self.detail = detail


class RouteNotFound(NotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Route '{path}' was not found.")
        self.path = path


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _original_url(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request parameters."
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("path", "query")]
    name = location[-1] if location else "parameter"
    return f"Invalid value for '{name}': {first.get('msg', 'invalid value')}."


async def _handle_api_error(_: Request, exc: ApiError) -> JSONResponse:
    # Data-source failures are already logged with a traceback by core.db.
    return error_response(exc.status_code, exc.message)


async def _handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        route_error = RouteNotFound(_original_url(request))
        return error_response(route_error.status_code, route_error.message)
    return error_response(exc.status_code, str(exc.detail))


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error path=%s", request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _handle_api_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
