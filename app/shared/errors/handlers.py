"""
Centralized error handlers for FastAPI.

Maps catalog domain errors to HTTP responses by error kind.
No stack traces or internal details are exposed to clients: every
server-side failure, whatever its kind, yields the same 500 body.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from app.domain.catalog.errors import CatalogDomainError, ErrorKind

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

INVALID_INPUT_MESSAGE = "Invalid input"
INTERNAL_ERROR_MESSAGE = "Something went wrong. Contact the Administrator"


def _error_response(status_code: int, error: str, detail: Any = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group pydantic validation errors by field, like a model state."""
    fields: dict[str, list[str]] = {}
    for error in exc.errors():
        # Non-string parts (list indexes, JSON byte offsets) are dropped.
        loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        key = ".".join(loc) or "body"
        fields.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return fields


def _camel_fields(fields: dict[str, list[str]]) -> dict[str, list[str]]:
    return {to_camel(name): messages for name, messages in fields.items()}


def register_error_handlers(app: FastAPI) -> None:
    """Register all catalog error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Absent body or failed field checks become a 400."""
        fields = _field_errors(exc)
        logger.info("Request validation failed on: %s", ", ".join(fields))
        return _error_response(HTTP_400, INVALID_INPUT_MESSAGE, fields)

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> Response:
        """Map a domain error to its HTTP response by kind."""
        if exc.kind is ErrorKind.INVALID_INPUT:
            return _error_response(
                HTTP_400, INVALID_INPUT_MESSAGE, _camel_fields(getattr(exc, "fields", {}))
            )
        if exc.kind is ErrorKind.NOT_FOUND:
            return Response(status_code=HTTP_404)
        # Declined writes and unexpected failures look the same from outside.
        logger.debug("Catalog failure of kind %s", exc.kind.value)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
