"""
Error kinds raised by the services and their HTTP translation.

Services raise; nothing is recovered locally. `register_exception_handlers`
wires the translation into the FastAPI app:

- ResourceNotFoundError     -> 404 not_found
- body validation errors    -> 400 validation_failure
- bad path ids / bad JSON   -> 400 malformed_request
- anything else             -> 500 internal_error (logged)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

NOT_FOUND = "not_found"
VALIDATION_FAILURE = "validation_failure"
MALFORMED_REQUEST = "malformed_request"
INTERNAL_ERROR = "internal_error"


class ResourceNotFoundError(LookupError):
    def __init__(self, resource: str, resource_id: int) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found with id {resource_id}")

    @property
    def message(self) -> str:
        return str(self)


def _error_body(error: str, detail: str, **extra: Any) -> dict[str, Any]:
    return {"error": error, "detail": detail, **extra}


def classify_validation_errors(errors: list[dict[str, Any]]) -> str:
    """
    Decide between malformed_request and validation_failure.

    A path parameter that is not a positive 64-bit integer, or a body that is
    not valid JSON, makes the whole request malformed regardless of any other
    field errors reported alongside it.
    """
    for err in errors:
        loc = tuple(err.get("loc") or ())
        if loc and loc[0] == "path":
            return MALFORMED_REQUEST
        if str(err.get("type", "")) == "json_invalid":
            return MALFORMED_REQUEST
    return VALIDATION_FAILURE


async def handle_not_found(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    logger.info(
        "not_found method=%s path=%s resource=%s id=%s",
        request.method,
        request.url.path,
        exc.resource,
        exc.resource_id,
    )
    return JSONResponse(
        _error_body(NOT_FOUND, exc.message),
        status_code=status.HTTP_404_NOT_FOUND,
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    kind = classify_validation_errors(errors)
    detail = "Malformed request." if kind == MALFORMED_REQUEST else "Request body failed validation."
    logger.info(
        "bad_request method=%s path=%s kind=%s errors_cnt=%s",
        request.method,
        request.url.path,
        kind,
        len(errors),
    )
    return JSONResponse(
        _error_body(kind, detail, errors=errors),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        _error_body(INTERNAL_ERROR, "Internal server error."),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, handle_not_found)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
