"""Exception handlers rendering errors as ``application/problem+json``.

| Exception                          | Status | Title                     |
|------------------------------------|--------|---------------------------|
| InvalidInputError                  | 400    | Validation failed         |
| RequestValidationError             | 400    | Validation failed         |
| InvalidStatusValueError            | 400    | Invalid status            |
| CaseNotFoundError                  | 404    | Not found                 |
| StatusTransitionRejectedError      | 409    | Invalid status transition |
| CaseVersionConflictError           | 409    | Concurrent modification   |
| HTTPException (routing, methods)   | as is  | reason phrase             |
| anything else                      | 500    | Internal error            |

Unexpected errors never leak their message; the body says "Unexpected error".
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from caseflow.domain.errors import (
    CaseNotFoundError,
    InvalidInputError,
    InvalidStatusValueError,
    StatusTransitionRejectedError,
)
from caseflow.interfaces.case_repository import CaseVersionConflictError

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"

# (status, title) for errors whose message is safe to show
DOMAIN_PROBLEMS: dict[type[Exception], tuple[int, str]] = {
    InvalidStatusValueError: (status.HTTP_400_BAD_REQUEST, "Invalid status"),
    CaseNotFoundError: (status.HTTP_404_NOT_FOUND, "Not found"),
    StatusTransitionRejectedError: (
        status.HTTP_409_CONFLICT,
        "Invalid status transition",
    ),
    CaseVersionConflictError: (status.HTTP_409_CONFLICT, "Concurrent modification"),
}


def problem(
    request: Request, status_code: int, title: str, detail: str, **extra: Any
) -> JSONResponse:
    """Build a problem+json response for `request`."""
    body = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
        **extra,
    }
    return JSONResponse(status_code=status_code, content=body, media_type=PROBLEM_JSON)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on `app`."""

    async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
        status_code, title = DOMAIN_PROBLEMS[type(exc)]
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return problem(request, status_code, title, str(exc))

    for exc_type in DOMAIN_PROBLEMS:
        app.add_exception_handler(exc_type, domain_error_handler)

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(
        request: Request, exc: InvalidInputError
    ) -> JSONResponse:
        fields = {exc.field: exc.reason} if exc.field else {}
        return problem(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation failed",
            str(exc),
            fields=fields,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = {_field_name(e["loc"]): e["msg"] for e in exc.errors()}
        logger.info("Validation error on %s: %s", request.url.path, fields)
        return problem(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation failed",
            "Request body is invalid",
            fields=fields,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        title = HTTPStatus(exc.status_code).phrase
        return problem(request, exc.status_code, title, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return problem(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal error",
            "Unexpected error",
        )


def _field_name(loc: tuple[int | str, ...] | list[int | str]) -> str:
    # ("body", "title") -> "title"
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"
