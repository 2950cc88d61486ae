"""
Centralized error handlers for FastAPI.

Request binding failures (type conversion and declared constraints) are
accumulated by pydantic, turned into field violations and rendered as a
single 400 envelope. Domain errors map to 404/400 with a short body.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Any, Iterable, Sequence

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from waiter.application.validation_errors import (
    TYPE_MISMATCH,
    ConstraintViolation,
    FieldViolation,
    TypeMismatchViolation,
    ValidationErrorResponder,
)
from waiter.domain.exceptions import DomainException, EntityNotFoundError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

# Route ``openapi_extra`` key naming the request shape in error bodies.
OBJECT_NAME_KEY = "x-object-name"

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}

BINDING_ERROR_TYPES = {TYPE_MISMATCH, "json_invalid", "enum"}

CONSTRAINT_CODES = {
    "missing": "NotNull",
    "string_too_short": "NotEmpty",
    "too_short": "NotEmpty",
}

CONSTRAINT_MESSAGES = {
    "NotNull": "must not be null",
    "NotEmpty": "must not be empty",
}


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def field_path(loc: Sequence[Any]) -> str:
    """Render a pydantic error location as ``items[0].name`` style text."""
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]

    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def _is_binding_error(error_type: str) -> bool:
    return (
        error_type in BINDING_ERROR_TYPES
        or error_type.endswith("_parsing")
        or error_type.endswith("_type")
    )


def _target_type(error: dict[str, Any]) -> str:
    ctx = error.get("ctx") or {}
    if "target_type" in ctx:
        return str(ctx["target_type"])
    return error["type"].split("_")[0].capitalize()


def to_violations(object_name: str, errors: Iterable[dict[str, Any]]) -> list[FieldViolation]:
    """Convert pydantic/FastAPI error dicts into field violations, in order."""
    violations: list[FieldViolation] = []
    for error in errors:
        error_type = error.get("type", "")
        # json_invalid locations carry a character offset, not a field.
        field = "body" if error_type == "json_invalid" else field_path(error.get("loc", ()))

        if _is_binding_error(error_type):
            violations.append(
                TypeMismatchViolation(
                    object_name=object_name,
                    field=field,
                    rejected_value=error.get("input"),
                    target_type=_target_type(error),
                )
            )
            continue

        code = CONSTRAINT_CODES.get(error_type, error_type)
        violations.append(
            ConstraintViolation(
                object_name=object_name,
                field=field,
                rejected_value=None if error_type == "missing" else error.get("input"),
                code=code,
                message=CONSTRAINT_MESSAGES.get(code, error.get("msg", "")),
            )
        )
    return violations


def object_name_for(request: Request) -> str:
    """Name of the request shape bound by the matched route.

    Taken from the route's ``openapi_extra``; otherwise derived from the
    endpoint name in lower camel case.
    """
    route = request.scope.get("route")
    extra = getattr(route, "openapi_extra", None) or {}
    if OBJECT_NAME_KEY in extra:
        return extra[OBJECT_NAME_KEY]

    name = getattr(route, "name", None) or "request"
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def register_error_handlers(
    app: FastAPI,
    responder: ValidationErrorResponder | None = None,
) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        responder: Envelope builder for request binding failures.
    """
    responder = responder or ValidationErrorResponder()

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render every binding failure of the request in one envelope."""
        object_name = object_name_for(request)
        violations = to_violations(object_name, exc.errors())
        envelope = responder.build(object_name, violations, request.url.path)
        logger.warning(
            "Validation failed for %s on %s: %d error(s)",
            object_name,
            request.url.path,
            len(violations),
        )
        return JSONResponse(
            status_code=envelope.status,
            content=jsonable_encoder(envelope.to_dict()),
        )

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(
        _request: Request, exc: EntityNotFoundError
    ) -> JSONResponse:
        """Handle missing coffee/order errors."""
        logger.warning("Not found: %s", exc)
        return _error_response(HTTP_404, "Not Found", str(exc))

    @app.exception_handler(DomainException)
    async def handle_domain(
        _request: Request, exc: DomainException
    ) -> JSONResponse:
        """Handle business rule violations."""
        logger.warning("Rejected by domain rule: %s", exc)
        return _error_response(HTTP_400, "Bad Request", str(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
