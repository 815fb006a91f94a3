"""Error taxonomy and the exception handlers that render JSON error bodies.

Every error response carries a human-readable ``message``. Validation failures
(422) add ``errors``: a map of field name to a list of messages, where nested
fields use dotted paths such as ``category_ids.0``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Request sections FastAPI prefixes onto error locations.
_LOC_SECTIONS = frozenset({"body", "query", "path", "header", "cookie"})


class FieldValidationError(Exception):
    """Domain-level validation failure (uniqueness, unknown ids) keyed by field."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        super().__init__(summarize_errors(errors))

    @classmethod
    def single(cls, field: str, message: str) -> "FieldValidationError":
        return cls({field: [message]})


def summarize_errors(errors: dict[str, list[str]]) -> str:
    """First message, plus a count of the rest: 'X (and 2 more errors)'."""
    messages = [m for msgs in errors.values() for m in msgs]
    if not messages:
        return "The given data was invalid."
    first = messages[0]
    rest = len(messages) - 1
    if rest == 1:
        return f"{first} (and 1 more error)"
    if rest > 1:
        return f"{first} (and {rest} more errors)"
    return first


def _field_name(loc: tuple | list) -> str:
    parts = list(loc)
    if parts and parts[0] in _LOC_SECTIONS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or "request"


def errors_from_pydantic(raw_errors: list[dict]) -> dict[str, list[str]]:
    """Group pydantic/FastAPI error dicts by dotted field path."""
    grouped: dict[str, list[str]] = {}
    for err in raw_errors:
        field = _field_name(err.get("loc", ()))
        grouped.setdefault(field, []).append(str(err.get("msg", "Invalid value.")))
    return grouped


def _validation_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": summarize_errors(errors), "errors": errors},
    )


async def _http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _validation_response(errors_from_pydantic(exc.errors()))


async def _field_validation_handler(
    _request: Request, exc: FieldValidationError
) -> JSONResponse:
    return _validation_response(exc.errors)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(FieldValidationError, _field_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
