"""Error Handlers — global exception handlers shared by both services.

Invariants:
    - PracticeApiError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level details and an example body
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain, validation (Pydantic), catch-all
    - Example payload read from app.state so one module serves both services
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from practice_api.core.errors import PracticeApiError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register handler for the PracticeApiError hierarchy."""

    @app.exception_handler(PracticeApiError)
    async def domain_error_handler(request: Request, exc: PracticeApiError):
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "entity_id": exc.context.entity_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        example = getattr(request.app.state, "payload_example", None)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc, example),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def build_validation_error_response(
    exc: RequestValidationError, example: dict | None = None,
) -> dict:
    """Build structured validation error response."""
    error = {
        "code": "VALIDATION_ERROR",
        "message": _summarize(exc.errors()),
        "category": "validation",
        "severity": ErrorSeverity.ERROR.value,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
    if example is not None:
        error["example"] = example
    return {"error": error}


def _summarize(errors) -> str:
    """One-line message naming missing and invalid fields."""
    if any(e["type"] == "json_invalid" for e in errors):
        return "Malformed JSON body"
    missing = [str(e["loc"][-1]) for e in errors if e["type"] == "missing"]
    invalid = [
        str(e["loc"][-1]) for e in errors
        if e["type"] != "missing" and len(e["loc"]) > 1
    ]
    parts = []
    if missing:
        parts.append(f"missing required field(s): {', '.join(missing)}")
    if invalid:
        parts.append(f"invalid value for: {', '.join(invalid)}")
    return "; ".join(parts) or "Invalid request data"
