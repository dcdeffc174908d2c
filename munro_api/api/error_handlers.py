"""Error Handlers — map every failure onto the Munro API error envelope.

Invariants:
    - MunroApiError → its own to_response() at its own http_status
    - RequestValidationError → 400 in the same envelope as QueryValidationError,
      with context.parameter set to the camelCase name the caller sent
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Malformed scalars (limit=ten, minHeight=abc) are rebuilt as a
      QueryValidationError so clients read one shape for every 400
    - Only the first coercion failure names the parameter; all of them are
      listed under details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from munro_api.core.errors import (
    ErrorCategory, ErrorSeverity, MunroApiError, QueryValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(MunroApiError)
    async def munro_api_error_handler(request: Request, exc: MunroApiError):
        logger.error(
            f"MunroApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "running_number": exc.context.running_number,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        response = _build_validation_error_response(exc)
        logger.warning(
            f"Rejected request on {request.url.path}: {response['error']['message']}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=response,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _parameter_name(loc: tuple) -> str:
    # ("query", "minHeight") or ("path", "min_height"); path names are snake_case
    if not loc:
        return "request"
    head, *rest = str(loc[-1]).split("_")
    return head + "".join(part.title() for part in rest)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Rebuild a coercion failure as a QueryValidationError envelope."""
    errors = exc.errors()
    first = errors[0] if errors else {"loc": (), "input": None}
    parameter = _parameter_name(tuple(first["loc"]))
    response = QueryValidationError(
        f"Invalid value for {parameter}: {first.get('input')}", parameter,
    ).to_response()
    response["error"]["details"] = [
        {
            "parameter": _parameter_name(tuple(e["loc"])),
            "location": str(e["loc"][0]) if e["loc"] else None,
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]
    return response
