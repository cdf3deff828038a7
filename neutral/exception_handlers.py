from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from neutral.logger import logger

# Query parameter name -> error code reported to the caller.
FIELD_ERROR_CODES = {
    "ip": ("invalid_ip", "The supplied IP address is not a valid IPv4 or IPv6 address."),
    "number": ("invalid_number", "The supplied phone number must be digits with an optional leading '+'."),
}


def _normalize_pydantic_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Make sure Pydantic error dicts are JSON-serializable."""
    normalized: list[dict[str, Any]] = []
    for error in errors:
        e = dict(error)
        ctx = e.get("ctx")
        if isinstance(ctx, dict):
            e["ctx"] = {k: str(v) for k, v in ctx.items()}
        normalized.append(e)
    return normalized


def _build_validation_error_payload(errors: list[dict[str, Any]]) -> dict[str, str]:
    """Reduce validation errors to a `code` and a stable `message`.

    Raw pydantic details are not exposed to callers.
    """
    for error in _normalize_pydantic_errors(errors):
        loc = error.get("loc", ())
        # Both request-level ("query", "ip") and model-level ("ip",) locations.
        if loc and loc[-1] in FIELD_ERROR_CODES:
            code, message = FIELD_ERROR_CODES[loc[-1]]
            return {"code": code, "message": message}

    return {"code": "invalid_request", "message": "Invalid request parameters"}


async def validation_exception_handler(
    request: Request, exc: ValidationError | RequestValidationError
) -> JSONResponse:
    """Handle query validation errors, whether raised by FastAPI or by the query models."""
    errors = exc.errors()
    logger.info(
        "Validation error during request handling "
        f"path={request.url.path} method={request.method} errors={errors}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_build_validation_error_payload(list(errors)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        f"Unhandled exception while processing request: {repr(exc)} path={request.url.path} method={request.method}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "internal_error",
            "message": "An unexpected error occurred while processing the request.",
        },
    )
