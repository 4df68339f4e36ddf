from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ipfinder.logger import logger


def _normalize_pydantic_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Make sure Pydantic error dicts are JSON-serializable."""
    normalized: list[dict[str, Any]] = []
    for error in errors:
        e = dict(error)
        ctx = e.get("ctx")
        if isinstance(ctx, dict):
            # Convert any non-serializable ctx values (e.g. exceptions) to strings.
            e["ctx"] = {k: str(v) for k, v in ctx.items()}
        normalized.append(e)
    return normalized


def build_validation_error_payload(exc: ValidationError) -> dict:
    """Collapse validation errors into `{"code", "message"}`.

    Raw Pydantic details stay in the logs and are not returned to clients.
    """
    for error in _normalize_pydantic_errors(exc.errors()):
        loc = error.get("loc", ())
        if loc and loc[-1] == "ip":
            return {
                "code": "invalid_ip",
                "message": "The supplied IP address is not a valid IPv4 or IPv6 address.",
            }

    return {
        "code": "invalid_request",
        "message": "Invalid request parameters",
    }


async def pydantic_validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle Pydantic validation errors raised during dependency resolution."""
    logger.info(
        "Pydantic validation error during request handling "
        f"path={request.url.path} method={request.method} errors={_normalize_pydantic_errors(exc.errors())}"
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=build_validation_error_payload(exc))


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
