"""Standardized error responses."""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.utils.exceptions import AppError


def error_response(
    code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create an error response.

    Extra details are merged into the top level of the body so clients can
    read flags such as ``requiresPayment`` next to the message.

    Args:
        code: Error code (e.g., 'VALIDATION_ERROR', 'NOT_FOUND')
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional top-level fields

    Returns:
        JSONResponse with error structure
    """
    content: dict[str, Any] = {"message": message, "code": code}
    if details:
        content.update(details)

    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def app_error_response(exc: AppError) -> JSONResponse:
    return error_response(
        code=exc.code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.extra,
    )


def internal_error(message: str = "Internal server error") -> JSONResponse:
    return error_response(
        code="INTERNAL_ERROR",
        message=message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def first_validation_message(errors: list[dict[str, Any]]) -> str:
    """Turn FastAPI/pydantic validation errors into a single message."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = first.get("msg", "Invalid request")
    # pydantic prefixes custom validator messages with "Value error, "
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    if location and first.get("type") == "missing":
        return f"{location[-1]} is required"
    return message
