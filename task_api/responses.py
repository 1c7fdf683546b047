"""Builders for the ``{status, data, message}`` response envelope."""

from typing import Any

from fastapi.responses import JSONResponse

from task_api.models import ApiResponse, ErrorResponse


def success(data: Any, message: str = "") -> ApiResponse[Any]:
    """Wrap ``data`` in a success envelope. The route sets the status code."""
    return ApiResponse(status="success", data=data, message=message)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope with null data."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(mode="json"),
    )
