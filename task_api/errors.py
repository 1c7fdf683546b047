"""Exceptions that map onto HTTP error responses.

Raise these from the store or from route handlers. The exception handlers
installed by :func:`task_api.main.create_app` turn them into error envelopes.
"""

from fastapi import status


class ApiError(Exception):
    """Base class for errors that carry an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Client input was malformed or missing."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class NotFoundError(ApiError):
    """The requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Task not found."


class ServerError(ApiError):
    """Server-side fault."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error."


class ServiceUnavailableError(ApiError):
    """The service is temporarily unable to handle requests."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Service unavailable."
