"""Pydantic models for the Task API.

Request bodies are validated strictly: a JSON ``"true"`` is not a boolean and a
number is not a title.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from task_api import __version__

T = TypeVar("T")


class TaskCreate(BaseModel):
    """Request body for creating a new task."""

    title: StrictStr = Field(
        ...,
        min_length=1,
        description="The task title (required, non-empty)",
    )


class TaskUpdate(BaseModel):
    """Request body for replacing an existing task."""

    title: StrictStr = Field(
        ...,
        min_length=1,
        description="New title for the task",
    )
    completed: StrictBool = Field(..., description="New completion status")


class Task(BaseModel):
    """A task item in the task list."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., ge=1, description="Sequential identifier for the task")
    title: str = Field(..., description="The task title/description")
    completed: bool = Field(default=False, description="Whether the task has been completed")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapped around every API response."""

    status: Literal["success", "error"]
    data: T | None = None
    message: str = ""


class ErrorResponse(ApiResponse[Any]):
    """Envelope for failed requests. ``data`` is always null."""

    status: Literal["error"] = "error"


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    version: str = __version__
