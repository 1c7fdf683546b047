"""FastAPI application entry point."""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated, Any

import uvicorn
from fastapi import APIRouter, Body, Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_api import __version__
from task_api.config import Settings
from task_api.errors import (
    ApiError,
    NotFoundError,
    ServerError,
    ServiceUnavailableError,
    ValidationError,
)
from task_api.logging_setup import setup_logging
from task_api.models import ApiResponse, ErrorResponse, HealthResponse, Task, TaskCreate, TaskUpdate
from task_api.responses import error_response, success
from task_api.store import TaskStore

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found."


def get_store(request: Request) -> TaskStore:
    """Return the task store owned by the running application."""
    return request.app.state.store


Store = Annotated[TaskStore, Depends(get_store)]

error_responses: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}

router = APIRouter(prefix="/api", responses=error_responses)
debug_router = APIRouter(prefix="/api/debug", tags=["Debug"])


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@router.get("/tasks", response_model=ApiResponse[list[Task]], tags=["Tasks"])
async def list_tasks(store: Store) -> ApiResponse[Any]:
    """List all tasks."""
    return success(store.list_all(), "Task list.")


@router.post(
    "/tasks",
    response_model=ApiResponse[Task],
    status_code=status.HTTP_201_CREATED,
    tags=["Tasks"],
)
async def create_task(data: TaskCreate, store: Store) -> ApiResponse[Any]:
    """Create a new task."""
    task = store.create(data)
    logger.debug("created task %d", task.id)
    return success(task, "Task created.")


@router.post(
    "/tasks/seed",
    response_model=ApiResponse[list[Task]],
    status_code=status.HTTP_201_CREATED,
    tags=["Tasks"],
)
async def seed_tasks(store: Store) -> ApiResponse[Any]:
    """Reset the task list to the sample tasks."""
    return success(store.seed(), "Tasks reset to sample data.")


@router.get("/tasks/{task_id}", response_model=ApiResponse[Task], tags=["Tasks"])
async def get_task(task_id: int, store: Store) -> ApiResponse[Any]:
    """Get a specific task by ID."""
    return success(store.get(task_id), "Task details.")


@router.put("/tasks/{task_id}", response_model=ApiResponse[Task], tags=["Tasks"])
async def replace_task(
    task_id: int,
    store: Store,
    body: Annotated[Any, Body()] = None,
) -> ApiResponse[Any]:
    """Replace the title and completion status of a task.

    An unknown id answers 404 before the body is checked.
    """
    store.get(task_id)
    try:
        data = TaskUpdate.model_validate(body)
    except PydanticValidationError as exc:
        raise ValidationError(_describe_validation_errors(exc.errors())) from exc
    return success(store.replace(task_id, data), "Task updated.")


@router.put("/tasks/{task_id}/toggle", response_model=ApiResponse[Task], tags=["Tasks"])
async def toggle_task(task_id: int, store: Store) -> ApiResponse[Any]:
    """Flip the completion status of a task."""
    return success(store.toggle(task_id), "Completion status toggled.")


@router.delete("/tasks/{task_id}", response_model=ApiResponse[Task], tags=["Tasks"])
async def delete_task(task_id: int, store: Store) -> ApiResponse[Any]:
    """Delete a task and return it."""
    return success(store.delete(task_id), "Task deleted.")


@router.delete(
    "/tasks",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["Tasks"],
)
async def delete_all_tasks(store: Store) -> Response:
    """Delete every task. 204 responses carry no body."""
    store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@debug_router.get("/error")
async def debug_error() -> None:
    """Always fails with a simulated 500."""
    raise ServerError("Simulated server error.")


@debug_router.get("/maintenance")
async def debug_maintenance() -> None:
    """Always answers 503."""
    raise ServiceUnavailableError("The server is under maintenance. Please try again later.")


def _describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    parts = []
    for err in errors:
        field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "Invalid request: " + "; ".join(parts)


async def handle_api_error(request: Request, exc: ApiError) -> Response:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> Response:
    errors = list(exc.errors())
    # A path id that is not an integer cannot name any task.
    if any(err.get("loc") and err["loc"][0] == "path" for err in errors):
        return await handle_api_error(request, NotFoundError())
    message = _describe_validation_errors(errors)
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response(status.HTTP_404_NOT_FOUND, ROUTE_NOT_FOUND)
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ServerError.default_message)


async def log_requests(request: Request, call_next: Any) -> Response:
    start = time.perf_counter()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %d (%.0fms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
        )


def create_app(settings: Settings | None = None, store: TaskStore | None = None) -> FastAPI:
    """Build an application that owns its own task store."""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Server is running on http://%s:%d", settings.host, settings.port)
        yield

    app = FastAPI(
        title="Task API",
        description="A minimal in-memory task list with a uniform response envelope.",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else TaskStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(router)
    if settings.enable_debug_routes:
        app.include_router(debug_router)
    return app


def run() -> None:
    """Configure logging and serve the application with uvicorn."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )