"""FastAPI application entry point."""

import asyncio
import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware

from taskboard import __version__
from taskboard.config import Settings
from taskboard.errors import register_exception_handlers
from taskboard.models import (
    ErrorResponse,
    HealthResponse,
    Task,
    TaskClearResponse,
    TaskCreate,
    TaskListResponse,
    TaskMessageResponse,
    TaskResponse,
    TaskUpdate,
)
from taskboard.store import TaskStore

logger = logging.getLogger(__name__)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}

router = APIRouter(prefix="/api")


def get_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _task_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


def get_task_or_404(task_id: str, store: TaskStore = Depends(get_store)) -> Task:
    """Resolve the task named in the path, or raise 404."""
    task = store.get(task_id)
    if task is None:
        raise _task_not_found()
    return task


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(version=__version__)


@router.get("/tasks", response_model=TaskListResponse, tags=["Tasks"])
async def list_tasks(
    store: TaskStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> TaskListResponse:
    """List all tasks in creation order."""
    try:
        if settings.list_delay_seconds:
            await asyncio.sleep(settings.list_delay_seconds)
        tasks = store.list_all()
        return TaskListResponse(tasks=tasks, count=len(tasks))
    except Exception as exc:
        logger.exception("Failed to fetch tasks: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to fetch tasks") from exc


@router.post(
    "/tasks",
    response_model=TaskMessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    tags=["Tasks"],
)
async def create_task(
    data: TaskCreate, store: TaskStore = Depends(get_store)
) -> TaskMessageResponse:
    """Create a new task."""
    try:
        task = store.create(data)
        logger.info("Created new task %s (%r)", task.id, task.title)
        return TaskMessageResponse(task=task, message="Task created successfully")
    except Exception as exc:
        logger.exception("Failed to create task: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to create task") from exc


@router.delete("/tasks", response_model=TaskClearResponse, tags=["Tasks"])
async def delete_all_tasks(store: TaskStore = Depends(get_store)) -> TaskClearResponse:
    """Delete every task. Meant for resetting test runs."""
    try:
        deleted = store.clear()
        logger.warning("Deleted all %d tasks", deleted)
        return TaskClearResponse(message=f"Deleted {deleted} tasks", deleted_count=deleted)
    except Exception as exc:
        logger.exception("Failed to delete tasks: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to delete tasks") from exc


@router.get(
    "/tasks/{task_id}", response_model=TaskResponse, responses=NOT_FOUND, tags=["Tasks"]
)
async def get_task(task_id: str, store: TaskStore = Depends(get_store)) -> TaskResponse:
    """Get a specific task by ID."""
    try:
        task = store.get(task_id)
        if task is None:
            raise _task_not_found()
        return TaskResponse(task=task)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Failed to fetch task %s: %s", task_id, exc)
        raise HTTPException(status_code=500, detail="Failed to fetch task") from exc


@router.put(
    "/tasks/{task_id}",
    response_model=TaskMessageResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
    tags=["Tasks"],
)
async def update_task(
    data: TaskUpdate,
    existing: Task = Depends(get_task_or_404),
    store: TaskStore = Depends(get_store),
) -> TaskMessageResponse:
    """Update an existing task with the supplied fields.

    An unknown id is reported as 404 even when the body is also invalid.
    """
    task_id = existing.id
    try:
        task = store.update(task_id, data)
        if task is None:
            raise _task_not_found()
        logger.info("Updated task %s: %s", task.id, sorted(data.model_fields_set))
        return TaskMessageResponse(task=task, message="Task updated successfully")
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Failed to update task %s: %s", task_id, exc)
        raise HTTPException(status_code=500, detail="Failed to update task") from exc


@router.delete(
    "/tasks/{task_id}",
    response_model=TaskMessageResponse,
    responses=NOT_FOUND,
    tags=["Tasks"],
)
async def delete_task(
    task_id: str, store: TaskStore = Depends(get_store)
) -> TaskMessageResponse:
    """Delete a task and return it."""
    try:
        task = store.delete(task_id)
        if task is None:
            raise _task_not_found()
        logger.info("Deleted task %s", task.id)
        return TaskMessageResponse(task=task, message="Task deleted successfully")
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Failed to delete task %s: %s", task_id, exc)
        raise HTTPException(status_code=500, detail="Failed to delete task") from exc


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application with its own store."""
    settings = settings or Settings.from_env()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory task management API backing the taskboard UI.",
        version=__version__,
    )

    # Configure CORS for frontend access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router)

    store = TaskStore()
    if settings.seed_sample:
        store.seed()
    app.state.store = store
    app.state.settings = settings

    return app


app = create_app()
