"""Pydantic models for the Taskboard API.

Field names are snake_case in Python and camelCase on the wire
(``createdAt``/``updatedAt``, ``deletedCount``).
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from taskboard import __version__

TaskStatus = Literal["pending", "in-progress", "completed"]
TaskPriority = Literal["low", "medium", "high"]


def _clean_title(value: str | None) -> str:
    if value is None:
        raise ValueError("title must not be null")
    value = value.strip()
    if not value:
        raise ValueError("title must not be blank")
    return value


class TaskCreate(BaseModel):
    """Request body for creating a new task."""

    title: str = Field(..., description="The task title (required, non-blank)")
    description: str | None = Field(default="", description="Optional free-form details")
    status: TaskStatus = Field(default="pending", description="Initial status")
    priority: TaskPriority = Field(default="medium", description="Initial priority")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        return _clean_title(value)

    @field_validator("status", "priority", mode="before")
    @classmethod
    def _empty_means_default(cls, value: object, info: ValidationInfo) -> object:
        # "" and null fall back to the field default.
        if not value:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("description")
    @classmethod
    def _description_default(cls, value: str | None) -> str:
        return value or ""


class TaskUpdate(BaseModel):
    """Request body for updating an existing task.

    Only the fields present in the request are applied. Anything else in the
    body (``id``, timestamps, unknown keys) is dropped.
    """

    title: str | None = Field(default=None, description="New title for the task")
    description: str | None = Field(default=None, description="New description")
    status: TaskStatus | None = Field(default=None, description="New status")
    priority: TaskPriority | None = Field(default=None, description="New priority")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str | None) -> str:
        return _clean_title(value)

    @field_validator("status", "priority")
    @classmethod
    def _not_null(cls, value: str | None) -> str:
        # Validators only see explicitly supplied values, so None here is a JSON null.
        if value is None:
            raise ValueError("must not be null")
        return value

    @field_validator("description")
    @classmethod
    def _description_default(cls, value: str | None) -> str:
        return value or ""


class Task(BaseModel):
    """A task item in the task manager."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., description="Unique identifier for the task")
    title: str = Field(..., description="The task title")
    description: str = Field(default="", description="Free-form details")
    status: TaskStatus = Field(default="pending", description="Current status")
    priority: TaskPriority = Field(default="medium", description="Current priority")
    created_at: datetime = Field(..., alias="createdAt", description="When the task was created")
    updated_at: datetime = Field(
        ..., alias="updatedAt", description="When the task was last updated"
    )


class TaskListResponse(BaseModel):
    """Envelope for the full task listing."""

    success: bool = True
    tasks: list[Task]
    count: int


class TaskResponse(BaseModel):
    """Envelope wrapping a single task."""

    success: bool = True
    task: Task


class TaskMessageResponse(TaskResponse):
    """Envelope for a single task changed by a write operation."""

    message: str


class TaskClearResponse(BaseModel):
    """Envelope returned after clearing every task."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    deleted_count: int = Field(..., alias="deletedCount")


class ErrorResponse(BaseModel):
    """Uniform error envelope."""

    success: bool = False
    error: str


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    version: str = __version__
