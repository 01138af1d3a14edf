"""In-memory task storage.

Tasks live only for the lifetime of the process. Every operation runs under
a single lock, so one store can be shared by concurrent requests.
"""

import logging
import threading
from datetime import UTC, datetime
from uuid import uuid4

from taskboard.models import Task, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

SAMPLE_TASK = TaskCreate(
    title="Sample Task",
    description="This is a sample task for testing",
)


class TaskStore:
    """Simple in-memory task storage, ordered by creation."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()

    def list_all(self) -> list[Task]:
        """Return all tasks in creation order."""
        with self._lock:
            return list(self._tasks.values())

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Get a task by its ID, or None if not found."""
        with self._lock:
            return self._tasks.get(task_id)

    def create(self, data: TaskCreate) -> Task:
        """Create a new task and return it."""
        now = datetime.now(UTC)
        with self._lock:
            task_id = str(uuid4())
            while task_id in self._tasks:
                task_id = str(uuid4())
            task = Task(
                id=task_id,
                title=data.title,
                description=data.description or "",
                status=data.status,
                priority=data.priority,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task
        return task

    def update(self, task_id: str, data: TaskUpdate) -> Task | None:
        """Merge the supplied fields into a task. Returns None if not found.

        ``updated_at`` is refreshed even when no fields were supplied.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None

            update_data = data.model_dump(exclude_unset=True)
            update_data["updated_at"] = max(datetime.now(UTC), task.created_at)
            updated_task = task.model_copy(update=update_data)
            self._tasks[task_id] = updated_task
            return updated_task

    def delete(self, task_id: str) -> Task | None:
        """Remove a task and return it, or None if not found."""
        with self._lock:
            return self._tasks.pop(task_id, None)

    def clear(self) -> int:
        """Remove every task. Returns how many were removed."""
        with self._lock:
            removed = len(self._tasks)
            self._tasks.clear()
        return removed

    def seed(self) -> Task:
        """Insert the sample task shown on a fresh start."""
        task = self.create(SAMPLE_TASK)
        logger.debug("Seeded sample task %s", task.id)
        return task
