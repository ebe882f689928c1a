"""Data access for the ``tasks`` table."""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime

from .database import get_database
from .model import Status, Task


class TaskNotFound(LookupError):
    """Raised when no task has the requested id."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"task with id: {task_id} not found")


def _parse_time(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value is not None else None


def _row_to_task(row: tuple) -> Task:
    task_id, title, description, status, created_at, updated_at = row
    return Task(
        id=task_id,
        title=title,
        description=description,
        status=Status(status),
        created_at=_parse_time(created_at),
        updated_at=_parse_time(updated_at),
    )


_COLUMNS = "id, title, description, status, created_at, updated_at"


class TasksDao:
    """Create, list, update and delete tasks in a database connection."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db
        self._lock = threading.Lock()

    def create(self, task: Task) -> Task:
        """Insert ``task``; fill in its id, status and creation time."""
        with self._lock, self._db:
            cursor = self._db.execute(
                "INSERT INTO tasks (title, description, status) VALUES (?, ?, ?)",
                (task.title, task.description, task.status.value),
            )
            row = self._db.execute(
                "SELECT id, status, created_at FROM tasks WHERE id = ?",
                (cursor.lastrowid,),
            ).fetchone()
        task.id, status, created_at = row
        task.status = Status(status)
        task.created_at = _parse_time(created_at)
        return task

    def list(self) -> list[Task]:
        """Return every stored task."""
        with self._lock:
            rows = self._db.execute(f"SELECT {_COLUMNS} FROM tasks ORDER BY id").fetchall()
        return [_row_to_task(row) for row in rows]

    def delete(self, task_id: int) -> None:
        """Remove the task with ``task_id``."""
        with self._lock, self._db:
            cursor = self._db.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        if cursor.rowcount == 0:
            raise TaskNotFound(task_id)

    def update(self, task: Task) -> Task:
        """Overwrite the stored task with ``task``'s fields; fill in its timestamps."""
        updated_at = task.updated_at.isoformat() if task.updated_at is not None else None
        with self._lock, self._db:
            cursor = self._db.execute(
                "UPDATE tasks SET title = ?, description = ?, status = ?, updated_at = ? "
                "WHERE id = ?",
                (task.title, task.description, task.status.value, updated_at, task.id),
            )
            if cursor.rowcount == 0:
                raise TaskNotFound(task.id)
            created, updated = self._db.execute(
                "SELECT created_at, updated_at FROM tasks WHERE id = ?", (task.id,)
            ).fetchone()
        task.created_at = _parse_time(created)
        task.updated_at = _parse_time(updated)
        return task


_tasks: TasksDao | None = None


def tasks() -> TasksDao:
    """Return the shared tasks store bound to the shared database."""
    global _tasks
    if _tasks is None:
        _tasks = TasksDao(get_database())
    return _tasks