"""Data models for tasks and authentication records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Status(str, Enum):
    """Lifecycle state of a task."""

    NEW = "new"
    IN_PROGRESS = "in_progress"
    DONE = "done"


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass
class Task:
    """A single task as stored in the ``tasks`` table."""

    id: int = 0
    title: str = ""
    description: str | None = None
    status: Status = Status.NEW
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the task."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


@dataclass
class Auth:
    """A refresh token bound to a user identifier."""

    uuid: str
    refresh_token: str