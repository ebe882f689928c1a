"""HTTP application exposing the tasks API."""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone
from typing import Any, Callable

from flask import Flask, Response, g, jsonify, request

from .dao import TaskNotFound, TasksDao
from .dao import tasks as shared_tasks
from .model import Status, Task

_INTEGER = re.compile(r"[+-]?[0-9]+")
_request_logger = logging.getLogger("taskservice")


class _HttpError(Exception):
    """An error that carries the HTTP status it should be answered with."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def _error_response(code: int, message: str) -> Response:
    response = jsonify({"error": message})
    response.status_code = code
    return response


def _handle_error(error: Exception) -> Response:
    if isinstance(error, TaskNotFound):
        return _error_response(400, str(error))
    if isinstance(error, _HttpError):
        return _error_response(error.code, error.message)
    code = getattr(error, "code", None)
    description = getattr(error, "description", None)
    if isinstance(code, int) and isinstance(description, str):
        return _error_response(code, description)
    _request_logger.error("unhandled error: %s", error, exc_info=error)
    return _error_response(500, str(error))


def _parse_id(raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise _HttpError(400, f'parsing "{raw}": invalid syntax')
    return int(raw)


def _parse_status(value: str) -> Status:
    try:
        return Status(value)
    except ValueError:
        raise _HttpError(400, f"invalid status: {value!r}") from None


def _read_body() -> tuple[str, str | None, str]:
    """Return the title, description and raw status sent in a JSON body."""
    if not request.is_json:
        raise _HttpError(422, "Unprocessable Entity")
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise _HttpError(400, "invalid request body")

    title = data.get("title") or ""
    description = data.get("description")
    status = data.get("status") or ""
    if not isinstance(title, str):
        raise _HttpError(400, "title must be a string")
    if description is not None and not isinstance(description, str):
        raise _HttpError(400, "description must be a string")
    if not isinstance(status, str):
        raise _HttpError(400, "status must be a string")
    return title, description, status


def register_tasks(app: Flask, dao: TasksDao | None) -> None:
    """Add the ``/tasks`` routes to ``app``, storing tasks in ``dao``."""
    store: Callable[[], Any] = (lambda: dao) if dao is not None else shared_tasks

    @app.get("/tasks")
    def list_tasks() -> Response:
        return jsonify([task.to_dict() for task in store().list()])

    @app.post("/tasks")
    def create_task() -> tuple[Response, int]:
        title, description, status = _read_body()
        task = Task(
            title=title,
            description=description,
            status=Status.NEW if status == "" else _parse_status(status),
            created_at=datetime.now(timezone.utc),
        )
        store().create(task)
        return jsonify(task.to_dict()), 201

    @app.delete("/tasks/<task_id>")
    def delete_task(task_id: str) -> tuple[str, int]:
        store().delete(_parse_id(task_id))
        return "", 200

    @app.put("/tasks/<task_id>")
    def update_task(task_id: str) -> tuple[Response, int]:
        identifier = _parse_id(task_id)
        title, description, status = _read_body()
        if status == "":
            raise _HttpError(400, "status can't be empty")
        task = Task(
            id=identifier,
            title=title,
            description=description,
            status=_parse_status(status),
            updated_at=datetime.now(timezone.utc),
        )
        store().update(task)
        return jsonify(task.to_dict()), 200


def create_app(dao: TasksDao | None = None) -> Flask:
    """Build the application; without ``dao`` the shared tasks store is used."""
    app = Flask(__name__)
    app.register_error_handler(Exception, _handle_error)

    @app.before_request
    def _start_timer() -> None:
        g.started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        elapsed = time.perf_counter() - g.get("started", time.perf_counter())
        _request_logger.info(
            "%s - %s %s %.3fms",
            response.status_code,
            request.method,
            request.path,
            elapsed * 1000,
        )
        return response

    register_tasks(app, dao)
    return app