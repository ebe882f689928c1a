import sqlite3

import pytest
from flask import Flask

from taskservice.app import create_app, register_tasks
from taskservice.dao import TasksDao
from taskservice.database import create_schema


@pytest.fixture
def store():
    db = sqlite3.connect(":memory:", check_same_thread=False)
    create_schema(db)
    yield TasksDao(db)
    db.close()


@pytest.fixture
def client(store):
    return create_app(store).test_client()


def test_create_defaults_status_to_new(client, store):
    response = client.post("/tasks", json={"title": "write report"})
    assert response.status_code == 201
    body = response.get_json()
    assert body["title"] == "write report"
    assert body["status"] == "new"
    assert body["description"] is None
    assert body["id"] == store.list()[0].id
    assert body["created_at"] is not None


def test_create_keeps_status_and_description(client, store):
    response = client.post(
        "/tasks",
        json={"title": "a", "description": "details", "status": "in_progress"},
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["status"] == "in_progress"
    assert body["description"] == "details"
    stored = store.list()[0]
    assert stored.description == "details"
    assert stored.status.value == "in_progress"


def test_list_returns_created_tasks_in_order(client):
    client.post("/tasks", json={"title": "first"})
    client.post("/tasks", json={"title": "second"})
    response = client.get("/tasks")
    assert response.status_code == 200
    assert [task["title"] for task in response.get_json()] == ["first", "second"]


def test_list_empty(client):
    response = client.get("/tasks")
    assert response.status_code == 200
    assert response.get_json() == []


def test_create_rejects_non_json_body(client, store):
    response = client.post("/tasks", data="title=x")
    assert response.status_code == 422
    assert "error" in response.get_json()
    assert store.list() == []


def test_create_rejects_unknown_status(client, store):
    response = client.post("/tasks", json={"title": "x", "status": "archived"})
    assert response.status_code == 400
    assert "archived" in response.get_json()["error"]
    assert store.list() == []


def test_delete_removes_task(client, store):
    created = client.post("/tasks", json={"title": "gone"}).get_json()
    response = client.delete(f"/tasks/{created['id']}")
    assert response.status_code == 200
    assert response.data == b""
    assert store.list() == []


def test_delete_missing_task(client):
    response = client.delete("/tasks/42")
    assert response.status_code == 400
    assert response.get_json() == {"error": "task with id: 42 not found"}


def test_delete_non_integer_id(client):
    response = client.delete("/tasks/abc")
    assert response.status_code == 400
    assert "invalid syntax" in response.get_json()["error"]


def test_update_requires_status(client):
    created = client.post("/tasks", json={"title": "t"}).get_json()
    response = client.put(f"/tasks/{created['id']}", json={"title": "t"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "status can't be empty"}


def test_update_changes_task(client, store):
    created = client.post("/tasks", json={"title": "old"}).get_json()
    response = client.put(
        f"/tasks/{created['id']}",
        json={"title": "new title", "status": "done", "description": "d"},
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["id"] == created["id"]
    assert body["status"] == "done"
    assert body["title"] == "new title"
    assert body["created_at"] == created["created_at"]
    assert body["updated_at"] is not None
    listed = client.get("/tasks").get_json()
    assert listed == [body]


def test_update_missing_task(client):
    response = client.put("/tasks/9", json={"title": "t", "status": "done"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "task with id: 9 not found"}


def test_unknown_route_answers_json(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.mimetype == "application/json"
    assert "error" in response.get_json()


def test_unexpected_error_is_internal(store):
    class _Broken:
        def list(self):
            raise RuntimeError("storage offline")

    client = create_app(_Broken()).test_client()
    response = client.get("/tasks")
    assert response.status_code == 500
    assert response.get_json() == {"error": "storage offline"}


def test_register_tasks_on_plain_app(store):
    app = Flask("plain")
    register_tasks(app, store)
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert {"/tasks", "/tasks/<task_id>"} <= rules
    response = app.test_client().post("/tasks", json={"title": "x"})
    assert response.status_code == 201
    assert [task.title for task in store.list()] == ["x"]