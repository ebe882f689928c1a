from datetime import datetime, timezone

import pytest

from taskservice.model import Auth, Status, Task


@pytest.mark.parametrize("stored", ["new", "in_progress", "done"])
def test_status_values_match_storage_strings(stored):
    task = Task(title="t", status=Status(stored))
    assert task.to_dict()["status"] == stored


def test_status_from_string():
    assert Status("in_progress") is Status.IN_PROGRESS


def test_unknown_status_rejected():
    with pytest.raises(ValueError):
        Status("archived")


def test_task_defaults():
    task = Task(title="write report")
    assert task.id == 0
    assert task.status is Status.NEW
    assert task.description is None
    assert task.created_at is None


def test_to_dict_fields():
    task = Task(id=3, title="t", description="d", status=Status.DONE)
    data = task.to_dict()
    assert data == {
        "id": 3,
        "title": "t",
        "description": "d",
        "status": "done",
        "created_at": None,
        "updated_at": None,
    }


def test_to_dict_timestamps_round_trip():
    created = datetime(2025, 4, 1, 10, 30, 15, 123456, tzinfo=timezone.utc)
    updated = datetime(2025, 4, 2, 8, 0, tzinfo=timezone.utc)
    task = Task(id=1, title="t", created_at=created, updated_at=updated)
    data = task.to_dict()
    assert datetime.fromisoformat(data["created_at"]) == created
    assert datetime.fromisoformat(data["updated_at"]) == updated


def test_auth_fields():
    auth = Auth(uuid="user-1", refresh_token="token")
    assert auth.uuid == "user-1"
    assert auth.refresh_token == "token"