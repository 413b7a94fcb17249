import logging
import uuid

import pytest

from todo_api.errors import NotFoundError, ValidationError
from todo_api.schemas import TodoCreate


def test_create_trims_and_starts_incomplete(service):
    todo = service.create_todo(TodoCreate(title="  Buy milk  "))
    assert todo["title"] == "Buy milk"
    assert todo["completed"] is False


@pytest.mark.parametrize("title", [" ", "   ", "\t", "\n  \t"])
def test_create_blank_title_fails_and_adds_nothing(service, repository, title):
    with pytest.raises(ValidationError) as exc_info:
        service.create_todo(TodoCreate(title=title))
    assert exc_info.value.status_code == 400
    assert repository.count() == 0


def test_round_trip_create_then_get(service):
    created = service.create_todo(TodoCreate(title=" Round trip "))
    fetched = service.get_todo_by_id(created["id"])
    assert fetched["id"] == created["id"]
    assert fetched["title"] == "Round trip"


def test_get_missing_raises_not_found(service):
    missing = str(uuid.uuid4())
    with pytest.raises(NotFoundError) as exc_info:
        service.get_todo_by_id(missing)
    assert exc_info.value.status_code == 404
    assert missing in exc_info.value.message


def test_get_all_passthrough(service):
    service.create_todo(TodoCreate(title="one"))
    service.create_todo(TodoCreate(title="two"))
    assert [t["title"] for t in service.get_all_todos()] == ["one", "two"]


def test_update_with_empty_changes_refreshes_updated_at_only(service):
    todo = service.create_todo(TodoCreate(title="Same"))
    updated = service.update_todo(todo["id"], {})
    assert updated["title"] == todo["title"]
    assert updated["completed"] == todo["completed"]
    assert updated["updated_at"] >= todo["updated_at"]


def test_update_trims_title_and_sets_completed(service):
    todo = service.create_todo(TodoCreate(title="Old"))
    updated = service.update_todo(todo["id"], {"title": "  New ", "completed": True})
    assert updated["title"] == "New"
    assert updated["completed"] is True


def test_update_blank_title_fails_and_leaves_record(service):
    todo = service.create_todo(TodoCreate(title="Keep"))
    with pytest.raises(ValidationError):
        service.update_todo(todo["id"], {"title": "   "})
    assert service.get_todo_by_id(todo["id"])["title"] == "Keep"


def test_update_missing_raises_not_found_before_validation(service):
    with pytest.raises(NotFoundError):
        service.update_todo(str(uuid.uuid4()), {"title": "   "})


def test_update_reports_record_removed_mid_update(service, repository, monkeypatch):
    todo = service.create_todo(TodoCreate(title="Racy"))
    monkeypatch.setattr(repository, "update", lambda todo_id, changes: None)
    with pytest.raises(NotFoundError):
        service.update_todo(todo["id"], {"completed": True})


def test_delete_twice_fails_second_time(service):
    todo = service.create_todo(TodoCreate(title="Gone"))
    assert service.delete_todo(todo["id"]) is None
    with pytest.raises(NotFoundError):
        service.delete_todo(todo["id"])


def test_delete_removes_exactly_one(service):
    todos = [service.create_todo(TodoCreate(title=f"t{i}")) for i in range(3)]
    service.delete_todo(todos[1]["id"])
    remaining = service.get_all_todos()
    assert len(remaining) == 2
    assert todos[1]["id"] not in {t["id"] for t in remaining}


def test_delete_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.delete_todo(str(uuid.uuid4()))


def test_reads_log_at_debug(service, caplog):
    todo = service.create_todo(TodoCreate(title="Logged"))
    with caplog.at_level(logging.DEBUG, logger="todo_api.services"):
        service.get_all_todos()
        service.get_todo_by_id(todo["id"])
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert "Listed 1 todos" in messages
    assert f"Fetched todo {todo['id']}" in messages
