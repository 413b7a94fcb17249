import uuid
from datetime import timedelta, timezone

from todo_api.repositories import InMemoryRepository
from todo_api.schemas import TodoCreate


def test_create_assigns_id_defaults_and_timestamps(repository):
    todo = repository.create(TodoCreate(title="Write tests"))

    uuid.UUID(todo["id"])
    assert todo["title"] == "Write tests"
    assert todo["completed"] is False
    assert todo["created_at"] == todo["updated_at"]
    assert todo["created_at"].tzinfo == timezone.utc


def test_ids_are_unique(repository):
    ids = {repository.create(TodoCreate(title=f"t{i}"))["id"] for i in range(50)}
    assert len(ids) == 50


def test_find_all_returns_insertion_order(repository):
    for title in ["a", "b", "c"]:
        repository.create(TodoCreate(title=title))
    assert [t["title"] for t in repository.find_all()] == ["a", "b", "c"]


def test_reads_are_copies(repository):
    created = repository.create(TodoCreate(title="Original"))
    created["title"] = "mutated"

    fetched = repository.find_by_id(created["id"])
    fetched["completed"] = True
    repository.find_all()[0]["title"] = "mutated again"

    stored = repository.find_by_id(created["id"])
    assert stored["title"] == "Original"
    assert stored["completed"] is False


def test_find_by_id_missing_returns_none(repository):
    assert repository.find_by_id(str(uuid.uuid4())) is None


def test_update_merges_only_given_fields(repository):
    todo = repository.create(TodoCreate(title="Keep"))

    updated = repository.update(todo["id"], {"completed": True})
    assert updated["title"] == "Keep"
    assert updated["completed"] is True
    assert updated["created_at"] == todo["created_at"]
    assert updated["updated_at"] >= todo["updated_at"]

    renamed = repository.update(todo["id"], {"title": "Renamed"})
    assert renamed["title"] == "Renamed"
    assert renamed["completed"] is True


def test_update_missing_returns_none(repository):
    assert repository.update(str(uuid.uuid4()), {"title": "x"}) is None
    assert repository.count() == 0


def test_updated_at_never_moves_backwards(monkeypatch):
    repository = InMemoryRepository()
    todo = repository.create(TodoCreate(title="Clock"))
    earlier = todo["created_at"] - timedelta(hours=1)
    monkeypatch.setattr(repository, "_now", lambda: earlier)

    updated = repository.update(todo["id"], {})
    assert updated["updated_at"] == todo["updated_at"]
    assert updated["updated_at"] >= updated["created_at"]


def test_delete(repository):
    keep = repository.create(TodoCreate(title="keep"))
    drop = repository.create(TodoCreate(title="drop"))

    assert repository.delete(drop["id"]) is True
    assert repository.delete(drop["id"]) is False
    assert [t["id"] for t in repository.find_all()] == [keep["id"]]


def test_clear(repository):
    repository.create(TodoCreate(title="a"))
    repository.clear()
    assert repository.count() == 0
    assert repository.find_all() == []
