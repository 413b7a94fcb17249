from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from threading import RLock
from typing import List, Optional

from .models import TodoChanges, TodoEntity
from .schemas import TodoCreate


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def find_all(self) -> List[TodoEntity]:
        """Return all TodoEntities in insertion order."""

    @abstractmethod
    def find_by_id(self, todo_id: str) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def create(self, data: TodoCreate) -> TodoEntity:
        """Create and return a new, not yet completed TodoEntity."""

    @abstractmethod
    def update(self, todo_id: str, changes: TodoChanges) -> Optional[TodoEntity]:
        """Merge the given fields into an existing TodoEntity. Return it, or None if not found."""

    @abstractmethod
    def delete(self, todo_id: str) -> bool:
        """Delete a TodoEntity by id. Return True if deleted, False if not found."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory repository. FastAPI runs sync endpoints on a thread pool,
    so every access to the list goes through the lock.

    Reads hand out copies so callers cannot mutate stored records.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: List[TodoEntity] = []

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _new_id(self) -> str:
        return str(uuid.uuid4())

    def _index_of(self, todo_id: str) -> int:
        for i, item in enumerate(self._items):
            if item["id"] == todo_id:
                return i
        return -1

    def find_all(self) -> List[TodoEntity]:
        with self._lock:
            return [t.copy() for t in self._items]

    def find_by_id(self, todo_id: str) -> Optional[TodoEntity]:
        with self._lock:
            index = self._index_of(todo_id)
            return None if index == -1 else self._items[index].copy()

    def create(self, data: TodoCreate) -> TodoEntity:
        now = self._now()
        entity: TodoEntity = {
            "id": self._new_id(),
            "title": data.title,
            "completed": False,
            "created_at": now,
            "updated_at": now,
        }
        with self._lock:
            self._items.append(entity)
            return entity.copy()

    def update(self, todo_id: str, changes: TodoChanges) -> Optional[TodoEntity]:
        with self._lock:
            index = self._index_of(todo_id)
            if index == -1:
                return None

            # Update only provided fields
            updated = self._items[index].copy()
            if "title" in changes:
                updated["title"] = changes["title"]
            if "completed" in changes:
                updated["completed"] = changes["completed"]
            # Clamp so a clock step backwards cannot break updated_at >= created_at
            updated["updated_at"] = max(self._now(), updated["updated_at"])

            self._items[index] = updated
            return updated.copy()

    def delete(self, todo_id: str) -> bool:
        with self._lock:
            index = self._index_of(todo_id)
            if index == -1:
                return False
            del self._items[index]
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
