"""Business rules for todos, layered over a Repository."""

from __future__ import annotations

import logging
from typing import List

from .errors import NotFoundError, ValidationError
from .models import TodoChanges, TodoEntity
from .repositories import Repository
from .schemas import TodoCreate

logger = logging.getLogger(__name__)

BLANK_TITLE_MESSAGE = "title must not be blank"


def _not_found(todo_id: str) -> NotFoundError:
    return NotFoundError(f"Todo with id '{todo_id}' not found")


def _normalize_title(title: str) -> str:
    trimmed = title.strip()
    if not trimmed:
        raise ValidationError(BLANK_TITLE_MESSAGE)
    return trimmed


# PUBLIC_INTERFACE
class TodoService:
    """
    Enforces domain rules before delegating to the repository.

    The repository reports absence with None/False; this layer turns those signals
    into NotFoundError, and blank titles into ValidationError.
    """

    def __init__(self, repository: Repository) -> None:
        self._repository = repository

    def get_all_todos(self) -> List[TodoEntity]:
        todos = self._repository.find_all()
        logger.debug("Listed %d todos", len(todos))
        return todos

    def get_todo_by_id(self, todo_id: str) -> TodoEntity:
        todo = self._repository.find_by_id(todo_id)
        if todo is None:
            raise _not_found(todo_id)
        logger.debug("Fetched todo %s", todo_id)
        return todo

    def create_todo(self, data: TodoCreate) -> TodoEntity:
        title = _normalize_title(data.title)
        created = self._repository.create(TodoCreate(title=title))
        logger.info("Created todo %s", created["id"])
        return created

    def update_todo(self, todo_id: str, changes: TodoChanges) -> TodoEntity:
        """
        Apply a partial update. Existence is checked before the title rule, so an
        unknown id with a blank title reports 404 rather than 400.
        """
        if self._repository.find_by_id(todo_id) is None:
            raise _not_found(todo_id)

        normalized: TodoChanges = {}
        if "title" in changes:
            normalized["title"] = _normalize_title(changes["title"])
        if "completed" in changes:
            normalized["completed"] = changes["completed"]

        updated = self._repository.update(todo_id, normalized)
        if updated is None:
            # Removed between the existence check and the update
            raise _not_found(todo_id)
        logger.info("Updated todo %s fields=%s", todo_id, sorted(normalized))
        return updated

    def delete_todo(self, todo_id: str) -> None:
        if not self._repository.delete(todo_id):
            raise _not_found(todo_id)
        logger.info("Deleted todo %s", todo_id)
