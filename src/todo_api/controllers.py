from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import Response, status

from .models import TodoChanges, TodoEntity
from .schemas import TodoCreate, TodoEnvelope, TodoListEnvelope, TodoOut, TodoUpdate
from .services import TodoService


def _to_out(entity: TodoEntity) -> TodoOut:
    return TodoOut(**entity)  # type: ignore[arg-type]


def _changes_from(payload: TodoUpdate) -> TodoChanges:
    """Keep only the fields the client actually sent."""
    changes: TodoChanges = {}
    if "title" in payload.model_fields_set and payload.title is not None:
        changes["title"] = payload.title
    if "completed" in payload.model_fields_set and payload.completed is not None:
        changes["completed"] = payload.completed
    return changes


# PUBLIC_INTERFACE
class TodoController:
    """
    Adapts parsed HTTP input to TodoService calls and wraps results in response envelopes.

    Domain errors raised by the service are not caught here; the exception handlers
    registered on the app turn them into error responses.
    """

    def __init__(self, service: TodoService) -> None:
        self._service = service

    def list_todos(self) -> TodoListEnvelope:
        return TodoListEnvelope(data=[_to_out(t) for t in self._service.get_all_todos()])

    def get_todo(self, todo_id: UUID) -> TodoEnvelope:
        return TodoEnvelope(data=_to_out(self._service.get_todo_by_id(str(todo_id))))

    def create_todo(self, payload: TodoCreate) -> TodoEnvelope:
        return TodoEnvelope(data=_to_out(self._service.create_todo(payload)))

    def update_todo(self, todo_id: UUID, payload: TodoUpdate) -> TodoEnvelope:
        updated = self._service.update_todo(str(todo_id), _changes_from(payload))
        return TodoEnvelope(data=_to_out(updated))

    def delete_todo(self, todo_id: UUID) -> Response:
        self._service.delete_todo(str(todo_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def list_plain(self) -> List[TodoOut]:
        return [_to_out(t) for t in self._service.get_all_todos()]

    def create_plain(self, payload: TodoCreate) -> TodoOut:
        return _to_out(self._service.create_todo(payload))
