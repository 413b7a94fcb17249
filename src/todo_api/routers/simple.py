"""
Un-enveloped /todos routes. They share the store behind /api/todos and return bare
Todo objects instead of {"data": ...}.
"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ..controllers import TodoController
from ..schemas import ErrorResponse, TodoCreate, TodoOut
from .todos import get_controller

router = APIRouter(
    prefix="/todos",
    tags=["todos-simple"],
)


# PUBLIC_INTERFACE
@router.get("", response_model=List[TodoOut], summary="List Todos (plain)")
def list_todos(controller: TodoController = Depends(get_controller)) -> List[TodoOut]:
    return controller.list_plain()


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo (plain)",
    responses={400: {"model": ErrorResponse, "description": "Validation error"}},
)
def create_todo(payload: TodoCreate, controller: TodoController = Depends(get_controller)) -> TodoOut:
    return controller.create_plain(payload)
