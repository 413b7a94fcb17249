from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from ..controllers import TodoController
from ..schemas import ErrorResponse, TodoCreate, TodoEnvelope, TodoListEnvelope, TodoUpdate

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)

_BAD_REQUEST = {"model": ErrorResponse, "description": "Validation error"}
_NOT_FOUND = {"model": ErrorResponse, "description": "Todo not found"}


# PUBLIC_INTERFACE
def get_controller(request: Request) -> TodoController:
    """
    Dependency returning the controller wired by create_app for this application.
    """
    return request.app.state.todo_controller


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TodoListEnvelope,
    summary="List Todos",
    description="List all Todo items in creation order.",
    responses={200: {"description": "List retrieved successfully"}},
)
def list_todos(controller: TodoController = Depends(get_controller)) -> TodoListEnvelope:
    return controller.list_todos()


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoEnvelope,
    summary="Get Todo",
    description="Get a single Todo item by its UUID.",
    responses={
        200: {"description": "Todo found"},
        400: _BAD_REQUEST,
        404: _NOT_FOUND,
    },
)
def get_todo(todo_id: UUID, controller: TodoController = Depends(get_controller)) -> TodoEnvelope:
    return controller.get_todo(todo_id)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        400: _BAD_REQUEST,
    },
)
def create_todo(payload: TodoCreate, controller: TodoController = Depends(get_controller)) -> TodoEnvelope:
    """
    Create a new Todo. The title is trimmed; a blank title is rejected with 400.
    """
    return controller.create_todo(payload)


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    response_model=TodoEnvelope,
    summary="Update Todo",
    description="Partially update the title and/or completion flag of a Todo item.",
    responses={
        200: {"description": "Todo updated"},
        400: _BAD_REQUEST,
        404: _NOT_FOUND,
    },
)
def patch_todo(
    todo_id: UUID,
    payload: TodoUpdate,
    controller: TodoController = Depends(get_controller),
) -> TodoEnvelope:
    """
    Partial update of a Todo item. An empty body only refreshes updatedAt.
    """
    return controller.update_todo(todo_id, payload)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Todo",
    description="Delete a Todo item by its UUID.",
    responses={
        204: {"description": "Todo deleted"},
        400: _BAD_REQUEST,
        404: _NOT_FOUND,
    },
)
def delete_todo(todo_id: UUID, controller: TodoController = Depends(get_controller)) -> Response:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    return controller.delete_todo(todo_id)
