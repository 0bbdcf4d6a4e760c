"""
HTTP routes for the todo API.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response

from mdtodo.db import TodoRepository
from mdtodo.dependencies import get_todo_repository
from mdtodo.schemas import (
    CreateTodoRequest,
    ErrorResponse,
    TodoListResponse,
    TodoOut,
    TodoResponse,
    UpdateTodoRequest,
)
from mdtodo.todo import Todo, TodoValidationError, validate_update

logger = logging.getLogger(__name__)

router = APIRouter()

TODO_NOT_FOUND = "Todo not found"

_error_responses = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/todos", response_model=TodoListResponse)
def list_todos(repo: TodoRepository = Depends(get_todo_repository)):
    todos = repo.list_todos()
    return TodoListResponse.ok([TodoOut.model_validate(todo) for todo in todos])


@router.post("/todos", response_model=TodoResponse, responses=_error_responses)
def create_todo(
    payload: CreateTodoRequest,
    repo: TodoRepository = Depends(get_todo_repository),
):
    try:
        todo = Todo.new_with_validation(payload.title, payload.content)
    except TodoValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    created = repo.create_todo(todo)
    logger.info("Created todo %s", created.id)
    return TodoResponse.ok(TodoOut.model_validate(created))


@router.get("/todos/{todo_id}", response_model=TodoResponse, responses=_error_responses)
def get_todo(todo_id: uuid.UUID, repo: TodoRepository = Depends(get_todo_repository)):
    todo = repo.get_todo(todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    return TodoResponse.ok(TodoOut.model_validate(todo))


@router.put("/todos/{todo_id}", response_model=TodoResponse, responses=_error_responses)
@router.patch("/todos/{todo_id}", response_model=TodoResponse, responses=_error_responses)
def update_todo(
    todo_id: uuid.UUID,
    payload: UpdateTodoRequest,
    repo: TodoRepository = Depends(get_todo_repository),
):
    """
    Partially update a todo. Omitted or null fields keep their stored value.
    """
    try:
        validate_update(payload.title, payload.content)
        updated = repo.update_todo(
            todo_id,
            title=payload.title,
            content=payload.content,
            completed=payload.completed,
        )
    except TodoValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if not updated:
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    logger.info("Updated todo %s", todo_id)
    return TodoResponse.ok(TodoOut.model_validate(updated))


@router.delete(
    "/todos/{todo_id}",
    status_code=204,
    response_class=Response,
    responses=_error_responses,
)
def delete_todo(
    todo_id: uuid.UUID, repo: TodoRepository = Depends(get_todo_repository)
):
    if not repo.delete_todo(todo_id):
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    logger.info("Deleted todo %s", todo_id)
    return Response(status_code=204)
