"""API routes for todo management."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from .dependencies import get_todo_service, get_token
from ..models.todo import TodoCreate, TodoResponse, TodosResponse, TodoUpdate
from ..services.todo_service import TodoService

router = APIRouter(tags=["todos"], dependencies=[Depends(get_token)])


@router.get(
    "/todos",
    response_model=TodosResponse,
    operation_id="getTodos",
    summary="List todos",
)
def get_todos(service: TodoService = Depends(get_todo_service)) -> TodosResponse:
    """Get all todo items in creation order."""
    return TodosResponse(todos=service.get_todos())


@router.get(
    "/todos/{todo_id}",
    response_model=TodoResponse,
    operation_id="getTodo",
    summary="Get a todo",
)
def get_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Get a specific todo item by ID."""
    todo = service.get_todo_by_id(todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return TodoResponse(todo=todo)


@router.post(
    "/todos",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createTodo",
    summary="Create a todo",
)
def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Create a new todo item."""
    try:
        todo = service.create_todo(todo_data)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return TodoResponse(todo=todo)


@router.put(
    "/todos/{todo_id}",
    response_model=TodoResponse,
    operation_id="updateTodo",
    summary="Update a todo",
)
def update_todo(
    todo_id: str,
    todo_data: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Update an existing todo item."""
    try:
        todo = service.update_todo(todo_id, todo_data)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return TodoResponse(todo=todo)


@router.delete(
    "/todos/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    operation_id="deleteTodo",
    summary="Delete a todo",
)
def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Delete a todo item."""
    success = service.delete_todo(todo_id)
    if not success:
        raise HTTPException(status_code=404, detail="Todo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
