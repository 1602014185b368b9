"""Todo service - business logic layer."""

from __future__ import annotations

from typing import List, Optional

from ..models.todo import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH, Todo, TodoCreate, TodoUpdate
from ..repositories.todo_repository import TodoRepository


def validate_title(title: str) -> None:
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        raise ValueError(
            f"Todo title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
        )


class TodoService:
    """Service for todo business logic."""

    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self.repository = repository or TodoRepository()

    def get_todos(self) -> List[Todo]:
        """Get all todo items."""
        return self.repository.get_all()

    def get_todo_by_id(self, todo_id: str) -> Optional[Todo]:
        """Get a specific todo by ID."""
        return self.repository.get_by_id(todo_id)

    def create_todo(self, todo_data: TodoCreate) -> Todo:
        """Create a new todo item."""
        validate_title(todo_data.title)
        return self.repository.create(todo_data.title, todo_data.completed)

    def update_todo(self, todo_id: str, todo_data: TodoUpdate) -> Optional[Todo]:
        """Update an existing todo item."""
        if self.repository.get_by_id(todo_id) is None:
            return None
        validate_title(todo_data.title)
        return self.repository.update(todo_id, todo_data.title, todo_data.completed)

    def delete_todo(self, todo_id: str) -> bool:
        """Delete a todo item."""
        return self.repository.delete(todo_id)
