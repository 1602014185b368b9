"""Todo repository - in-memory data access layer."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from ..ids import generate_todo_id
from ..models.todo import Todo

logger = logging.getLogger(__name__)

SEED_TODOS = (
    Todo(id="first", title="test1", completed=False),
    Todo(id="second", title="test2", completed=True),
)


class TodoRepository:
    """Ordered in-memory todo storage guarded by a lock.

    Records are kept in insertion order. Every method returns copies so the
    stored list can only change through this class.
    """

    def __init__(self, todos: Optional[Iterable[Todo]] = None) -> None:
        self._lock = threading.Lock()
        self._todos: List[Todo] = [todo.model_copy() for todo in todos or ()]

    def get_all(self) -> List[Todo]:
        """Get all todos in insertion order."""
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """Get todo by ID."""
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                return None
            return self._todos[index].model_copy()

    def create(self, title: str, completed: bool = False) -> Todo:
        """Create and append a new todo."""
        with self._lock:
            todo = Todo(id=self._new_id(), title=title, completed=completed)
            self._todos.append(todo)
        logger.info("Created todo id=%s", todo.id)
        return todo.model_copy()

    def update(self, todo_id: str, title: str, completed: bool) -> Optional[Todo]:
        """Overwrite title and completed of an existing todo."""
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                return None
            todo = self._todos[index]
            todo.title = title
            todo.completed = completed
            updated = todo.model_copy()
        logger.info("Updated todo id=%s", todo_id)
        return updated

    def delete(self, todo_id: str) -> bool:
        """Delete a todo."""
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                return False
            del self._todos[index]
        logger.info("Deleted todo id=%s", todo_id)
        return True

    def clear(self) -> None:
        """Clear all stored todos (testing helper)."""
        with self._lock:
            self._todos.clear()

    def reset(self, todos: Iterable[Todo] = SEED_TODOS) -> None:
        """Replace the contents with copies of ``todos``."""
        with self._lock:
            self._todos = [todo.model_copy() for todo in todos]

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def _index_of(self, todo_id: str) -> Optional[int]:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        return None

    def _new_id(self) -> str:
        # Caller holds the lock.
        while True:
            todo_id = generate_todo_id()
            if self._index_of(todo_id) is None:
                return todo_id
