from .todo_repository import SEED_TODOS, TodoRepository

__all__ = ["SEED_TODOS", "TodoRepository"]
