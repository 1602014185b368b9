from .todo import (
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    Todo,
    TodoCreate,
    TodoResponse,
    TodosResponse,
    TodoUpdate,
)

__all__ = [
    "TITLE_MAX_LENGTH",
    "TITLE_MIN_LENGTH",
    "Todo",
    "TodoCreate",
    "TodoResponse",
    "TodosResponse",
    "TodoUpdate",
]
