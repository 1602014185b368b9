"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 100


class TodoBase(BaseModel):
    """Fields a client may set on a todo."""

    title: str = Field(
        ...,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="Todo title",
        examples=["Call the landlord"],
    )
    completed: StrictBool = Field(False, description="Whether the todo is done", examples=[False])


class TodoCreate(TodoBase):
    """Request body for creating a todo."""


class TodoUpdate(TodoBase):
    """Request body for replacing the mutable fields of a todo."""


class Todo(BaseModel):
    """A stored todo record."""

    id: str = Field(..., description="Todo ID", examples=["first"])
    title: str = Field(..., description="Todo title", examples=["Call the landlord"])
    completed: bool = Field(False, description="Whether the todo is done", examples=[False])

    model_config = ConfigDict(from_attributes=True)


class TodoResponse(BaseModel):
    todo: Todo = Field(..., description="Todo details")


class TodosResponse(BaseModel):
    todos: List[Todo] = Field(default_factory=list, description="All todos")
