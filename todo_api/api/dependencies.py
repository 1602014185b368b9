"""API dependencies for todo management."""

from typing import Optional

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyQuery

from ..repositories.todo_repository import TodoRepository
from ..services.todo_service import TodoService

# Enforcement happens in token_auth_middleware, before the body is read.
# Declaring the scheme here publishes it in the OpenAPI document.
token_query = APIKeyQuery(
    name="token",
    scheme_name="queryToken",
    description="Shared API token",
    auto_error=False,
)


def get_token(token: Optional[str] = Security(token_query)) -> Optional[str]:
    """Dependency exposing the request token."""
    return token


def get_todo_repository(request: Request) -> TodoRepository:
    """Dependency for getting the repository owned by the application."""
    return request.app.state.todo_repository


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
