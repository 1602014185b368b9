"""HTTP layer of the todo API."""

from .routes import router

__all__ = ["router"]
