"""In-memory Todo CRUD API built on FastAPI."""

__version__ = "1.0.0"
