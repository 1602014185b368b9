from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_TOKEN = "todo-api-token"
API_PREFIX = "/api/v1"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    token: str = DEFAULT_TOKEN
    seed_todos: bool = True
    log_level: str = "INFO"
    api_prefix: str = API_PREFIX


@lru_cache
def get_settings() -> Settings:
    token = os.getenv("TODO_API_TOKEN") or DEFAULT_TOKEN
    seed_todos = _parse_bool(os.getenv("TODO_API_SEED", "true"))
    log_level = os.getenv("TODO_API_LOG_LEVEL", "INFO").upper()

    return Settings(
        token=token,
        seed_todos=seed_todos,
        log_level=log_level,
    )
