from __future__ import annotations

from typing import Optional

from .settings import get_settings


def is_valid_token(token: Optional[str], expected: Optional[str] = None) -> bool:
    if expected is None:
        expected = get_settings().token
    if not token:
        return False
    return token == expected


def is_invalid_token(token: Optional[str], expected: Optional[str] = None) -> bool:
    return not is_valid_token(token, expected)
