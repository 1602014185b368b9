"""Identifier generation for todo records."""

from __future__ import annotations

import random
import string

ID_LENGTH = 10
ID_ALPHABET = string.ascii_letters


def generate_todo_id(length: int = ID_LENGTH) -> str:
    """Return a random string of ASCII letters.

    Uses the non-cryptographic ``random`` module and performs no collision
    detection; callers that need uniqueness must check for it themselves.
    """
    return "".join(random.choice(ID_ALPHABET) for _ in range(length))
