"""Identifier helpers."""

import secrets
import string

_ALPHABET = string.ascii_letters + string.digits


def generate_id(size: int = 16) -> str:
    """Return a random alphanumeric identifier."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(size))
