"""Helpers for reading environment variables."""

from __future__ import annotations

import os


def get_env_var(name: str) -> str | None:
    """Return the variable's value with whitespace trimmed, or None if unset or blank."""
    value = os.environ.get(name, "").strip()
    return value or None


def get_boolean_env_var(name: str) -> bool:
    """Return True if the variable is set to any value, including the empty string."""
    return name in os.environ