"""Project name validation helpers."""

from __future__ import annotations

import re

from .errors import ConfigurationError

__all__ = [
    "PROJECT_NAME_PATTERN",
    "describe_project_name_error",
    "is_valid_project_name",
    "validate_project_name",
]


PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9-]+$")


def describe_project_name_error(name: str) -> str | None:
    """Return a human readable reason why ``name`` is rejected, or ``None``.

    The messages are shown inline by the interactive prompt, so they are
    phrased for end users rather than for logs.
    """

    candidate = name.strip()
    if not candidate:
        return "Project name cannot be empty"
    if not PROJECT_NAME_PATTERN.match(candidate):
        return "Project name can only contain letters, numbers, and hyphens"
    return None


def is_valid_project_name(name: str) -> bool:
    return describe_project_name_error(name) is None


def validate_project_name(name: str) -> str:
    """Return the stripped ``name`` or raise :class:`ConfigurationError`."""

    reason = describe_project_name_error(name)
    if reason is not None:
        raise ConfigurationError(f"invalid project name '{name}': {reason}")
    return name.strip()
