"""Custom exception types used by the scaffold generator."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for errors raised by :mod:`nextscaffold`."""


class ConfigurationError(ScaffoldError, ValueError):
    """Raised when user supplied settings cannot be turned into variables."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InstallError(ScaffoldError):
    """Raised when the dependency installation command fails."""

    def __init__(self, command: str, message: str, *, stderr: str = "") -> None:
        super().__init__(f"'{command}' failed: {message}")
        self.command = command
        self.stderr = stderr
