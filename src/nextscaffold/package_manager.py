"""Package manager identifiers and the commands derived from them."""

from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path
from typing import Mapping

from .errors import ConfigurationError

__all__ = [
    "LOCK_FILES",
    "PackageManager",
    "detect_package_manager",
    "get_install_command",
    "get_run_command",
    "parse_package_manager",
]

LOGGER = logging.getLogger(__name__)


class PackageManager(str, Enum):
    """Dependency installers a generated project can be configured for."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value


# Both tables must cover every PackageManager member.
_INSTALL_COMMANDS: Mapping[PackageManager, str] = {
    PackageManager.NPM: "npm install",
    PackageManager.PNPM: "pnpm install",
    PackageManager.YARN: "yarn install",
    PackageManager.BUN: "bun install",
}

_RUN_PREFIXES: Mapping[PackageManager, str] = {
    PackageManager.NPM: "npm run",
    PackageManager.PNPM: "pnpm",
    PackageManager.YARN: "yarn",
    PackageManager.BUN: "bun run",
}

LOCK_FILES: tuple[tuple[str, PackageManager], ...] = (
    ("bun.lockb", PackageManager.BUN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
)

_PROBED_BINARIES = (PackageManager.BUN, PackageManager.PNPM, PackageManager.YARN)


def parse_package_manager(value: str | PackageManager) -> PackageManager:
    """Convert user input into a :class:`PackageManager`.

    Raises
    ------
    ConfigurationError
        If ``value`` does not name a supported package manager.
    """

    if isinstance(value, PackageManager):
        return value
    try:
        return PackageManager(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in PackageManager)
        raise ConfigurationError(
            f"unsupported package manager '{value}'. Expected one of: {choices}"
        ) from exc


def get_install_command(package_manager: PackageManager) -> str:
    return _INSTALL_COMMANDS[package_manager]


def get_run_command(package_manager: PackageManager, script: str) -> str:
    """Return the command that runs ``script`` from ``package.json``."""

    return f"{_RUN_PREFIXES[package_manager]} {script}"


def detect_package_manager(cwd: str | Path | None = None) -> PackageManager:
    """Guess the preferred package manager for the current environment.

    Lock files in ``cwd`` win over installed binaries; ``npm`` is the
    fallback because it ships with Node.js.
    """

    directory = Path(cwd) if cwd is not None else Path.cwd()
    for filename, manager in LOCK_FILES:
        if (directory / filename).exists():
            LOGGER.debug("detected %s from %s", manager, filename)
            return manager

    for manager in _PROBED_BINARIES:
        if shutil.which(manager.value):
            LOGGER.debug("detected %s on PATH", manager)
            return manager

    return PackageManager.NPM
