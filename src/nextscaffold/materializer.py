"""Write the generated project tree to disk."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from .config import TemplateVariables
from .manifest import ASSETS_DIR, GITKEEP, ProjectStructure, get_project_structure

__all__ = [
    "EXCLUDED_NAMES",
    "MaterializeStrategy",
    "ProjectMaterializer",
    "is_excluded",
    "select_strategy",
]

LOGGER = logging.getLogger(__name__)

EXCLUDED_NAMES = frozenset({"node_modules", ".git", "dist"})


class MaterializeStrategy(str, Enum):
    """How the project tree is produced."""

    COPY_TEMPLATE = "copy-template"
    MANIFEST = "manifest"


def select_strategy(template_dir: str | Path | None) -> MaterializeStrategy:
    if template_dir is not None and Path(template_dir).is_dir():
        return MaterializeStrategy.COPY_TEMPLATE
    return MaterializeStrategy.MANIFEST


def is_excluded(relative: Path) -> bool:
    """Return ``True`` when any component of ``relative`` is an excluded name."""

    return any(part in EXCLUDED_NAMES for part in relative.parts)


def _ignore_excluded(directory: str, names: list[str]) -> set[str]:
    return {name for name in names if is_excluded(Path(name))}


@dataclass(slots=True)
class ProjectMaterializer:
    """Create a project tree from a template directory or the manifest."""

    manifest_provider: Callable[[TemplateVariables], ProjectStructure]

    def __init__(
        self,
        manifest_provider: Callable[[TemplateVariables], ProjectStructure] | None = None,
    ) -> None:
        self.manifest_provider = manifest_provider or get_project_structure

    def materialize(
        self,
        target_dir: str | Path,
        variables: TemplateVariables,
        *,
        template_dir: str | Path | None = None,
    ) -> MaterializeStrategy:
        """Populate ``target_dir`` and return the strategy that was used.

        ``target_dir`` is created when missing and reused as-is otherwise;
        removing a previous tree is the caller's job. Filesystem errors
        propagate and leave whatever was already written in place.
        """

        target_path = Path(target_dir).expanduser()
        target_path.mkdir(parents=True, exist_ok=True)

        template_path = Path(template_dir) if template_dir is not None else None
        strategy = select_strategy(template_path)
        LOGGER.info("materializing %s using %s", target_path, strategy.value)

        if template_path is not None and strategy is MaterializeStrategy.COPY_TEMPLATE:
            self._copy_template(template_path, target_path)
        else:
            self._write_manifest(self.manifest_provider(variables), target_path)
        return strategy

    def _copy_template(self, template_dir: Path, target_path: Path) -> None:
        # Symlinks are followed, so linked files and directories land as copies.
        shutil.copytree(
            template_dir,
            target_path,
            ignore=_ignore_excluded,
            dirs_exist_ok=True,
        )
        LOGGER.debug("copied template %s", template_dir)

    def _write_manifest(self, structure: ProjectStructure, target_path: Path) -> None:
        for directory in structure.empty_dirs:
            dir_path = target_path / directory
            dir_path.mkdir(parents=True, exist_ok=True)
            (dir_path / GITKEEP).write_text("", encoding="utf-8")

        (target_path / ASSETS_DIR).mkdir(parents=True, exist_ok=True)

        for entry in structure:
            destination = target_path / entry.path
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(entry.content, encoding="utf-8")
            LOGGER.debug("wrote %s", entry.path)
