from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rich.console import Console  # noqa: E402

from nextscaffold.config import TemplateVariables  # noqa: E402
from nextscaffold.package_manager import PackageManager  # noqa: E402


class FakePrompter:
    """Scripted stand-in for :class:`nextscaffold.prompts.Prompter`."""

    def __init__(
        self,
        *,
        package_manager: PackageManager = PackageManager.NPM,
        project_names: Iterable[str] = ("my-nextjs-app",),
        overwrite: bool = False,
    ) -> None:
        self.package_manager = package_manager
        self.project_names = iter(project_names)
        self.overwrite = overwrite
        self.calls: list[str] = []

    def select_package_manager(self, default: PackageManager = PackageManager.NPM) -> PackageManager:
        self.calls.append("package_manager")
        return self.package_manager

    def ask_project_name(self, default: str = "my-nextjs-app") -> str:
        self.calls.append("project_name")
        return next(self.project_names)

    def confirm_overwrite(self, project_name: str) -> bool:
        self.calls.append("overwrite")
        return self.overwrite


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), width=120, force_terminal=False)


@pytest.fixture()
def variables() -> TemplateVariables:
    return TemplateVariables.create("demo-app", "pnpm")


@pytest.fixture()
def make_prompter():
    return FakePrompter
