"""Interactive questions asked when values were not supplied on the command line."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .config import DEFAULT_PROJECT_NAME
from .naming import describe_project_name_error
from .package_manager import PackageManager

__all__ = ["PACKAGE_MANAGER_DESCRIPTIONS", "Prompter"]


PACKAGE_MANAGER_DESCRIPTIONS: dict[PackageManager, str] = {
    PackageManager.NPM: "Node Package Manager",
    PackageManager.PNPM: "Fast, disk space efficient",
    PackageManager.YARN: "Fast, reliable, secure",
    PackageManager.BUN: "All-in-one JavaScript runtime",
}


class Prompter:
    """Ask the user for missing values through ``rich`` prompts."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def select_package_manager(
        self, default: PackageManager = PackageManager.NPM
    ) -> PackageManager:
        for manager, description in PACKAGE_MANAGER_DESCRIPTIONS.items():
            self.console.print(f"  [bold]{manager.value:<5}[/bold] [dim]{description}[/dim]")
        answer = Prompt.ask(
            "Which package manager would you like to use?",
            console=self.console,
            choices=[manager.value for manager in PackageManager],
            default=default.value,
        )
        return PackageManager(answer)

    def ask_project_name(self, default: str = DEFAULT_PROJECT_NAME) -> str:
        """Ask until the answer is a valid project name."""

        while True:
            answer = Prompt.ask("What is your project name?", console=self.console, default=default)
            reason = describe_project_name_error(answer)
            if reason is None:
                return answer.strip()
            self.console.print(f"[red]{reason}[/red]")

    def confirm_overwrite(self, project_name: str) -> bool:
        return Confirm.ask(
            f"Directory {project_name} already exists. Overwrite?",
            console=self.console,
            default=False,
        )
