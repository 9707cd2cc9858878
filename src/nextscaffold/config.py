"""Configuration objects shared by the materializer, orchestrator and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError
from .naming import PROJECT_NAME_PATTERN, validate_project_name
from .package_manager import PackageManager, parse_package_manager

__all__ = [
    "BACKEND_URL_ENV",
    "COOKIES_HEADER_ENV",
    "CreateOptions",
    "DEFAULT_BACKEND_URL",
    "DEFAULT_COOKIES_HEADER",
    "DEFAULT_PACKAGE_MANAGER",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_TEMPLATE_DIR",
    "PACKAGE_MANAGER_PLACEHOLDER",
    "PROJECT_NAME_PLACEHOLDER",
    "TemplateVariables",
]


DEFAULT_PROJECT_NAME = "my-nextjs-app"
DEFAULT_PACKAGE_MANAGER = PackageManager.NPM

# Read by the generated project at its own runtime, never by the generator.
BACKEND_URL_ENV = "NEXT_PUBLIC_BACKEND_URL"
DEFAULT_BACKEND_URL = "http://localhost:3001"
COOKIES_HEADER_ENV = "NEXT_PUBLIC_COOKIES_HEADER"
DEFAULT_COOKIES_HEADER = "my-token-header"

PROJECT_NAME_PLACEHOLDER = "projectName"
PACKAGE_MANAGER_PLACEHOLDER = "packageManager"

# Optional directory of template files shipped next to the package. When it
# is missing the in-memory manifest is used instead.
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


class TemplateVariables(BaseModel):
    """Values substituted into the generated project.

    Attributes
    ----------
    project_name:
        Directory name and ``package.json`` name of the generated project.
        Restricted to letters, digits and hyphens.
    package_manager:
        Installer the generated project is configured for. Drives the install
        and run commands embedded in the README and printed after creation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(
        ...,
        min_length=1,
        pattern=PROJECT_NAME_PATTERN.pattern,
        description="Name of the generated project.",
    )
    package_manager: PackageManager = Field(
        default=DEFAULT_PACKAGE_MANAGER,
        description="Package manager used by the generated project.",
    )

    @classmethod
    def create(
        cls,
        project_name: str,
        package_manager: str | PackageManager = DEFAULT_PACKAGE_MANAGER,
    ) -> "TemplateVariables":
        """Validate raw CLI input and build the variables.

        Raises :class:`ConfigurationError` instead of pydantic's
        ``ValidationError`` so callers only deal with one error type.
        """

        name = validate_project_name(project_name)
        manager = parse_package_manager(package_manager)
        try:
            return cls(project_name=name, package_manager=manager)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc

    def context(self) -> Mapping[str, str]:
        """Return the placeholder mapping used by the substitution pass."""

        return {
            PROJECT_NAME_PLACEHOLDER: self.project_name,
            PACKAGE_MANAGER_PLACEHOLDER: self.package_manager.value,
        }


@dataclass(slots=True)
class CreateOptions:
    """Everything the orchestrator needs for one invocation."""

    variables: TemplateVariables
    directory: Path = field(default_factory=Path.cwd)
    skip_prompts: bool = False
    auto_install: bool = False
    template_dir: Path | None = DEFAULT_TEMPLATE_DIR

    @property
    def project_path(self) -> Path:
        return Path(self.directory).expanduser().resolve() / self.variables.project_name
