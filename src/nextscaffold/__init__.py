"""Generate Next.js project skeletons with a feature-based layout.

The package renders an in-memory manifest of project files (or copies an
external template directory), substitutes the project name and package
manager into the well-known files, and optionally installs dependencies.
Everything is usable programmatically as well as through the ``next-scaffold``
command line interface.
"""

from __future__ import annotations

from .config import CreateOptions, TemplateVariables
from .errors import ConfigurationError, InstallError, ScaffoldError
from .manifest import FileEntry, ProjectStructure, get_project_structure
from .materializer import MaterializeStrategy, ProjectMaterializer
from .orchestrator import CreateResult, create_project
from .package_manager import PackageManager, get_install_command, get_run_command
from .substitution import substitute
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "ConfigurationError",
    "CreateOptions",
    "CreateResult",
    "FileEntry",
    "InstallError",
    "MaterializeStrategy",
    "PackageManager",
    "ProjectMaterializer",
    "ProjectStructure",
    "ScaffoldError",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateVariables",
    "create_project",
    "get_install_command",
    "get_project_structure",
    "get_run_command",
    "substitute",
]

__version__ = "0.1.0"
