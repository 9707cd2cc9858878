from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from nextscaffold.config import CreateOptions, TemplateVariables
from nextscaffold.errors import ConfigurationError
from nextscaffold.package_manager import PackageManager


def test_create_builds_expected_variables():
    variables = TemplateVariables.create(" demo-app ", "pnpm")
    assert variables.project_name == "demo-app"
    assert variables.package_manager is PackageManager.PNPM


def test_create_defaults_to_npm():
    assert TemplateVariables.create("demo").package_manager is PackageManager.NPM


@pytest.mark.parametrize("name, manager", [("bad name", "npm"), ("", "npm"), ("demo", "pip")])
def test_create_rejects_invalid_input(name, manager):
    with pytest.raises(ConfigurationError):
        TemplateVariables.create(name, manager)


def test_model_validation_enforces_name_pattern():
    with pytest.raises(ValidationError):
        TemplateVariables(project_name="has space", package_manager=PackageManager.NPM)


def test_variables_are_immutable():
    variables = TemplateVariables.create("demo")
    with pytest.raises(ValidationError):
        variables.project_name = "other"


def test_context_exposes_placeholder_names():
    context = TemplateVariables.create("demo-app", "yarn").context()
    assert context == {"projectName": "demo-app", "packageManager": "yarn"}


def test_create_options_project_path(tmp_path: Path):
    options = CreateOptions(variables=TemplateVariables.create("demo-app"), directory=tmp_path)
    assert options.project_path == tmp_path.resolve() / "demo-app"
