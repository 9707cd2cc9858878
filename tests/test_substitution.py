from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from nextscaffold.config import TemplateVariables
from nextscaffold.materializer import ProjectMaterializer
from nextscaffold.substitution import substitute


def test_substitutes_both_tokens_in_both_files(tmp_path: Path, variables: TemplateVariables):
    (tmp_path / "package.json").write_text(
        '{"name": "{{projectName}}", "description": "{{projectName}} via {{packageManager}}"}',
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text(
        "# {{projectName}}\n\nRun `{{packageManager}} install`.\n", encoding="utf-8"
    )

    rewritten = substitute(tmp_path, variables)

    assert rewritten == [tmp_path / "package.json", tmp_path / "README.md"]
    package = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert package == {"name": "demo-app", "description": "demo-app via pnpm"}
    readme = (tmp_path / "README.md").read_text(encoding="utf-8")
    assert readme == "# demo-app\n\nRun `pnpm install`.\n"


def test_other_files_are_untouched(tmp_path: Path, variables: TemplateVariables):
    other = tmp_path / "src" / "page.tsx"
    other.parent.mkdir()
    other.write_text("{{projectName}}", encoding="utf-8")
    substitute(tmp_path, variables)
    assert other.read_text(encoding="utf-8") == "{{projectName}}"


def test_missing_files_are_skipped(tmp_path: Path, variables: TemplateVariables):
    (tmp_path / "README.md").write_text("# {{projectName}}", encoding="utf-8")
    assert substitute(tmp_path, variables) == [tmp_path / "README.md"]
    assert not (tmp_path / "package.json").exists()


def test_substitution_is_idempotent(tmp_path: Path, variables: TemplateVariables):
    (tmp_path / "README.md").write_text("# {{projectName}}", encoding="utf-8")
    substitute(tmp_path, variables)
    substitute(tmp_path, variables)
    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "# demo-app"


def test_leftover_placeholders_are_logged(
    tmp_path: Path, variables: TemplateVariables, caplog: pytest.LogCaptureFixture
):
    (tmp_path / "README.md").write_text("# {{projectName}} {{author}}", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="nextscaffold.substitution"):
        substitute(tmp_path, variables)
    assert "author" in caplog.text


def test_manifest_round_trip(tmp_path: Path, variables: TemplateVariables):
    ProjectMaterializer().materialize(tmp_path, variables)
    substitute(tmp_path, variables)

    package = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "demo-app"
    for path in tmp_path.rglob("*"):
        if path.is_file():
            text = path.read_text(encoding="utf-8")
            assert "{{projectName}}" not in text
            assert "{{packageManager}}" not in text
