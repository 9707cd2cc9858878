from __future__ import annotations

from pathlib import Path

import pytest

from nextscaffold.template import TemplateRenderer, TemplateRenderingError, find_placeholders


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_replaces_every_occurrence(renderer: TemplateRenderer):
    template = "{{projectName}} uses {{packageManager}}; {{projectName}} again"
    rendered = renderer.render_string(template, {"projectName": "demo", "packageManager": "bun"})
    assert rendered == "demo uses bun; demo again"


def test_render_string_is_literal(renderer: TemplateRenderer):
    # No expression language: spaced tokens and filters are left alone.
    template = "{{ projectName }} {{projectName|upper}}"
    assert renderer.render_string(template, {"projectName": "demo"}) == template


def test_render_string_keeps_unknown_tokens(renderer: TemplateRenderer):
    assert renderer.render_string("Hello {{missing}}", {}) == "Hello {{missing}}"


def test_strict_renderer_rejects_leftovers():
    with pytest.raises(TemplateRenderingError, match="missing"):
        TemplateRenderer(strict=True).render_string("{{missing}}", {})


def test_strict_renderer_ignores_jsx_objects():
    template = "<div style={{ width: 10 }} />"
    assert TemplateRenderer(strict=True).render_string(template, {}) == template


def test_find_placeholders_reports_unique_names_in_order():
    text = "{{b}} {{ a }} {{b}} {{not valid}}"
    assert find_placeholders(text) == ["b", "a"]


def test_render_file_in_place(tmp_path: Path, renderer: TemplateRenderer):
    path = tmp_path / "README.md"
    path.write_text("# {{projectName}}", encoding="utf-8")
    renderer.render_file(path, {"projectName": "demo"}, target=path)
    assert path.read_text(encoding="utf-8") == "# demo"


def test_render_file_missing_raises(tmp_path: Path, renderer: TemplateRenderer):
    with pytest.raises(FileNotFoundError):
        renderer.render_file(tmp_path / "absent.txt", {})
