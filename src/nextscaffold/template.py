"""Literal ``{{name}}`` placeholder substitution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "find_placeholders",
    "placeholder_token",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised by a strict renderer when placeholders survive rendering."""


def placeholder_token(name: str) -> str:
    """Return the exact token replaced for ``name``, e.g. ``{{projectName}}``."""

    return "{{" + name + "}}"


def find_placeholders(text: str) -> list[str]:
    """Return the names of placeholder-looking tokens in ``text``.

    Names are reported once each, in order of first appearance. Tokens with
    inner whitespace (``{{ name }}``) are reported too even though the renderer
    only replaces the compact form.
    """

    seen: dict[str, None] = {}
    for match in _PLACEHOLDER_PATTERN.finditer(text):
        seen.setdefault(match.group("name"), None)
    return list(seen)


@dataclass(slots=True)
class TemplateRenderer:
    """Replace ``{{name}}`` tokens with values from a context mapping.

    There is no expression language: every token is replaced verbatim by
    ``str(value)`` and unknown tokens are left untouched. A ``strict`` renderer
    raises :class:`TemplateRenderingError` when any token remains afterwards.
    """

    strict: bool = False

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        rendered = template
        for name, value in context.items():
            rendered = rendered.replace(placeholder_token(name), str(value))

        if self.strict:
            leftovers = find_placeholders(rendered)
            if leftovers:
                raise TemplateRenderingError(
                    f"unresolved placeholders: {', '.join(leftovers)}"
                )
        return rendered

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        target: str | Path | None = None,
        encoding: str = "utf-8",
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``.

        ``target`` may be ``template_path`` itself to rewrite a file in place.
        """

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_text(encoding=encoding)
        rendered = self.render_string(text, context)

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(rendered, encoding=encoding)

        return rendered
