"""Placeholder substitution over the well-known files of a generated project."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import TemplateVariables
from .template import TemplateRenderer, find_placeholders

__all__ = ["SUBSTITUTED_FILES", "substitute"]

LOGGER = logging.getLogger(__name__)

SUBSTITUTED_FILES: tuple[str, ...] = ("package.json", "README.md")


def substitute(
    target_dir: str | Path,
    variables: TemplateVariables,
    *,
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Replace ``{{projectName}}`` and ``{{packageManager}}`` in place.

    Only :data:`SUBSTITUTED_FILES` are touched. Files that do not exist are
    skipped; the manifest already embeds final values, so the pass matters
    only after a template directory was copied. Returns the rewritten paths.
    """

    renderer = renderer or TemplateRenderer()
    context = variables.context()
    target_path = Path(target_dir)
    rewritten: list[Path] = []

    for relative in SUBSTITUTED_FILES:
        path = target_path / relative
        if not path.is_file():
            LOGGER.debug("skipping substitution for missing %s", relative)
            continue

        rendered = renderer.render_file(path, context, target=path)
        rewritten.append(path)

        leftovers = find_placeholders(rendered)
        if leftovers:
            LOGGER.warning(
                "%s still contains placeholders after substitution: %s",
                relative,
                ", ".join(leftovers),
            )

    return rewritten
