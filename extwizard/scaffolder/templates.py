"""Placeholder rendering for scaffold templates.

Templates are plain files containing ``{{name}}`` placeholders.  A
placeholder name is made of word characters only; there is no escaping and
no expression syntax, so any text without ``{{word}}`` passes through
untouched.

Provides :func:`render_template` for string rendering and the
:class:`TemplateRenderer` class that locates template sets (one
sub-directory per feature) under a template root and renders their files.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path("scaffold-templates")

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def render_template(content: str, variables: Mapping[str, str]) -> str:
    """Replace every ``{{name}}`` in *content* with ``variables[name]``.

    Names missing from *variables* (or mapped to an empty value) render as
    the empty string.
    """
    return PLACEHOLDER_PATTERN.sub(lambda match: variables.get(match.group(1)) or "", content)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Locates and renders template sets under a template root.

    Each direct sub-directory of the root is a template set named after the
    feature it scaffolds.  Files inside a set are rendered verbatim apart
    from placeholder substitution; file names are kept as-is.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)

    # -- Template sets -----------------------------------------------------

    def template_set_path(self, feature: str) -> Path:
        """Return the directory that would hold *feature*'s templates."""
        return self.template_dir / feature

    def has_template_set(self, feature: str) -> bool:
        """``True`` if *feature* names an existing template set.

        Only a single path component is accepted, so names such as
        ``"../x"`` or ``"a/b"`` never resolve outside the template root.
        """
        if not feature or Path(feature).name != feature or feature in (".", ".."):
            return False
        return self.template_set_path(feature).is_dir()

    def list_template_sets(self) -> list[str]:
        """Return the sorted names of all template sets under the root."""
        if not self.template_dir.is_dir():
            return []
        return sorted(p.name for p in self.template_dir.iterdir() if p.is_dir())

    def list_templates(self, feature: str, *, recursive: bool = False) -> list[str]:
        """Return sorted template file paths of *feature*, relative to its set.

        Only the set's top level is listed unless *recursive* is true, in
        which case nested files are returned with their sub-directory path.
        """
        set_dir = self.template_set_path(feature)
        if not set_dir.is_dir():
            return []
        candidates = set_dir.rglob("*") if recursive else set_dir.iterdir()
        return sorted(
            p.relative_to(set_dir).as_posix() for p in candidates if p.is_file()
        )

    # -- Rendering ---------------------------------------------------------

    def render_file(
        self, feature: str, relative_path: str, variables: Mapping[str, str]
    ) -> str | bytes:
        """Read one template of *feature* and return its rendered content.

        Files that are not valid UTF-8 (icons, fonts) are not templates:
        their raw bytes are returned unchanged.
        """
        source = self.template_set_path(feature) / relative_path
        raw = source.read_bytes()
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError:
            return raw
        return render_template(content, variables)
