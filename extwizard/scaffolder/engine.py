"""Feature scaffolding.

Materialises a named template set into a project directory: every file of
the set is rendered through :func:`render_template` and written under the
target root, and the run is appended to a markdown activity log.  In
dry-run mode nothing is written and the report is handed back instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from extwizard.config import DEFAULT_REPORT_FILE
from extwizard.utils import ensure_dir

from .templates import TemplateRenderer


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class TemplateSetNotFound(ScaffoldError):
    """Raised when no template set exists for the requested feature."""

    def __init__(self, feature: str, path: str | Path) -> None:
        self.feature = feature
        self.path = Path(path)
        super().__init__(f"Template directory not found: {self.path}")


@dataclass(frozen=True)
class ScaffoldEntry:
    """One processed template file."""

    source: Path
    destination: Path
    written: bool

    def report_line(self) -> str:
        if self.written:
            return f"- Created: {self.destination.as_posix()}"
        return f"- [DRY RUN] Would create: {self.destination.as_posix()}"


@dataclass
class ScaffoldResult:
    """Outcome of a single :meth:`Scaffolder.scaffold` call."""

    feature: str
    dry_run: bool
    entries: list[ScaffoldEntry] = field(default_factory=list)
    report_file: Optional[Path] = None

    @property
    def files(self) -> list[Path]:
        """Destination paths, in processing order."""
        return [entry.destination for entry in self.entries]

    @property
    def report(self) -> str:
        """Markdown section describing this run."""
        lines = [f"# Scaffold Report for feature: {self.feature}"]
        lines.extend(entry.report_line() for entry in self.entries)
        return "\n".join(lines) + "\n"


class Scaffolder:
    """Copies and renders template sets into a project tree.

    Destination files are overwritten without warning; no conflict
    detection is performed.  Files written before a failure are left in
    place.
    """

    def __init__(self, templates_dir: str | Path | None = None) -> None:
        self.renderer = TemplateRenderer(templates_dir)

    def scaffold(
        self,
        feature: str,
        variables: Mapping[str, str],
        *,
        target_dir: str | Path = ".",
        dry_run: bool = False,
        report_file: str | Path = DEFAULT_REPORT_FILE,
        recursive: bool = False,
    ) -> ScaffoldResult:
        """Render every file of *feature*'s template set under *target_dir*.

        Args:
            feature: Template set name (a sub-directory of the template root).
            variables: Placeholder values used for every file.
            target_dir: Project root the files are written under.
            dry_run: Report what would be written without touching the
                filesystem.
            report_file: Markdown log the run report is appended to.
                Ignored in dry-run mode.
            recursive: Include files in nested directories of the set,
                mirroring their relative layout under *target_dir*.

        Returns:
            A :class:`ScaffoldResult` listing every processed file.

        Raises:
            TemplateSetNotFound: If *feature* has no template set.
            OSError: If a template cannot be read or a file cannot be
                written.  Nothing already written is rolled back.
        """
        if not self.renderer.has_template_set(feature):
            raise TemplateSetNotFound(feature, self.renderer.template_set_path(feature))

        target_root = Path(target_dir)
        set_dir = self.renderer.template_set_path(feature)
        result = ScaffoldResult(feature=feature, dry_run=dry_run)

        for relative in self.renderer.list_templates(feature, recursive=recursive):
            rendered = self.renderer.render_file(feature, relative, variables)
            destination = target_root / relative
            if not dry_run:
                ensure_dir(destination.parent)
                if isinstance(rendered, bytes):
                    destination.write_bytes(rendered)
                else:
                    with destination.open("w", encoding="utf-8", newline="") as fh:
                        fh.write(rendered)
            result.entries.append(
                ScaffoldEntry(source=set_dir / relative, destination=destination, written=not dry_run)
            )

        if not dry_run:
            log_path = Path(report_file)
            ensure_dir(log_path.parent)
            with log_path.open("a", encoding="utf-8") as fh:
                fh.write(result.report + "\n")
            result.report_file = log_path

        return result


def scaffold_feature(
    feature: str,
    variables: Mapping[str, str],
    *,
    target_dir: str | Path = ".",
    dry_run: bool = False,
    report_file: str | Path = DEFAULT_REPORT_FILE,
    templates_dir: str | Path | None = None,
    recursive: bool = False,
) -> ScaffoldResult:
    """Convenience wrapper around :meth:`Scaffolder.scaffold`."""
    return Scaffolder(templates_dir).scaffold(
        feature,
        variables,
        target_dir=target_dir,
        dry_run=dry_run,
        report_file=report_file,
        recursive=recursive,
    )
