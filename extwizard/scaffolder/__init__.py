"""extwizard scaffolder -- renders template sets into a project tree.

A template root holds one directory per feature.  Scaffolding a feature
renders each of its files, replacing ``{{placeholder}}`` tokens, and writes
the result under the target directory while logging the run.

Quick usage::

    from extwizard.scaffolder import scaffold_feature

    result = scaffold_feature(
        "auth",
        {"name": "Tab Saver"},
        target_dir="my-extension",
        dry_run=True,
    )
    print(result.report)
"""

from extwizard.scaffolder.engine import (
    ScaffoldEntry,
    ScaffoldError,
    ScaffoldResult,
    Scaffolder,
    TemplateSetNotFound,
    scaffold_feature,
)
from extwizard.scaffolder.templates import TemplateRenderer, render_template

__all__ = [
    "ScaffoldEntry",
    "ScaffoldError",
    "ScaffoldResult",
    "Scaffolder",
    "TemplateRenderer",
    "TemplateSetNotFound",
    "render_template",
    "scaffold_feature",
]
