"""extwizard runtime settings.

Typed settings for the scaffolding side of the wizard. Values use a
Pydantic v2 model so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_TEMPLATES_DIR = Path("scaffold-templates")
DEFAULT_REPORT_FILE = Path("docs") / "scaffold-report.md"
DEFAULT_SNAPSHOT_FILE = Path(".extwizard") / "config.json"


class WizardSettings(BaseModel):
    """Where the wizard reads templates from and writes its artefacts to.

    All paths are relative to the current working directory unless given
    as absolute paths.  Instances are typically created once by the CLI
    entry point and then passed to the scaffolder.
    """

    templates_dir: Path = Field(
        default=DEFAULT_TEMPLATES_DIR,
        description="Root directory holding one sub-directory per template set",
    )
    report_file: Path = Field(
        default=DEFAULT_REPORT_FILE,
        description="Append-only markdown log of scaffold runs",
    )
    snapshot_file: Path = Field(
        default=DEFAULT_SNAPSHOT_FILE,
        description="Persisted configuration snapshot written by the front end",
    )
    target_dir: Path = Field(
        default=Path("."),
        description="Project root that scaffolded files are written under",
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file. Defaults to ``settings.json`` next to
                the snapshot file.

        Returns:
            The path where the file was written.
        """
        target = path or (self.snapshot_file.parent / "settings.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "WizardSettings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "WizardSettings":
        """Build ``WizardSettings`` from environment variables.

        Recognised variables (all optional):
            EXTWIZARD_TEMPLATES_DIR, EXTWIZARD_REPORT_FILE,
            EXTWIZARD_SNAPSHOT_FILE, EXTWIZARD_TARGET_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXTWIZARD_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["EXTWIZARD_TEMPLATES_DIR"])
        if os.environ.get("EXTWIZARD_REPORT_FILE"):
            kwargs["report_file"] = Path(os.environ["EXTWIZARD_REPORT_FILE"])
        if os.environ.get("EXTWIZARD_SNAPSHOT_FILE"):
            kwargs["snapshot_file"] = Path(os.environ["EXTWIZARD_SNAPSHOT_FILE"])
        if os.environ.get("EXTWIZARD_TARGET_DIR"):
            kwargs["target_dir"] = Path(os.environ["EXTWIZARD_TARGET_DIR"])
        return cls(**kwargs)
