"""Persisted configuration snapshots.

The wizard front end records the finished configuration as a flat JSON file
together with a generation timestamp and a format-version tag.  Loading a
snapshot yields a normal :class:`ExtensionConfig` that can go straight into
validation and smart defaults.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from extwizard.utils import load_json, save_json

from .models import ExtensionConfig

SNAPSHOT_FORMAT_VERSION = "1"


class SnapshotError(Exception):
    """Raised when a snapshot cannot be read or is not understood."""

    def __init__(self, message: str, path: str | Path = "") -> None:
        self.path = Path(path) if path else None
        super().__init__(message)


class ConfigSnapshot(BaseModel):
    """On-disk record of a wizard run."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    format_version: str = Field(default=SNAPSHOT_FORMAT_VERSION)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    config: ExtensionConfig


def save_snapshot(config: ExtensionConfig, path: str | Path) -> Path:
    """Write *config* to *path* as a versioned, timestamped snapshot.

    Parent directories are created automatically.  Fields the user never
    answered are stored as ``null`` so they stay unset when loaded back.
    """
    snapshot = ConfigSnapshot(config=config)
    return save_json(snapshot.model_dump(mode="json", by_alias=True), path)


def load_snapshot(path: str | Path) -> ConfigSnapshot:
    """Read and validate a snapshot written by :func:`save_snapshot`.

    Raises:
        SnapshotError: If the file is missing, is not JSON, carries an
            unsupported format version, or holds an invalid configuration.
    """
    file_path = Path(path)
    try:
        data = load_json(file_path)
    except FileNotFoundError:
        raise SnapshotError(f"Snapshot file not found: {file_path}", file_path) from None
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON ({exc.msg}): {file_path}", file_path) from exc

    version = data.get("formatVersion", data.get("format_version"))
    if not isinstance(version, str) or version != SNAPSHOT_FORMAT_VERSION:
        shown = "'<missing>'" if version in (None, "") else repr(version)
        raise SnapshotError(
            f"Unsupported snapshot format version {shown} "
            f"(expected {SNAPSHOT_FORMAT_VERSION!r}): {file_path}",
            file_path,
        )

    try:
        return ConfigSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Snapshot holds an invalid configuration: {exc}", file_path) from exc
