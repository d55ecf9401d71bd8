"""Unit tests for WizardSettings (extwizard.config).

Tests cover:
- Defaults
- save/load round trip
- from_env overrides
"""

from __future__ import annotations

from pathlib import Path

import pytest

from extwizard.config import (
    DEFAULT_REPORT_FILE,
    DEFAULT_SNAPSHOT_FILE,
    DEFAULT_TEMPLATES_DIR,
    WizardSettings,
)


_ENV_VARS = (
    "EXTWIZARD_TEMPLATES_DIR",
    "EXTWIZARD_REPORT_FILE",
    "EXTWIZARD_SNAPSHOT_FILE",
    "EXTWIZARD_TARGET_DIR",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestWizardSettingsDefaults:
    @pytest.mark.unit
    def test_default_values(self):
        settings = WizardSettings()
        assert settings.templates_dir == Path("scaffold-templates")
        assert settings.report_file == Path("docs/scaffold-report.md")
        assert settings.snapshot_file == Path(".extwizard/config.json")
        assert settings.target_dir == Path(".")

    @pytest.mark.unit
    def test_module_constants_match_defaults(self):
        settings = WizardSettings()
        assert settings.templates_dir == DEFAULT_TEMPLATES_DIR
        assert settings.report_file == DEFAULT_REPORT_FILE
        assert settings.snapshot_file == DEFAULT_SNAPSHOT_FILE

    @pytest.mark.unit
    def test_string_paths_are_coerced(self):
        settings = WizardSettings(templates_dir="tpl", target_dir="out")
        assert settings.templates_dir == Path("tpl")
        assert settings.target_dir == Path("out")


class TestWizardSettingsPersistence:
    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        settings = WizardSettings(templates_dir=tmp_path / "tpl", report_file=tmp_path / "r.md")
        written = settings.save(tmp_path / "nested" / "settings.json")

        assert written.exists()
        loaded = WizardSettings.load(written)
        assert loaded == settings

    @pytest.mark.unit
    def test_save_default_location(self, tmp_path: Path):
        settings = WizardSettings(snapshot_file=tmp_path / ".extwizard" / "config.json")
        written = settings.save()
        assert written == tmp_path / ".extwizard" / "settings.json"
        assert written.exists()


class TestWizardSettingsFromEnv:
    @pytest.mark.unit
    def test_no_env_gives_defaults(self, clean_env):
        assert WizardSettings.from_env() == WizardSettings()

    @pytest.mark.unit
    def test_env_overrides(self, clean_env):
        clean_env.setenv("EXTWIZARD_TEMPLATES_DIR", "/srv/templates")
        clean_env.setenv("EXTWIZARD_REPORT_FILE", "/srv/report.md")
        clean_env.setenv("EXTWIZARD_SNAPSHOT_FILE", "/srv/snap.json")
        clean_env.setenv("EXTWIZARD_TARGET_DIR", "/srv/out")

        settings = WizardSettings.from_env()
        assert settings.templates_dir == Path("/srv/templates")
        assert settings.report_file == Path("/srv/report.md")
        assert settings.snapshot_file == Path("/srv/snap.json")
        assert settings.target_dir == Path("/srv/out")

    @pytest.mark.unit
    def test_empty_env_value_is_ignored(self, clean_env):
        clean_env.setenv("EXTWIZARD_TEMPLATES_DIR", "")
        assert WizardSettings.from_env().templates_dir == DEFAULT_TEMPLATES_DIR
