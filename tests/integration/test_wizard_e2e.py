"""Integration tests for the snapshot -> validate -> defaults -> scaffold flow.

These tests run the real engines end-to-end against a temporary template
root and verify the generated files and scaffold report, the way the wizard
front end drives them.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from extwizard.scaffolder import TemplateSetNotFound, scaffold_feature
from extwizard.wizard import (
    ExtensionConfig,
    apply_defaults,
    load_snapshot,
    save_snapshot,
    validate_config,
)


@pytest.fixture
def extension_templates(tmp_path: Path) -> Path:
    """A template root resembling a real extension skeleton."""
    root = tmp_path / "scaffold-templates"

    base = root / "base"
    (base / "src").mkdir(parents=True)
    (base / "manifest.json").write_text(
        '{\n  "name": "{{name}}",\n  "description": "{{description}}",\n'
        '  "manifest_version": 3\n}\n',
        encoding="utf-8",
    )
    (base / "src" / "storage.ts").write_text(
        "export const area = chrome.storage.{{storage_type}};\n", encoding="utf-8"
    )

    website = root / "website"
    website.mkdir(parents=True)
    (website / "site.config.json").write_text(
        '{"framework": "{{website_framework}}", "pricing": {{include_pricing}}, '
        '"auth": {{include_auth}}}\n',
        encoding="utf-8",
    )
    return root


@pytest.mark.integration
class TestWizardFlow:
    def test_snapshot_to_files(self, tmp_path: Path, extension_templates: Path):
        config = ExtensionConfig(
            name="Price Watch",
            description="Tracks prices.",
            ui_type="popup",
            auth_methods=["email"],
            pricing_model="freemium",
            database="firebase",
            storage_type="local",
            include_website=True,
        )
        snapshot_path = save_snapshot(config, tmp_path / ".extwizard" / "config.json")

        loaded = load_snapshot(snapshot_path).config
        result = validate_config(loaded)
        assert result.is_valid, result.errors

        final = apply_defaults(loaded)
        assert final.include_pricing is True
        assert final.include_auth is True
        assert final.website_framework is not None

        project = tmp_path / "price-watch"
        report = tmp_path / "docs" / "scaffold-report.md"
        variables = final.template_variables()

        base = scaffold_feature(
            "base",
            variables,
            target_dir=project,
            report_file=report,
            templates_dir=extension_templates,
            recursive=True,
        )
        site = scaffold_feature(
            "website",
            variables,
            target_dir=project,
            report_file=report,
            templates_dir=extension_templates,
        )

        assert len(base.entries) == 2
        assert len(site.entries) == 1
        manifest = (project / "manifest.json").read_text(encoding="utf-8")
        assert '"name": "Price Watch"' in manifest
        assert (project / "src" / "storage.ts").read_text(encoding="utf-8") == (
            "export const area = chrome.storage.local;\n"
        )
        site_config = (project / "site.config.json").read_text(encoding="utf-8")
        assert '"pricing": true' in site_config
        assert '"auth": true' in site_config

        log = report.read_text(encoding="utf-8")
        assert log.count("# Scaffold Report for feature:") == 2
        assert "- Created:" in log
        assert "{{" not in manifest + site_config

    def test_invalid_configuration_stops_before_generation(self):
        config = ExtensionConfig(
            name="Broken",
            description="Auth without a database.",
            ui_type="window",
            auth_methods=["github"],
        )
        result = validate_config(config)
        assert not result.is_valid
        assert result.errors == (
            "Authentication requires a database. Please select a database option.",
        )

    def test_dry_run_then_real_run(self, tmp_path: Path, extension_templates: Path):
        project = tmp_path / "proj"
        report = tmp_path / "report.md"
        variables = ExtensionConfig(name="Demo", description="d", ui_type="popup").template_variables()

        dry = scaffold_feature(
            "base", variables, target_dir=project, report_file=report,
            templates_dir=extension_templates, dry_run=True,
        )
        assert not project.exists()
        assert not report.exists()
        assert [p.name for p in dry.files] == ["manifest.json"]

        real = scaffold_feature(
            "base", variables, target_dir=project, report_file=report,
            templates_dir=extension_templates,
        )
        assert real.files == dry.files
        assert (project / "manifest.json").exists()
        assert not (project / "src").exists()

    def test_unknown_template_set(self, tmp_path: Path, extension_templates: Path):
        with pytest.raises(TemplateSetNotFound):
            scaffold_feature(
                "billing", {}, target_dir=tmp_path / "p", report_file=tmp_path / "r.md",
                templates_dir=extension_templates,
            )
