"""Shared pytest fixtures for the extwizard test suite.

Provides reusable fixtures for:
- Valid and partially-filled extension configurations
- A temporary template root with a few template sets
- A temporary project directory and report file location
"""

from __future__ import annotations

from pathlib import Path

import pytest

from extwizard.wizard import ExtensionConfig


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_config() -> ExtensionConfig:
    """The smallest configuration that passes validation."""
    return ExtensionConfig(
        name="Tab Saver",
        description="Save and restore groups of tabs.",
        ui_type="popup",
    )


@pytest.fixture
def full_config() -> ExtensionConfig:
    """A configuration using most wizard features, valid as-is."""
    return ExtensionConfig(
        name="Chat Sidekick",
        description="An AI chat assistant in a side window.",
        ui_type="side-window",
        tailwind=True,
        i18n=True,
        options_page=True,
        accessibility=True,
        auth_methods=["google", "email"],
        ai_providers=["openai"],
        hosting_providers=["vercel"],
        database="supabase",
        pricing_model="subscription",
        storage_type="local",
        include_website=True,
        website_framework="nextjs",
        include_pricing=True,
        include_testimonials=True,
        include_auth=True,
        include_cookie_banner=True,
        include_blog=True,
    )


@pytest.fixture
def legacy_payload() -> dict:
    """A camelCase payload as written by the original wizard, ``none`` sentinels included."""
    return {
        "extensionName": "Legacy Tool",
        "extensionDescription": "Written before the sentinel clean-up.",
        "uiType": "sidewindow",
        "tailwind": True,
        "i18n": False,
        "optionsPage": True,
        "authMethods": ["none"],
        "aiProviders": ["claude", "none"],
        "database": "none",
        "pricingModel": "none",
        "hostingProviders": ["none"],
        "storageType": "sync",
        "accessibility": True,
        "includeWebsite": False,
        "includePricing": False,
        "includeTestimonials": False,
        "includeAuth": False,
    }


# ---------------------------------------------------------------------------
# Template roots & directories
# ---------------------------------------------------------------------------

@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template root with ``auth`` (flat), ``docs`` (nested) and ``plain`` sets."""
    root = tmp_path / "scaffold-templates"

    auth = root / "auth"
    auth.mkdir(parents=True)
    (auth / "login.tsx").write_text(
        "export const title = '{{name}} login';\n// providers: {{auth_methods}}\n",
        encoding="utf-8",
    )
    (auth / "README.md").write_text("# {{name}}\n\n{{description}}\n", encoding="utf-8")

    docs = root / "docs"
    (docs / "guides").mkdir(parents=True)
    (docs / "index.md").write_text("# {{name}} docs\n", encoding="utf-8")
    (docs / "guides" / "setup.md").write_text("Install {{slug}}.\n", encoding="utf-8")

    plain = root / "plain"
    plain.mkdir()
    (plain / "LICENSE").write_text("MIT License\n{ not a placeholder }\n", encoding="utf-8")

    return root


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary directory for generated projects (auto-cleanup)."""
    project_dir = tmp_path / "my-extension"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    """Location of the scaffold report; its parent does not exist yet."""
    return tmp_path / "logs" / "docs" / "scaffold-report.md"
