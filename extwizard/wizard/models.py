"""Pydantic v2 models for the extension wizard.

Defines the finished project configuration produced by the wizard front end,
the closed enumerations its selections are drawn from, and the value objects
returned by the validation and smart-defaults engines.

Selections that can be switched off are modelled as an absent state rather
than a ``"none"`` member: an empty list for multi-selects and ``None`` for
single selects.  The legacy ``"none"`` sentinel is still accepted on input
and normalised away.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from extwizard.utils import sanitize_name


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class UIType(str, Enum):
    """Main surface users interact with."""
    POPUP = "popup"
    WINDOW = "window"
    SIDE_WINDOW = "side-window"


class AuthMethod(str, Enum):
    """Sign-in providers offered to extension users."""
    EMAIL = "email"
    GOOGLE = "google"
    GITHUB = "github"


class AIProvider(str, Enum):
    """Hosted AI integrations."""
    OPENAI = "openai"
    CLAUDE = "claude"
    GEMINI = "gemini"


class HostingProvider(str, Enum):
    """Targets for backend functions and the companion website."""
    VERCEL = "vercel"
    NETLIFY = "netlify"
    FIREBASE = "firebase"
    CLOUDFLARE = "cloudflare"
    AWS = "aws"


class Database(str, Enum):
    """Cloud persistence backends."""
    FIREBASE = "firebase"
    SUPABASE = "supabase"
    POSTGRES = "postgres"
    MONGO = "mongo"


class PricingModel(str, Enum):
    """Monetization models."""
    FREEMIUM = "freemium"
    SUBSCRIPTION = "subscription"
    ONE_TIME = "one-time"
    USAGE_BASED = "usage-based"


class StorageType(str, Enum):
    """Scope of ``chrome.storage`` used for user settings."""
    SYNC = "sync"
    LOCAL = "local"


class WebsiteFramework(str, Enum):
    """Framework for the companion website."""
    NEXTJS = "nextjs"
    VITE = "vite"


# Sentinel and legacy spellings accepted from snapshots and CLI flags.
_NONE_SENTINEL = "none"
_LEGACY_VALUES: dict[str, str] = {
    "sidewindow": UIType.SIDE_WINDOW.value,
    "side_window": UIType.SIDE_WINDOW.value,
    "onetime": PricingModel.ONE_TIME.value,
    "usagebased": PricingModel.USAGE_BASED.value,
    "oauth-google": AuthMethod.GOOGLE.value,
    "oauth-github": AuthMethod.GITHUB.value,
}


def _normalise_choice(value: Any) -> Any:
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in ("", _NONE_SENTINEL):
            return None
        return _LEGACY_VALUES.get(cleaned, cleaned)
    return value


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class ExtensionConfig(BaseModel):
    """The complete set of project choices collected by the wizard.

    Identity fields may be empty and ``ui_type`` may be missing: those are
    reported by :func:`extwizard.wizard.validation.validate_config` rather
    than rejected at construction time, so a half-finished configuration can
    still be validated, defaulted and persisted.

    ``include_pricing``, ``include_auth`` and ``include_testimonials`` are
    tri-state.  ``None`` means "not answered yet" and is the only state the
    smart-defaults engine will fill in; an explicit ``False`` is kept.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Identity
    name: str = Field(default="", alias="extensionName", description="Extension name")
    description: str = Field(
        default="", alias="extensionDescription", description="What the extension does"
    )

    # UI
    ui_type: Optional[UIType] = Field(default=None, description="Main UI surface")

    # Feature toggles
    tailwind: bool = Field(default=False, description="Use Tailwind CSS")
    i18n: bool = Field(default=False, description="Ship localisation support")
    options_page: bool = Field(default=False, description="Include an options page")
    accessibility: bool = Field(default=False, description="Include accessibility features")

    # Multi-valued selections
    auth_methods: list[AuthMethod] = Field(
        default_factory=list, description="Sign-in providers; empty = no authentication"
    )
    ai_providers: list[AIProvider] = Field(
        default_factory=list, description="AI integrations; empty = no AI features"
    )
    hosting_providers: list[HostingProvider] = Field(
        default_factory=list, description="Hosting targets; empty = no backend hosting"
    )

    # Single-valued selections
    database: Optional[Database] = Field(default=None, description="Cloud database")
    pricing_model: Optional[PricingModel] = Field(
        default=None, description="Monetization model; None = free extension"
    )
    storage_type: StorageType = Field(default=StorageType.SYNC, description="chrome.storage scope")

    # Companion website
    include_website: bool = Field(default=False, description="Build a companion website")
    website_framework: Optional[WebsiteFramework] = Field(
        default=None, description="Framework for the companion website"
    )
    include_pricing: Optional[bool] = Field(default=None, description="Pricing section")
    include_testimonials: Optional[bool] = Field(default=None, description="Testimonials section")
    include_auth: Optional[bool] = Field(default=None, description="Site-level sign-in")
    include_cookie_banner: bool = Field(default=False, description="Cookie-consent banner")
    include_newsletter: bool = Field(default=False, description="Newsletter signup")
    include_blog: bool = Field(default=False, description="Blog")
    include_search: bool = Field(default=False, description="Site search")
    include_pwa: bool = Field(default=False, description="Installable-app behaviour")
    include_status_page: bool = Field(default=False, description="Status page")
    include_api_docs: bool = Field(
        default=False, alias="includeAPIDocs", description="API documentation page"
    )
    include_user_dashboard: bool = Field(default=False, description="User dashboard")

    # -- Input normalisation ----------------------------------------------

    @field_validator(
        "ui_type", "database", "pricing_model", "website_framework", mode="before"
    )
    @classmethod
    def _single_choice(cls, value: Any) -> Any:
        return _normalise_choice(value)

    @field_validator("storage_type", mode="before")
    @classmethod
    def _storage_choice(cls, value: Any) -> Any:
        normalised = _normalise_choice(value)
        return StorageType.SYNC if normalised is None else normalised

    @field_validator("auth_methods", "ai_providers", "hosting_providers", mode="before")
    @classmethod
    def _multi_choice(cls, value: Any) -> Any:
        """Drop ``"none"`` entries and duplicates, keeping first-seen order."""
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        seen: list[Any] = []
        for item in value:
            item = _normalise_choice(item)
            if item is not None and item not in seen:
                seen.append(item)
        return seen

    # -- Derived helpers --------------------------------------------------

    @property
    def has_auth(self) -> bool:
        """``True`` when at least one sign-in provider is selected."""
        return bool(self.auth_methods)

    @property
    def has_ai(self) -> bool:
        return bool(self.ai_providers)

    @property
    def is_monetized(self) -> bool:
        return self.pricing_model is not None

    @property
    def requires_database(self) -> bool:
        """Authentication and monetization both need a cloud database."""
        return self.has_auth or self.is_monetized

    def template_variables(self) -> dict[str, str]:
        """Flatten the configuration into ``{{placeholder}}`` values.

        Every value is a string; absent selections become ``""`` and
        booleans become ``"true"`` / ``"false"``.
        """
        def _flag(value: Optional[bool]) -> str:
            return "true" if value else "false"

        def _choice(value: Optional[Enum]) -> str:
            return value.value if value is not None else ""

        return {
            "name": self.name,
            "slug": sanitize_name(self.name),
            "description": self.description,
            "ui_type": _choice(self.ui_type),
            "tailwind": _flag(self.tailwind),
            "i18n": _flag(self.i18n),
            "options_page": _flag(self.options_page),
            "accessibility": _flag(self.accessibility),
            "auth_methods": ", ".join(m.value for m in self.auth_methods),
            "ai_providers": ", ".join(p.value for p in self.ai_providers),
            "hosting_providers": ", ".join(h.value for h in self.hosting_providers),
            "database": _choice(self.database),
            "pricing_model": _choice(self.pricing_model),
            "storage_type": self.storage_type.value,
            "include_website": _flag(self.include_website),
            "website_framework": _choice(self.website_framework),
            "include_pricing": _flag(self.include_pricing),
            "include_testimonials": _flag(self.include_testimonials),
            "include_auth": _flag(self.include_auth),
            "include_cookie_banner": _flag(self.include_cookie_banner),
            "include_newsletter": _flag(self.include_newsletter),
            "include_blog": _flag(self.include_blog),
            "include_search": _flag(self.include_search),
            "include_pwa": _flag(self.include_pwa),
            "include_status_page": _flag(self.include_status_page),
            "include_api_docs": _flag(self.include_api_docs),
            "include_user_dashboard": _flag(self.include_user_dashboard),
        }


# ---------------------------------------------------------------------------
# Engine results
# ---------------------------------------------------------------------------

class ValidationResult(BaseModel):
    """Outcome of validating an :class:`ExtensionConfig`.

    Errors block generation; warnings are advisory and never affect
    ``is_valid``.
    """

    model_config = ConfigDict(frozen=True)

    errors: tuple[str, ...] = Field(default=(), description="Blocking violations, in rule order")
    warnings: tuple[str, ...] = Field(default=(), description="Advisory notes, in rule order")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors


class SmartDefaults(BaseModel):
    """Values the wizard would fill in for fields the user left unset."""

    model_config = ConfigDict(frozen=True)

    database: Optional[Database] = Field(default=None, description="Recommended database")
    include_pricing: bool = Field(default=False)
    include_auth: bool = Field(default=False)
    include_testimonials: bool = Field(default=False)
    website_framework: WebsiteFramework = Field(default=WebsiteFramework.NEXTJS)
