"""Cross-feature validation for extension configurations.

Each dependency rule is a named :class:`ValidationRule`.  :data:`RULES` holds
them in the fixed order their messages are reported in, so the rule set can
be enumerated, documented and unit-tested one rule at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from .models import ExtensionConfig, ValidationResult


class Severity(str, Enum):
    """Whether a violated rule blocks generation."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationRule:
    """A single predicate over an :class:`ExtensionConfig`.

    ``violated`` returns ``True`` when the configuration breaks the rule, in
    which case ``message`` is reported with the rule's ``severity``.
    """

    name: str
    severity: Severity
    message: str
    violated: Callable[[ExtensionConfig], bool]

    def check(self, config: ExtensionConfig) -> Optional[str]:
        """Return the rule's message if *config* violates it, else ``None``."""
        return self.message if self.violated(config) else None


RULES: tuple[ValidationRule, ...] = (
    ValidationRule(
        name="name-required",
        severity=Severity.ERROR,
        message="Extension name is required",
        violated=lambda c: not c.name.strip(),
    ),
    ValidationRule(
        name="description-required",
        severity=Severity.ERROR,
        message="Extension description is required",
        violated=lambda c: not c.description.strip(),
    ),
    ValidationRule(
        name="ui-type-required",
        severity=Severity.ERROR,
        message="UI type is required",
        violated=lambda c: c.ui_type is None,
    ),
    ValidationRule(
        name="auth-requires-database",
        severity=Severity.ERROR,
        message="Authentication requires a database. Please select a database option.",
        violated=lambda c: c.has_auth and c.database is None,
    ),
    ValidationRule(
        name="pricing-requires-database",
        severity=Severity.ERROR,
        message="Pricing model requires a database. Please select a database option.",
        violated=lambda c: c.is_monetized and c.database is None,
    ),
    ValidationRule(
        name="website-pricing-without-model",
        severity=Severity.WARNING,
        message=(
            "Website includes pricing information but no pricing model is selected. "
            "Consider adding a pricing model."
        ),
        violated=lambda c: c.include_website and bool(c.include_pricing) and not c.is_monetized,
    ),
    ValidationRule(
        name="website-auth-without-method",
        severity=Severity.WARNING,
        message=(
            "Website includes authentication features but no authentication methods "
            "are selected. Consider adding authentication methods."
        ),
        violated=lambda c: c.include_website and bool(c.include_auth) and not c.has_auth,
    ),
    ValidationRule(
        name="cookie-banner-without-website",
        severity=Severity.WARNING,
        message=(
            "Cookie banner is selected but website is not included. "
            "Cookie banners are typically used on websites."
        ),
        violated=lambda c: c.include_cookie_banner and not c.include_website,
    ),
    ValidationRule(
        name="ai-without-database",
        severity=Severity.WARNING,
        message=(
            "AI features are selected but no database is configured. Consider adding "
            "a database for conversation history and user preferences."
        ),
        violated=lambda c: c.has_ai and c.database is None,
    ),
)


def get_rule(name: str) -> ValidationRule:
    """Look up a rule in :data:`RULES` by name.

    Raises:
        KeyError: If no rule has that name.
    """
    for rule in RULES:
        if rule.name == name:
            return rule
    raise KeyError(f"Unknown validation rule: {name}")


def validate_config(
    config: ExtensionConfig,
    rules: Iterable[ValidationRule] = RULES,
) -> ValidationResult:
    """Check *config* against every rule and collect the messages.

    Errors and warnings keep the order of *rules*.  The configuration is
    never modified; a fresh :class:`ValidationResult` is returned each call.
    """
    errors: list[str] = []
    warnings: list[str] = []

    for rule in rules:
        message = rule.check(config)
        if message is None:
            continue
        if rule.severity is Severity.ERROR:
            errors.append(message)
        else:
            warnings.append(message)

    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
