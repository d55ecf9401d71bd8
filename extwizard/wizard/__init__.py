"""Extension wizard configuration core.

The front end assembles an :class:`ExtensionConfig`; this package checks it
and fills in what the user left open.

Quick usage::

    from extwizard.wizard import ExtensionConfig, apply_defaults, validate_config

    config = ExtensionConfig(
        name="Tab Saver",
        description="Save and restore tab groups",
        ui_type="popup",
        auth_methods=["google"],
        database="firebase",
    )
    result = validate_config(config)
    if result.is_valid:
        config = apply_defaults(config)
"""

from extwizard.wizard.defaults import MANAGED_DATABASE, apply_defaults, infer_defaults
from extwizard.wizard.models import (
    AIProvider,
    AuthMethod,
    Database,
    ExtensionConfig,
    HostingProvider,
    PricingModel,
    SmartDefaults,
    StorageType,
    UIType,
    ValidationResult,
    WebsiteFramework,
)
from extwizard.wizard.snapshot import (
    ConfigSnapshot,
    SnapshotError,
    load_snapshot,
    save_snapshot,
)
from extwizard.wizard.validation import RULES, Severity, ValidationRule, validate_config

__all__ = [
    "AIProvider",
    "AuthMethod",
    "ConfigSnapshot",
    "Database",
    "ExtensionConfig",
    "HostingProvider",
    "MANAGED_DATABASE",
    "PricingModel",
    "RULES",
    "Severity",
    "SmartDefaults",
    "SnapshotError",
    "StorageType",
    "UIType",
    "ValidationResult",
    "ValidationRule",
    "WebsiteFramework",
    "apply_defaults",
    "infer_defaults",
    "load_snapshot",
    "save_snapshot",
    "validate_config",
]
