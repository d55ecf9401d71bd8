"""Smart defaults for unset configuration fields.

:func:`infer_defaults` recommends values from the features a user already
picked; :func:`apply_defaults` merges those recommendations into a
configuration without touching anything the user set explicitly.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from .models import Database, ExtensionConfig, SmartDefaults, WebsiteFramework

# Recommended whenever authentication or monetization needs a backend.
MANAGED_DATABASE = Database.FIREBASE

# Fields covered by SmartDefaults, in merge order.
DEFAULTED_FIELDS: tuple[str, ...] = tuple(SmartDefaults.model_fields)


def infer_defaults(config: Union[ExtensionConfig, Mapping[str, Any]]) -> SmartDefaults:
    """Recommend values for the fields covered by :class:`SmartDefaults`.

    *config* may be a partial mapping (snake_case or camelCase keys); it is
    validated into an :class:`ExtensionConfig` first.  Later rules only ever
    switch a recommendation on, never off.
    """
    if not isinstance(config, ExtensionConfig):
        config = ExtensionConfig.model_validate(dict(config))

    database = None
    include_pricing = False
    include_auth = False
    include_testimonials = False
    website_framework = WebsiteFramework.NEXTJS

    if config.has_auth:
        database = MANAGED_DATABASE
        include_auth = True

    if config.is_monetized:
        database = MANAGED_DATABASE
        include_pricing = True

    if config.include_website:
        if config.is_monetized:
            include_pricing = True
        if config.has_auth:
            include_auth = True

        # Content-heavy sites want SSR/SEO; a bare landing page does not.
        if (
            config.include_blog
            or config.include_search
            or config.include_api_docs
            or config.include_user_dashboard
        ):
            website_framework = WebsiteFramework.NEXTJS
        elif not (
            config.include_pricing or config.include_auth or config.include_testimonials
        ):
            website_framework = WebsiteFramework.VITE

    return SmartDefaults(
        database=database,
        include_pricing=include_pricing,
        include_auth=include_auth,
        include_testimonials=include_testimonials,
        website_framework=website_framework,
    )


def apply_defaults(config: ExtensionConfig) -> ExtensionConfig:
    """Return a copy of *config* with unset fields filled from :func:`infer_defaults`.

    A field counts as set when it is not ``None``.  Explicit values,
    including a deliberate ``False``, are never replaced.
    """
    defaults = infer_defaults(config)
    updates: dict[str, Any] = {}
    for field_name in DEFAULTED_FIELDS:
        if getattr(config, field_name) is not None:
            continue
        recommended = getattr(defaults, field_name)
        if recommended is not None:
            updates[field_name] = recommended

    if not updates:
        return config
    return config.model_copy(update=updates)
