"""Settings-driven configuration for the theater app.

Pricing constants can be overridden per deployment::

    THEATER_PRICING = {"comedy_audience_threshold": 25}
"""

from dataclasses import fields

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from theater.domain import PricingRules

_RULE_NAMES = frozenset(field.name for field in fields(PricingRules))


def get_pricing_rules() -> PricingRules:
    """Return PricingRules with THEATER_PRICING overrides applied."""
    overrides = getattr(settings, "THEATER_PRICING", None) or {}
    unknown = sorted(set(overrides) - _RULE_NAMES)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown THEATER_PRICING keys: {', '.join(unknown)}"
        )
    try:
        return PricingRules(**overrides)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Invalid THEATER_PRICING: {exc}") from exc
