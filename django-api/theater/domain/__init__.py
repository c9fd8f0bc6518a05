from theater.domain.models import Invoice, Performance, Play, Statement, StatementLine
from theater.domain.pricing import PlayCategory, PricingRules, amount_for, volume_credits_for
from theater.domain.value_objects import Audience, Money, PlayId

__all__ = [
    "Invoice",
    "Performance",
    "Play",
    "Statement",
    "StatementLine",
    "PlayCategory",
    "PricingRules",
    "amount_for",
    "volume_credits_for",
    "PlayId",
    "Audience",
    "Money",
]
