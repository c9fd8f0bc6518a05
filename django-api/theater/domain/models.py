"""Domain models for invoices and the play catalog.

These are pure domain objects with no API input rules.
The Django ORM catalog model is in theater/models.py (persistence layer).
"""

from dataclasses import dataclass
from typing import Self

from theater.domain.value_objects import Audience, Money, PlayId


@dataclass(frozen=True)
class Play:
    """Catalog entry. ``type`` is the pricing category, e.g. "tragedy"."""

    id: PlayId
    name: str
    type: str


@dataclass(frozen=True)
class Performance:
    """One staging of a play before an audience."""

    play_id: PlayId
    audience: Audience

    @classmethod
    def create(cls, play_id: str, audience: int) -> Self:
        return cls(play_id=PlayId(play_id), audience=Audience(audience))


@dataclass(frozen=True)
class Invoice:
    """A customer's performances, in billing order."""

    customer: str
    performances: tuple[Performance, ...] = ()


@dataclass(frozen=True)
class StatementLine:
    """One priced performance on a statement."""

    play_name: str
    amount: Money
    audience: int


@dataclass(frozen=True)
class Statement:
    """Priced invoice, ready to render."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: Money
    volume_credits: int
