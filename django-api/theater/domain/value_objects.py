"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from theater.domain.constants import CENTS_PER_DOLLAR


@dataclass(frozen=True)
class PlayId:
    """Identifier of a Play in the catalog."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Play ID cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Audience:
    """Non-negative number of attendees at a performance."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class Money:
    """Amount in US cents.

    Arithmetic stays in integer cents; conversion to dollars only happens
    when rendering, using exact decimal division.
    """

    cents: int

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(cents=0)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    @property
    def dollars(self) -> Decimal:
        return Decimal(self.cents) / CENTS_PER_DOLLAR

    def __str__(self) -> str:
        return f"${self.dollars:,.2f}"
