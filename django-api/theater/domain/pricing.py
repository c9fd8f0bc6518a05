"""Per-performance fee and volume credit rules."""

from dataclasses import dataclass, fields
from enum import Enum

from theater.domain import constants
from theater.domain.errors import UnrecognizedCategoryError
from theater.domain.models import Play
from theater.domain.value_objects import Audience, Money


class PlayCategory(Enum):
    """Categories that have a pricing formula."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def of(cls, play: Play) -> "PlayCategory":
        try:
            return cls(play.type)
        except ValueError:
            raise UnrecognizedCategoryError(play.type) from None


@dataclass(frozen=True)
class PricingRules:
    """Tunable pricing constants. Amounts are in cents."""

    tragedy_base_amount: int = constants.TRAGEDY_BASE_AMOUNT
    tragedy_audience_threshold: int = constants.TRAGEDY_AUDIENCE_THRESHOLD
    tragedy_over_base_capacity_per_person: int = (
        constants.TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON
    )
    comedy_base_amount: int = constants.COMEDY_BASE_AMOUNT
    comedy_audience_threshold: int = constants.COMEDY_AUDIENCE_THRESHOLD
    comedy_over_base_capacity_amount: int = constants.COMEDY_OVER_BASE_CAPACITY_AMOUNT
    comedy_over_base_capacity_per_person: int = (
        constants.COMEDY_OVER_BASE_CAPACITY_PER_PERSON
    )
    comedy_amount_per_audience: int = constants.COMEDY_AMOUNT_PER_AUDIENCE
    base_volume_credit_threshold: int = constants.BASE_VOLUME_CREDIT_THRESHOLD
    comedy_extra_volume_factor: int = constants.COMEDY_EXTRA_VOLUME_FACTOR

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{field.name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{field.name} cannot be negative")
        if self.comedy_extra_volume_factor <= 0:
            raise ValueError("Comedy extra volume factor must be positive")


DEFAULT_RULES = PricingRules()


def amount_for(play: Play, audience: Audience, rules: PricingRules = DEFAULT_RULES) -> Money:
    """Return the fee for one performance of ``play``.

    Raises:
        UnrecognizedCategoryError: If the play's category has no formula.
    """
    category = PlayCategory.of(play)
    seats = audience.value

    if category is PlayCategory.TRAGEDY:
        amount = rules.tragedy_base_amount
        if seats > rules.tragedy_audience_threshold:
            amount += rules.tragedy_over_base_capacity_per_person * (
                seats - rules.tragedy_audience_threshold
            )
    else:
        amount = rules.comedy_base_amount
        if seats > rules.comedy_audience_threshold:
            amount += rules.comedy_over_base_capacity_amount + (
                rules.comedy_over_base_capacity_per_person
                * (seats - rules.comedy_audience_threshold)
            )
        amount += rules.comedy_amount_per_audience * seats

    return Money(cents=amount)


def volume_credits_for(
    play: Play, audience: Audience, rules: PricingRules = DEFAULT_RULES
) -> int:
    """Return the loyalty credits earned by one performance of ``play``.

    Raises:
        UnrecognizedCategoryError: If the play's category has no formula.
    """
    category = PlayCategory.of(play)
    seats = audience.value

    credits = max(seats - rules.base_volume_credit_threshold, 0)
    if category is PlayCategory.COMEDY:
        credits += seats // rules.comedy_extra_volume_factor
    return credits
