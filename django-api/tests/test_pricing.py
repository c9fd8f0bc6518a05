"""Unit tests for fee and volume credit rules.

Run with: pytest tests/test_pricing.py -v
"""

import pytest

from theater.domain import Audience, Money, Play, PlayId, PricingRules, amount_for, volume_credits_for
from theater.domain.errors import UnrecognizedCategoryError

TRAGEDY = Play(id=PlayId("hamlet"), name="Hamlet", type="tragedy")
COMEDY = Play(id=PlayId("as-like"), name="As You Like It", type="comedy")
FARCE = Play(id=PlayId("noises-off"), name="Noises Off", type="farce")


class TestTragedyAmount:
    """Tests for tragedy fees."""

    @pytest.mark.parametrize("audience", [0, 1, 29, 30])
    def test_flat_fee_up_to_threshold(self, audience):
        """Up to 30 attendees a tragedy costs the base amount."""
        assert amount_for(TRAGEDY, Audience(audience)) == Money(cents=40000)

    @pytest.mark.parametrize("audience", [31, 40, 55])
    def test_surcharge_per_attendee_above_threshold(self, audience):
        """Each attendee above 30 adds 1000 cents."""
        expected = 40000 + 1000 * (audience - 30)
        assert amount_for(TRAGEDY, Audience(audience)) == Money(cents=expected)

    def test_forty_attendees(self):
        """A tragedy for 40 costs $500.00."""
        assert str(amount_for(TRAGEDY, Audience(40))) == "$500.00"


class TestComedyAmount:
    """Tests for comedy fees."""

    def test_at_threshold_only_per_attendee_amount_added(self):
        """At 20 attendees no over-capacity charge applies."""
        assert amount_for(COMEDY, Audience(20)) == Money(cents=30000 + 300 * 20)

    def test_above_threshold_adds_flat_and_per_person_amounts(self):
        """Above 20 attendees the flat and per-person surcharges apply."""
        expected = 30000 + 10000 + 500 * 15 + 300 * 35
        assert amount_for(COMEDY, Audience(35)) == Money(cents=expected)

    def test_empty_house(self):
        """An empty comedy still costs the base amount."""
        assert amount_for(COMEDY, Audience(0)) == Money(cents=30000)

    def test_fee_is_non_decreasing_in_audience(self):
        """Adding attendees never lowers a comedy fee."""
        fees = [amount_for(COMEDY, Audience(n)).cents for n in range(0, 80)]
        assert fees == sorted(fees)


class TestVolumeCredits:
    """Tests for volume credit accrual."""

    @pytest.mark.parametrize("audience,expected", [(0, 0), (30, 0), (31, 1), (55, 25)])
    def test_tragedy_earns_base_credits_only(self, audience, expected):
        """Tragedies earn one credit per attendee above 30."""
        assert volume_credits_for(TRAGEDY, Audience(audience)) == expected

    @pytest.mark.parametrize("audience,expected", [(0, 0), (4, 0), (5, 1), (35, 12)])
    def test_comedy_earns_bonus_per_five_attendees(self, audience, expected):
        """Comedies add one credit per five attendees."""
        assert volume_credits_for(COMEDY, Audience(audience)) == expected

    def test_credits_never_negative(self):
        """Small audiences earn zero, not negative, credits."""
        assert all(volume_credits_for(TRAGEDY, Audience(n)) >= 0 for n in range(0, 40))


class TestUnrecognizedCategory:
    """Tests for plays without a pricing formula."""

    def test_amount_raises(self):
        """Pricing a farce fails with the category in the error."""
        with pytest.raises(UnrecognizedCategoryError) as excinfo:
            amount_for(FARCE, Audience(10))
        assert excinfo.value.category == "farce"

    def test_credits_raise(self):
        """Crediting a farce fails too."""
        with pytest.raises(UnrecognizedCategoryError):
            volume_credits_for(FARCE, Audience(10))


class TestPricingRules:
    """Tests for tunable pricing rules."""

    def test_custom_threshold_changes_surcharge_boundary(self):
        """Raising the tragedy threshold delays the surcharge."""
        rules = PricingRules(tragedy_audience_threshold=50)
        assert amount_for(TRAGEDY, Audience(50), rules) == Money(cents=40000)
        assert amount_for(TRAGEDY, Audience(51), rules) == Money(cents=41000)

    def test_custom_credit_threshold(self):
        """Lowering the credit threshold earns more credits."""
        rules = PricingRules(base_volume_credit_threshold=10)
        assert volume_credits_for(TRAGEDY, Audience(15), rules) == 5

    def test_rejects_non_positive_comedy_factor(self):
        """A zero comedy factor would divide by zero."""
        with pytest.raises(ValueError):
            PricingRules(comedy_extra_volume_factor=0)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"comedy_audience_threshold": "25"},
            {"comedy_extra_volume_factor": 2.5},
            {"tragedy_base_amount": -100},
            {"comedy_base_amount": True},
        ],
    )
    def test_rejects_non_integer_or_negative_values(self, overrides):
        """Every rule must be a non-negative integer."""
        with pytest.raises(ValueError):
            PricingRules(**overrides)
