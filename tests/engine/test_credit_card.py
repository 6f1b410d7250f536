from dataclasses import replace
from decimal import Decimal

import pytest

from maplecalc.engine.credit_card import PAYOFF_TARGET_MONTHS, credit_card_payoff
from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.money import to_cents


class TestMinimumPayments:
    def test_takes_over_twenty_years(self, card_inputs):
        result = credit_card_payoff(card_inputs)
        assert result.minimum.amortizes
        assert result.minimum.months > 240
        assert result.minimum.total_interest > Decimal("5000")

    def test_pinned_minimum_payoff(self, card_inputs):
        """Regression values for $5,000 at 19.99% with a 2% / $10 minimum."""
        result = credit_card_payoff(card_inputs)
        assert result.minimum.months == 797
        assert to_cents(result.minimum.total_interest) == Decimal("23015.69")

    def test_first_minimum_is_two_percent(self, card_inputs):
        result = credit_card_payoff(card_inputs)
        assert to_cents(result.minimum.first_payment) == Decimal("100.00")

    def test_yearly_follows_minimum_schedule(self, card_inputs):
        result = credit_card_payoff(card_inputs)
        assert len(result.yearly) == (result.minimum.months + 11) // 12
        assert result.yearly[-1]["ending_balance"] == Decimal("0")


class TestFixedPayment:
    def test_defaults_to_first_minimum(self, card_inputs):
        result = credit_card_payoff(card_inputs)
        assert result.fixed.first_payment == result.minimum.first_payment
        assert result.fixed.months < result.minimum.months

    def test_savings_against_minimum(self, card_inputs):
        result = credit_card_payoff(replace(card_inputs, fixed_payment=Decimal("250")))
        assert result.interest_saved_fixed == (
            result.minimum.total_interest - result.fixed.total_interest
        )
        assert result.months_saved_fixed == result.minimum.months - result.fixed.months
        assert result.interest_saved_fixed > 0

    def test_payment_below_interest_never_pays_off(self, card_inputs):
        result = credit_card_payoff(replace(card_inputs, fixed_payment=Decimal("50")))
        assert not result.fixed.amortizes
        assert result.fixed.months is None
        assert result.fixed.total_interest is None
        assert result.interest_saved_fixed is None
        assert result.months_saved_fixed is None

    def test_period_cap_passed_through(self, card_inputs):
        result = credit_card_payoff(card_inputs, period_cap=60)
        assert not result.minimum.amortizes


class TestExtraPayment:
    def test_no_extra(self, card_inputs):
        result = credit_card_payoff(card_inputs)
        assert result.extra is None
        assert result.interest_saved_extra == Decimal("0")
        assert result.months_saved_extra == 0

    def test_extra_pays_off_sooner(self, card_inputs):
        result = credit_card_payoff(
            replace(card_inputs, fixed_payment=Decimal("200"), extra_payment=Decimal("100"))
        )
        assert result.extra.first_payment == Decimal("300")
        assert result.extra.months < result.fixed.months
        assert result.interest_saved_extra > 0


class TestTargets:
    def test_one_per_target(self, card_inputs):
        result = credit_card_payoff(card_inputs)
        assert tuple(t.periods for t in result.targets) == PAYOFF_TARGET_MONTHS

    def test_faster_target_needs_bigger_payment(self, card_inputs):
        payments = [t.payment for t in credit_card_payoff(card_inputs).targets]
        assert payments == sorted(payments, reverse=True)


class TestValidation:
    def test_zero_balance(self, card_inputs):
        with pytest.raises(MissingInputError):
            credit_card_payoff(replace(card_inputs, balance=Decimal("0")))

    def test_negative_rate(self, card_inputs):
        with pytest.raises(DomainError):
            credit_card_payoff(replace(card_inputs, annual_rate=Decimal("-0.01")))

    def test_negative_extra(self, card_inputs):
        with pytest.raises(DomainError):
            credit_card_payoff(replace(card_inputs, extra_payment=Decimal("-5")))

    def test_idempotent(self, card_inputs):
        assert credit_card_payoff(card_inputs) == credit_card_payoff(card_inputs)
