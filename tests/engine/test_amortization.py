from decimal import Decimal

import pytest

from maplecalc.engine.amortization import (
    FixedPayment,
    MinimumPayment,
    annuity_payment,
    max_principal,
    payoff_schedule,
    require_amortizing,
    target_payment,
    yearly_summary,
)
from maplecalc.engine.errors import DoesNotAmortizeError, DomainError
from maplecalc.engine.money import monthly_rate, to_cents

CARD_RATE = monthly_rate(Decimal("0.1999"))


class TestPayoffSchedule:
    def test_zero_rate_straight_line(self):
        schedule = payoff_schedule(Decimal("1200"), Decimal("0"), FixedPayment(Decimal("100")))
        assert schedule.period_count == 12
        assert schedule.total_paid == Decimal("1200")
        assert schedule.total_interest == Decimal("0")
        assert schedule.final_balance == Decimal("0")

    def test_total_paid_is_interest_plus_balance(self):
        schedule = payoff_schedule(Decimal("5000"), CARD_RATE, FixedPayment(Decimal("200")))
        assert schedule.amortizes
        assert abs(schedule.total_paid - (schedule.total_interest + Decimal("5000"))) < Decimal("0.01")

    def test_balance_never_increases(self):
        schedule = payoff_schedule(
            Decimal("5000"), CARD_RATE, MinimumPayment(Decimal("0.02"), Decimal("10"))
        )
        for prev, cur in zip(schedule.periods, schedule.periods[1:]):
            assert cur.balance < prev.balance

    def test_last_payment_clears_balance(self):
        schedule = payoff_schedule(Decimal("1000"), CARD_RATE, FixedPayment(Decimal("300")))
        last = schedule.periods[-1]
        assert last.balance == Decimal("0")
        assert last.payment < Decimal("300")

    def test_payment_below_interest_is_capped(self):
        """$10/month never outpaces ~$16.66 of monthly interest."""
        schedule = payoff_schedule(Decimal("1000"), CARD_RATE, FixedPayment(Decimal("10")))
        assert schedule.capped
        assert not schedule.amortizes
        assert schedule.period_count == 1200
        assert schedule.final_balance > Decimal("900")

    def test_small_balance_below_interest_does_not_amortize(self):
        """$0.05 against $0.10 of interest; the $0.01 floor alone would clear $5."""
        schedule = payoff_schedule(Decimal("5"), Decimal("0.02"), FixedPayment(Decimal("0.05")))
        assert schedule.capped
        assert not schedule.amortizes
        with pytest.raises(DoesNotAmortizeError):
            require_amortizing(schedule)

    def test_payment_equal_to_interest_does_not_amortize(self):
        schedule = payoff_schedule(Decimal("100"), Decimal("0.01"), FixedPayment(Decimal("1")))
        assert schedule.capped

    def test_minimum_rule_always_outpaces_interest(self):
        rule = MinimumPayment(Decimal("0"), Decimal("0"))
        assert rule.outpaces(Decimal("5"), Decimal("0.10"))
        assert not FixedPayment(Decimal("0.10")).outpaces(Decimal("5"), Decimal("0.10"))

    def test_custom_cap(self):
        schedule = payoff_schedule(
            Decimal("5000"), CARD_RATE, FixedPayment(Decimal("100")), period_cap=24
        )
        assert schedule.capped
        assert schedule.period_count == 24

    def test_require_amortizing(self):
        capped = payoff_schedule(Decimal("1000"), CARD_RATE, FixedPayment(Decimal("10")))
        with pytest.raises(DoesNotAmortizeError):
            require_amortizing(capped)

        ok = payoff_schedule(Decimal("1000"), CARD_RATE, FixedPayment(Decimal("300")))
        assert require_amortizing(ok) is ok

    def test_idempotent(self):
        rule = MinimumPayment(Decimal("0.03"), Decimal("15"))
        a = payoff_schedule(Decimal("2500"), CARD_RATE, rule)
        b = payoff_schedule(Decimal("2500"), CARD_RATE, rule)
        assert a == b

    def test_rejects_non_positive_balance(self):
        with pytest.raises(DomainError):
            payoff_schedule(Decimal("0"), CARD_RATE, FixedPayment(Decimal("100")))

    def test_rejects_negative_rate(self):
        with pytest.raises(DomainError):
            payoff_schedule(Decimal("100"), Decimal("-0.01"), FixedPayment(Decimal("10")))


class TestPaymentRules:
    def test_minimum_uses_percent_of_balance(self):
        rule = MinimumPayment(Decimal("0.02"), Decimal("10"))
        assert rule.amount_due(Decimal("5000"), Decimal("83.29")) == Decimal("100.00")

    def test_minimum_floor(self):
        rule = MinimumPayment(Decimal("0.02"), Decimal("10"))
        assert rule.amount_due(Decimal("100"), Decimal("1.67")) == Decimal("10")

    def test_minimum_covers_interest_plus_one(self):
        rule = MinimumPayment(Decimal("0.01"), Decimal("10"))
        assert rule.amount_due(Decimal("5000"), Decimal("83.29")) == Decimal("84.29")

    def test_fixed_never_below_interest(self):
        rule = FixedPayment(Decimal("10"))
        assert rule.amount_due(Decimal("1000"), Decimal("16.66")) == Decimal("16.67")


class TestAnnuityPayment:
    def test_standard_mortgage(self):
        """$400K at 7% for 30 years."""
        pmt = annuity_payment(Decimal("400000"), monthly_rate(Decimal("0.07")), 360)
        assert to_cents(pmt) == Decimal("2661.21")

    def test_zero_rate(self):
        assert annuity_payment(Decimal("360000"), Decimal("0"), 360) == Decimal("1000")

    def test_zero_principal(self):
        assert annuity_payment(Decimal("0"), Decimal("0.01"), 12) == Decimal("0")

    def test_rejects_zero_periods(self):
        with pytest.raises(DomainError):
            annuity_payment(Decimal("1000"), Decimal("0.01"), 0)

    def test_round_trip_pays_off_in_exactly_n(self):
        principal = Decimal("10000")
        rate = Decimal("0.01")
        pmt = annuity_payment(principal, rate, 12)
        schedule = payoff_schedule(principal, rate, FixedPayment(pmt))
        assert schedule.amortizes
        assert schedule.period_count == 12

    def test_round_trip_card(self):
        pmt = annuity_payment(Decimal("5000"), CARD_RATE, 36)
        schedule = payoff_schedule(Decimal("5000"), CARD_RATE, FixedPayment(pmt))
        assert schedule.period_count == 36


class TestTargetPayment:
    def test_interest_is_total_less_principal(self):
        t = target_payment(Decimal("5000"), CARD_RATE, 24)
        assert t.periods == 24
        assert t.total_paid == t.payment * 24
        assert t.total_interest == t.total_paid - Decimal("5000")
        assert t.total_interest > 0

    def test_shorter_target_costs_less_interest(self):
        fast = target_payment(Decimal("5000"), CARD_RATE, 12)
        slow = target_payment(Decimal("5000"), CARD_RATE, 60)
        assert fast.payment > slow.payment
        assert fast.total_interest < slow.total_interest


class TestMaxPrincipal:
    def test_inverts_annuity(self):
        rate = monthly_rate(Decimal("0.05"))
        pmt = annuity_payment(Decimal("500000"), rate, 300)
        assert abs(max_principal(pmt, rate, 300) - Decimal("500000")) < Decimal("0.0001")

    def test_zero_rate(self):
        assert max_principal(Decimal("1000"), Decimal("0"), 12) == Decimal("12000")

    def test_non_positive_payment(self):
        assert max_principal(Decimal("0"), Decimal("0.01"), 12) == Decimal("0")


class TestYearlySummary:
    def test_two_years(self):
        schedule = payoff_schedule(Decimal("2400"), Decimal("0"), FixedPayment(Decimal("100")))
        yearly = yearly_summary(schedule)
        assert len(yearly) == 2
        assert yearly[0]["year"] == 1
        assert isinstance(yearly[0]["year"], int)
        assert yearly[0]["paid"] == Decimal("1200")
        assert yearly[0]["ending_balance"] == Decimal("1200")
        assert yearly[1]["ending_balance"] == Decimal("0")

    def test_partial_final_year(self):
        schedule = payoff_schedule(Decimal("1500"), Decimal("0"), FixedPayment(Decimal("100")))
        yearly = yearly_summary(schedule)
        assert len(yearly) == 2
        assert yearly[1]["paid"] == Decimal("300")

    def test_totals_match_schedule(self):
        schedule = payoff_schedule(Decimal("5000"), CARD_RATE, FixedPayment(Decimal("150")))
        yearly = yearly_summary(schedule)
        tolerance = Decimal("0.000001")
        assert abs(sum(y["interest"] for y in yearly) - schedule.total_interest) < tolerance
        assert abs(sum(y["principal"] for y in yearly) - schedule.total_principal) < tolerance
