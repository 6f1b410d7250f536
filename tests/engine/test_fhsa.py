from dataclasses import replace
from decimal import Decimal

import pytest

from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.fhsa import (
    DEFAULT_MARGINAL_RATE,
    FHSA_LIFETIME_LIMIT,
    MARGINAL_RATES,
    fhsa_projection,
    fhsa_room,
)
from maplecalc.models.inputs import Province


class TestFHSARoom:
    def test_new_account(self):
        assert fhsa_room(0) == (Decimal("0"), Decimal("8000"), 5)

    def test_partially_used(self):
        assert fhsa_room(2) == (Decimal("16000"), Decimal("24000"), 3)

    def test_lifetime_limit_reached(self):
        assert fhsa_room(7) == (Decimal("40000"), Decimal("40000"), 0)

    def test_negative_years(self):
        with pytest.raises(DomainError):
            fhsa_room(-1)


class TestFHSAProjection:
    def test_lifetime_limit_caps_contributions(self, fhsa_inputs):
        result = fhsa_projection(fhsa_inputs)
        assert result.total_contributions == FHSA_LIFETIME_LIMIT
        assert len(result.projection.periods) == 15
        assert result.projection.ceiling_reached_period == 6
        assert result.total_growth == result.final_balance - FHSA_LIFETIME_LIMIT

    def test_annual_contribution_clamped(self, fhsa_inputs):
        result = fhsa_projection(replace(fhsa_inputs, annual_contribution=Decimal("12000")))
        assert result.projection.periods[0].contribution == Decimal("8000")
        assert result.annual_tax_saving == Decimal("8000") * MARGINAL_RATES[Province.ON]

    def test_tax_savings(self, fhsa_inputs):
        result = fhsa_projection(fhsa_inputs)
        assert result.marginal_rate == Decimal("0.4341")
        assert result.annual_tax_saving == Decimal("3472.8")
        assert result.total_tax_saving == Decimal("17364")

    def test_rrsp_comparison(self, fhsa_inputs):
        result = fhsa_projection(fhsa_inputs)
        assert result.rrsp_final_after_tax == result.final_balance * Decimal("0.75")
        assert result.fhsa_advantage > 0

    def test_horizon_shrinks_with_years_open(self, fhsa_inputs):
        result = fhsa_projection(replace(fhsa_inputs, years_open=10))
        assert len(result.projection.periods) == 5
        assert result.room_accrued == Decimal("40000")

    def test_goal_reached(self, fhsa_inputs):
        result = fhsa_projection(
            replace(fhsa_inputs, annual_return=Decimal("0"), down_payment_goal=Decimal("40000"))
        )
        assert result.years_to_goal == 5
        assert result.on_track

    def test_goal_out_of_reach(self, fhsa_inputs):
        result = fhsa_projection(replace(fhsa_inputs, down_payment_goal=Decimal("1000000")))
        assert result.years_to_goal is None
        assert result.on_track is False

    def test_no_goal(self, fhsa_inputs):
        result = fhsa_projection(fhsa_inputs)
        assert result.years_to_goal is None
        assert result.on_track is None

    def test_every_province_has_a_rate(self):
        assert set(MARGINAL_RATES) == set(Province)
        assert DEFAULT_MARGINAL_RATE == Decimal("0.40")

    def test_account_closed(self, fhsa_inputs):
        with pytest.raises(DomainError):
            fhsa_projection(replace(fhsa_inputs, years_open=15))

    def test_missing_income(self, fhsa_inputs):
        with pytest.raises(MissingInputError):
            fhsa_projection(replace(fhsa_inputs, income=Decimal("0")))

    def test_missing_contribution(self, fhsa_inputs):
        with pytest.raises(MissingInputError):
            fhsa_projection(replace(fhsa_inputs, annual_contribution=Decimal("0")))
