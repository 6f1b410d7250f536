from decimal import Decimal

import pytest

from maplecalc.engine.brackets import (
    Bracket,
    Rebate,
    apply_rebate,
    bracket_label,
    bracketed_amount,
    marginal_rate,
    validate_brackets,
)
from maplecalc.engine.errors import DomainError
from maplecalc.engine.land_transfer import ONTARIO_BRACKETS

INF = Decimal("Infinity")


class TestValidateBrackets:
    def test_ontario_table_is_valid(self):
        validate_brackets(ONTARIO_BRACKETS)

    def test_unsorted(self):
        with pytest.raises(DomainError):
            validate_brackets((
                Bracket(Decimal("100"), Decimal("0.01")),
                Bracket(Decimal("50"), Decimal("0.02")),
                Bracket(INF, Decimal("0.03")),
            ))

    def test_top_bracket_must_be_unbounded(self):
        with pytest.raises(DomainError):
            validate_brackets((Bracket(Decimal("100"), Decimal("0.01")),))

    def test_empty(self):
        with pytest.raises(DomainError):
            validate_brackets(())

    def test_negative_rate(self):
        with pytest.raises(DomainError):
            validate_brackets((Bracket(INF, Decimal("-0.01")),))


class TestBracketedAmount:
    def test_ontario_300k(self):
        result = bracketed_amount(Decimal("300000"), ONTARIO_BRACKETS)
        assert result.total == Decimal("2975")
        assert [line.tax for line in result.lines] == [
            Decimal("275.000"), Decimal("1950.000"), Decimal("750.000"),
            Decimal("0.000"), Decimal("0.000"),
        ]

    def test_boundary_is_inclusive(self):
        assert bracketed_amount(Decimal("55000"), ONTARIO_BRACKETS).total == Decimal("275")
        assert bracketed_amount(Decimal("55001"), ONTARIO_BRACKETS).total == Decimal("275.01")

    def test_lists_brackets_above_amount(self):
        result = bracketed_amount(Decimal("100000"), ONTARIO_BRACKETS)
        assert len(result.lines) == 5
        assert [line.applies for line in result.lines] == [True, True, False, False, False]

    def test_taxable_sums_to_amount(self):
        result = bracketed_amount(Decimal("2500000"), ONTARIO_BRACKETS)
        assert sum(line.taxable for line in result.lines) == Decimal("2500000")

    def test_zero_amount(self):
        result = bracketed_amount(Decimal("0"), ONTARIO_BRACKETS)
        assert result.total == Decimal("0")
        assert result.effective_rate == Decimal("0")

    def test_rejects_negative_amount(self):
        with pytest.raises(DomainError):
            bracketed_amount(Decimal("-1"), ONTARIO_BRACKETS)


class TestBracketLabel:
    def test_first(self):
        assert bracket_label(Decimal("0"), Decimal("55000")) == "First $55,000"

    def test_middle(self):
        assert bracket_label(Decimal("55000"), Decimal("250000")) == "$55,001 - $250,000"

    def test_top(self):
        assert bracket_label(Decimal("2000000"), INF) == "Over $2,000,000"

    def test_single_flat_bracket(self):
        assert bracket_label(Decimal("0"), INF) == "All amounts"


class TestRebate:
    REBATE = Rebate(Decimal("4000"), Decimal("368000"))

    def test_capped_at_tax(self):
        assert apply_rebate(Decimal("2975"), Decimal("300000"), self.REBATE) == Decimal("2975")

    def test_capped_at_maximum(self):
        assert apply_rebate(Decimal("6475"), Decimal("368000"), self.REBATE) == Decimal("4000")

    def test_no_rebate_above_ceiling(self):
        assert apply_rebate(Decimal("3995.015"), Decimal("368001"), self.REBATE) == Decimal("0")

    def test_none(self):
        assert apply_rebate(Decimal("2975"), Decimal("300000"), None) == Decimal("0")


class TestMarginalRate:
    def test_inside_bracket(self):
        assert marginal_rate(Decimal("300000"), ONTARIO_BRACKETS) == Decimal("0.015")

    def test_at_boundary_uses_next_bracket(self):
        assert marginal_rate(Decimal("55000"), ONTARIO_BRACKETS) == Decimal("0.010")

    def test_top_bracket(self):
        assert marginal_rate(Decimal("5000000"), ONTARIO_BRACKETS) == Decimal("0.025")
