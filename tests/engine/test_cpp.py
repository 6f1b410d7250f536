from decimal import Decimal

import pytest

from maplecalc.engine.cpp import CPP_MAX_MONTHLY, cpp_benefits
from maplecalc.engine.errors import DomainError
from maplecalc.engine.money import to_cents
from maplecalc.models.inputs import CPPInputs


@pytest.fixture
def max_contributor() -> CPPInputs:
    """Earned above the YMPE for the full 39 years."""
    return CPPInputs(average_income=Decimal("80000"), years_contributed=39, current_age=40)


class TestCPPBenefits:
    def test_maximum_benefit(self, max_contributor):
        result = cpp_benefits(max_contributor)
        assert result.pensionable_income == Decimal("67800")
        assert result.earnings_ratio == Decimal("1")
        assert result.at_65_monthly == CPP_MAX_MONTHLY

    def test_early_and_late_adjustments(self, max_contributor):
        result = cpp_benefits(max_contributor)
        assert result.at_60_monthly == CPP_MAX_MONTHLY * Decimal("0.64")
        assert result.at_70_monthly == CPP_MAX_MONTHLY * Decimal("1.42")

    def test_breakeven_ages(self, max_contributor):
        result = cpp_benefits(max_contributor)
        assert to_cents(result.breakeven_60_65) == Decimal("73.89")
        assert to_cents(result.breakeven_65_70) == Decimal("81.90")

    def test_lifetime_to_85(self, max_contributor):
        result = cpp_benefits(max_contributor)
        assert result.lifetime_65_to_85 == Decimal("327504")
        assert result.lifetime_70_to_85 > result.lifetime_65_to_85

    def test_fewer_years_scales_benefit(self):
        result = cpp_benefits(CPPInputs(Decimal("80000"), 20, 40))
        assert result.years_factor == Decimal(20) / 39
        assert result.at_65_monthly < CPP_MAX_MONTHLY

    def test_years_factor_capped(self):
        assert cpp_benefits(CPPInputs(Decimal("80000"), 45, 64)).years_factor == Decimal("1")

    def test_income_below_exemption(self):
        result = cpp_benefits(CPPInputs(Decimal("3000"), 10, 30))
        assert result.pensionable_income == Decimal("0")
        assert result.at_65_monthly == Decimal("0")
        assert result.breakeven_60_65 is None
        assert result.breakeven_65_70 is None

    def test_years_until_65(self):
        assert cpp_benefits(CPPInputs(Decimal("50000"), 10, 30)).years_until_65 == 35
        assert cpp_benefits(CPPInputs(Decimal("50000"), 40, 70)).years_until_65 == 0

    @pytest.mark.parametrize("income,years,age", [
        ("0", 10, 30),
        ("50000", 0, 30),
        ("50000", 10, 17),
    ])
    def test_invalid(self, income, years, age):
        with pytest.raises(DomainError):
            cpp_benefits(CPPInputs(Decimal(income), years, age))
