"""Canada Pension Plan retirement benefit estimate by start age (2025 figures).

Pure functions. No I/O.
"""

from decimal import Decimal

from maplecalc.engine.errors import DomainError
from maplecalc.engine.money import ONE, ZERO
from maplecalc.models.inputs import CPPInputs
from maplecalc.models.results import CPPResult

CPP_MAX_MONTHLY = Decimal("1364.60")  # At 65
CPP_YMPE = Decimal("71300")  # Year's Maximum Pensionable Earnings
CPP_EXEMPTION = Decimal("3500")
CPP_BEST_YEARS = 39

EARLY_REDUCTION_PER_MONTH = Decimal("0.006")  # 36% at 60
LATE_INCREASE_PER_MONTH = Decimal("0.007")  # 42% at 70

STANDARD_AGE = 65
EARLIEST_AGE = 60
LATEST_AGE = 70
LIFETIME_AGE = 85


def _breakeven(early: Decimal, early_age: int, late: Decimal, late_age: int) -> Decimal | None:
    """Age at which cumulative payments starting later catch up."""
    if late == early:
        return None
    return (late * late_age - early * early_age) / (late - early)


def _lifetime(monthly: Decimal, start_age: int) -> Decimal:
    return monthly * (LIFETIME_AGE - start_age) * 12


def cpp_benefits(inputs: CPPInputs) -> CPPResult:
    if inputs.average_income <= 0:
        raise DomainError("Average income must be greater than $0")
    if inputs.years_contributed <= 0:
        raise DomainError("Years contributed must be at least 1")
    if inputs.current_age < 18:
        raise DomainError("CPP contributions start at age 18")

    pensionable = min(inputs.average_income, CPP_YMPE) - CPP_EXEMPTION
    earnings_ratio = max(ZERO, pensionable / (CPP_YMPE - CPP_EXEMPTION))
    years_factor = Decimal(min(inputs.years_contributed, CPP_BEST_YEARS)) / CPP_BEST_YEARS
    base = CPP_MAX_MONTHLY * earnings_ratio * years_factor

    at_60 = base * (ONE - EARLY_REDUCTION_PER_MONTH * (STANDARD_AGE - EARLIEST_AGE) * 12)
    at_70 = base * (ONE + LATE_INCREASE_PER_MONTH * (LATEST_AGE - STANDARD_AGE) * 12)

    return CPPResult(
        pensionable_income=max(ZERO, pensionable),
        earnings_ratio=earnings_ratio,
        years_factor=years_factor,
        base_monthly=base,
        at_60_monthly=at_60,
        at_65_monthly=base,
        at_70_monthly=at_70,
        breakeven_60_65=_breakeven(at_60, EARLIEST_AGE, base, STANDARD_AGE),
        breakeven_65_70=_breakeven(base, STANDARD_AGE, at_70, LATEST_AGE),
        lifetime_60_to_85=_lifetime(at_60, EARLIEST_AGE),
        lifetime_65_to_85=_lifetime(base, STANDARD_AGE),
        lifetime_70_to_85=_lifetime(at_70, LATEST_AGE),
        years_until_65=max(0, STANDARD_AGE - inputs.current_age),
    )
