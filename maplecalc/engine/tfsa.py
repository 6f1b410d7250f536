"""TFSA contribution room and tax-free growth projection.

Pure functions. No I/O.
"""

import logging
from decimal import Decimal

from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.money import ZERO
from maplecalc.engine.projection import project_growth, required_rate
from maplecalc.models.inputs import TFSAInputs
from maplecalc.models.results import TFSAResult

logger = logging.getLogger(__name__)

FIRST_TFSA_YEAR = 2009
ELIGIBILITY_AGE = 18
CURRENT_YEAR = 2025
MAX_YEARS = 100

# Annual contribution limits by calendar year
TFSA_LIMITS: dict[int, Decimal] = {
    2009: Decimal("5000"), 2010: Decimal("5000"), 2011: Decimal("5000"),
    2012: Decimal("5000"), 2013: Decimal("5500"), 2014: Decimal("5500"),
    2015: Decimal("10000"), 2016: Decimal("5500"), 2017: Decimal("5500"),
    2018: Decimal("5500"), 2019: Decimal("6000"), 2020: Decimal("6000"),
    2021: Decimal("6000"), 2022: Decimal("6000"), 2023: Decimal("6500"),
    2024: Decimal("7000"), 2025: Decimal("7000"),
}

# Flat marginal rate used to value the tax shelter
TAXABLE_ACCOUNT_RATE = Decimal("0.40")

MILESTONE_YEARS = (5, 10, 15, 20, 25, 30)

INVESTMENT_PRESETS: dict[str, Decimal] = {
    "hisa_gic": Decimal("0.045"),
    "conservative_etf": Decimal("0.055"),
    "balanced_etf": Decimal("0.07"),
    "growth_etf": Decimal("0.085"),
    "all_equity_etf": Decimal("0.10"),
}


def annual_limit(year: int = CURRENT_YEAR) -> Decimal:
    """Limit for ``year``; years past the table repeat the latest published limit."""
    if year < FIRST_TFSA_YEAR:
        return ZERO
    return TFSA_LIMITS.get(year, TFSA_LIMITS[max(TFSA_LIMITS)])


def cumulative_room(through_year: int = CURRENT_YEAR) -> Decimal:
    return sum((limit for year, limit in TFSA_LIMITS.items() if year <= through_year), ZERO)


def lifetime_room(birth_year: int | None, current_year: int = CURRENT_YEAR) -> Decimal:
    """Total room accrued by ``current_year`` for someone born in ``birth_year``.

    Unknown birth year assumes eligibility since 2009.
    """
    if birth_year is None:
        return cumulative_room(current_year)
    eligible_year = max(birth_year + ELIGIBILITY_AGE, FIRST_TFSA_YEAR)
    if eligible_year > current_year:
        return ZERO
    return sum(
        (limit for year, limit in TFSA_LIMITS.items() if eligible_year <= year <= current_year),
        ZERO,
    )


def tfsa_growth(inputs: TFSAInputs, current_year: int = CURRENT_YEAR) -> TFSAResult:
    """Project a TFSA year by year (contribution at the start of each year)."""
    if inputs.years <= 0:
        raise DomainError("Number of years must be greater than 0")
    if inputs.years > MAX_YEARS:
        raise DomainError(f"Projection cannot exceed {MAX_YEARS} years")
    if inputs.annual_return < 0:
        raise DomainError("Return rate cannot be negative")
    if inputs.contributed_to_date < 0:
        raise DomainError("Contributions to date cannot be negative")
    if inputs.current_balance <= 0 and inputs.annual_contribution <= 0:
        raise MissingInputError("Enter a current balance or an annual contribution")

    projection = project_growth(
        inputs.current_balance, inputs.annual_contribution, inputs.annual_return, inputs.years
    )
    final_balance = projection.final_balance
    total_invested = inputs.current_balance + projection.total_contributions
    total_growth = final_balance - total_invested
    growth_ratio = total_growth / total_invested if total_invested > 0 else ZERO

    room = lifetime_room(inputs.birth_year, current_year)
    remaining = max(ZERO, room - inputs.contributed_to_date)

    milestones = tuple(
        (year, projection.balance_at(year)) for year in MILESTONE_YEARS if year <= inputs.years
    )

    max_scenario = project_growth(
        inputs.current_balance, annual_limit(current_year), inputs.annual_return, inputs.years
    )

    required = None
    reachable = None
    if inputs.goal is not None:
        required = required_rate(
            inputs.current_balance, inputs.annual_contribution, inputs.years, inputs.goal
        )
        reachable = required is not None
        logger.debug("TFSA goal %s needs rate %s", inputs.goal, required)

    return TFSAResult(
        projection=projection,
        final_balance=final_balance,
        total_invested=total_invested,
        total_growth=total_growth,
        growth_ratio=growth_ratio,
        tax_savings=total_growth * TAXABLE_ACCOUNT_RATE,
        lifetime_room=room,
        remaining_room=remaining,
        exceeds_room=inputs.annual_contribution > remaining,
        milestones=milestones,
        max_contribution_final=max_scenario.final_balance,
        required_return=required,
        goal_reachable=reachable,
    )
