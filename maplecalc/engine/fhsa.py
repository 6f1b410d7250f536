"""First Home Savings Account: room, tax-sheltered growth, and the RRSP alternative.

Pure functions. No I/O.
"""

import logging
import math
from decimal import Decimal

from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.money import ONE, ZERO
from maplecalc.engine.projection import periods_to_target, project_growth
from maplecalc.models.inputs import FHSAInputs, Province
from maplecalc.models.results import FHSAResult

logger = logging.getLogger(__name__)

FHSA_ANNUAL_LIMIT = Decimal("8000")
FHSA_LIFETIME_LIMIT = Decimal("40000")
FHSA_MAX_YEARS = 15
RRSP_WITHDRAWAL_TAX = Decimal("0.25")

# Combined federal + provincial marginal rates, roughly the $80-120k range
MARGINAL_RATES: dict[Province, Decimal] = {
    Province.AB: Decimal("0.3800"),
    Province.BC: Decimal("0.3880"),
    Province.MB: Decimal("0.4275"),
    Province.NB: Decimal("0.4100"),
    Province.NL: Decimal("0.4300"),
    Province.NS: Decimal("0.4379"),
    Province.NT: Decimal("0.3405"),
    Province.NU: Decimal("0.3305"),
    Province.ON: Decimal("0.4341"),
    Province.PE: Decimal("0.4137"),
    Province.QC: Decimal("0.4530"),
    Province.SK: Decimal("0.4050"),
    Province.YT: Decimal("0.3800"),
}
DEFAULT_MARGINAL_RATE = Decimal("0.40")


def fhsa_room(years_open: int) -> tuple[Decimal, Decimal, int]:
    """(room accrued, room available this year, years until the lifetime limit)."""
    if years_open < 0:
        raise DomainError("Years open cannot be negative")
    accrued = min(FHSA_ANNUAL_LIMIT * years_open, FHSA_LIFETIME_LIMIT)
    current = min(accrued + FHSA_ANNUAL_LIMIT, FHSA_LIFETIME_LIMIT)
    years_to_max = max(0, math.ceil((FHSA_LIFETIME_LIMIT - accrued) / FHSA_ANNUAL_LIMIT))
    return accrued, current, years_to_max


def fhsa_projection(inputs: FHSAInputs) -> FHSAResult:
    if inputs.income <= 0:
        raise MissingInputError("Enter your annual income")
    if inputs.annual_contribution <= 0:
        raise MissingInputError("Enter your annual contribution")
    if inputs.annual_return < 0:
        raise DomainError("Return rate cannot be negative")
    if inputs.years_open >= FHSA_MAX_YEARS:
        raise DomainError(f"An FHSA can stay open for at most {FHSA_MAX_YEARS} years")

    accrued, current_room, years_to_max = fhsa_room(inputs.years_open)
    marginal = MARGINAL_RATES.get(inputs.province, DEFAULT_MARGINAL_RATE)
    contribution = min(inputs.annual_contribution, FHSA_ANNUAL_LIMIT)
    horizon = FHSA_MAX_YEARS - inputs.years_open

    projection = project_growth(
        ZERO, contribution, inputs.annual_return, horizon,
        contribution_ceiling=FHSA_LIFETIME_LIMIT,
    )
    final_balance = projection.final_balance
    total_contributions = projection.total_contributions

    # An RRSP with the same deposits grows identically but is taxed on the way out
    rrsp_after_tax = final_balance * (ONE - RRSP_WITHDRAWAL_TAX)

    years_to_goal = None
    on_track = None
    if inputs.down_payment_goal is not None and inputs.down_payment_goal > 0:
        years_to_goal = periods_to_target(
            ZERO, contribution, inputs.annual_return, inputs.down_payment_goal,
            max_periods=horizon, contribution_ceiling=FHSA_LIFETIME_LIMIT,
        )
        on_track = years_to_goal is not None

    logger.debug(
        "FHSA: contribution=%s rate=%s horizon=%d final=%s",
        contribution, inputs.annual_return, horizon, final_balance,
    )

    return FHSAResult(
        projection=projection,
        marginal_rate=marginal,
        room_accrued=accrued,
        current_room=current_room,
        years_to_max=years_to_max,
        final_balance=final_balance,
        total_contributions=total_contributions,
        total_growth=final_balance - total_contributions,
        annual_tax_saving=contribution * marginal,
        total_tax_saving=total_contributions * marginal,
        rrsp_final_after_tax=rrsp_after_tax,
        fhsa_advantage=final_balance - rrsp_after_tax,
        years_to_goal=years_to_goal,
        on_track=on_track,
    )
