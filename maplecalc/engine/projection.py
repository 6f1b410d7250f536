"""Compounding-contribution projector.

Contribution lands before growth each period:
    balance <- (balance + contribution) * (1 + rate)

Pure functions. No I/O.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from scipy.optimize import brentq

from maplecalc.engine.errors import DomainError, NumericError
from maplecalc.engine.money import FOUR_PLACES, ONE, ZERO

logger = logging.getLogger(__name__)

MAX_SOLVER_RATE = 1.0  # 100% per period upper bound for the rate search


@dataclass(frozen=True)
class GrowthPeriod:
    period: int
    contribution: Decimal
    growth: Decimal
    ending_balance: Decimal
    cumulative_contributions: Decimal
    cumulative_growth: Decimal


@dataclass(frozen=True)
class GrowthProjection:
    periods: tuple[GrowthPeriod, ...]
    starting_balance: Decimal
    rate: Decimal
    ceiling_reached_period: int | None = None  # First period clamped by the ceiling

    @property
    def final_balance(self) -> Decimal:
        if not self.periods:
            return self.starting_balance
        return self.periods[-1].ending_balance

    @property
    def total_contributions(self) -> Decimal:
        """Contributions made during the projection (excludes starting balance)."""
        if not self.periods:
            return ZERO
        return self.periods[-1].cumulative_contributions

    @property
    def total_growth(self) -> Decimal:
        if not self.periods:
            return ZERO
        return self.periods[-1].cumulative_growth

    def balance_at(self, period: int) -> Decimal:
        if period <= 0:
            return self.starting_balance
        return self.periods[min(period, len(self.periods)) - 1].ending_balance


def _validate(rate: Decimal, periods: int, contribution: Decimal, starting_balance: Decimal) -> None:
    if rate < 0:
        raise DomainError("Return rate cannot be negative")
    if periods <= 0:
        raise DomainError("Number of years must be greater than 0")
    if contribution < 0:
        raise DomainError("Contribution cannot be negative")
    if starting_balance < 0:
        raise DomainError("Starting balance cannot be negative")


def project_growth(
    starting_balance: Decimal,
    contribution: Decimal,
    rate: Decimal,
    periods: int,
    contribution_ceiling: Decimal | None = None,
) -> GrowthProjection:
    """Project period-by-period balances.

    Args:
        starting_balance: Balance before the first period
        contribution: Contribution made at the start of every period
        rate: Growth rate per period (e.g. 0.07 for 7%)
        periods: Horizon, in periods
        contribution_ceiling: Lifetime cap on contributions made during the
            projection. Once reached, contributions are clamped to the room
            left (possibly zero) and growth keeps compounding on the balance.
    """
    _validate(rate, periods, contribution, starting_balance)
    if contribution_ceiling is not None and contribution_ceiling < 0:
        raise DomainError("Contribution limit cannot be negative")

    rows: list[GrowthPeriod] = []
    balance = starting_balance
    total_contrib = ZERO
    total_growth = ZERO
    ceiling_period: int | None = None

    for period in range(1, periods + 1):
        applied = contribution
        if contribution_ceiling is not None:
            room = max(ZERO, contribution_ceiling - total_contrib)
            if applied > room:
                applied = room
                if ceiling_period is None:
                    ceiling_period = period

        growth = (balance + applied) * rate
        balance = balance + applied + growth
        total_contrib += applied
        total_growth += growth

        rows.append(GrowthPeriod(
            period=period,
            contribution=applied,
            growth=growth,
            ending_balance=balance,
            cumulative_contributions=total_contrib,
            cumulative_growth=total_growth,
        ))

    return GrowthProjection(
        periods=tuple(rows),
        starting_balance=starting_balance,
        rate=rate,
        ceiling_reached_period=ceiling_period,
    )


def future_value(starting_balance: Decimal, contribution: Decimal, rate: Decimal, periods: int) -> Decimal:
    """Closed-form final balance of ``project_growth`` without a ceiling."""
    _validate(rate, periods, contribution, starting_balance)
    if rate == 0:
        return starting_balance + contribution * periods
    factor = (ONE + rate) ** periods
    return starting_balance * factor + contribution * (factor - ONE) / rate * (ONE + rate)


def periods_to_target(
    starting_balance: Decimal,
    contribution: Decimal,
    rate: Decimal,
    target: Decimal,
    max_periods: int,
    contribution_ceiling: Decimal | None = None,
) -> int | None:
    """First period whose ending balance reaches ``target``, or None within ``max_periods``.

    Returns 0 when the starting balance already meets the target.
    """
    if starting_balance >= target:
        return 0
    projection = project_growth(
        starting_balance, contribution, rate, max_periods, contribution_ceiling
    )
    for row in projection.periods:
        if row.ending_balance >= target:
            return row.period
    return None


def required_rate(
    starting_balance: Decimal,
    contribution: Decimal,
    periods: int,
    target: Decimal,
) -> Decimal | None:
    """Growth rate per period that lands exactly on ``target`` after ``periods``.

    Returns Decimal("0") when contributions alone reach the target and None
    when even a 100% rate falls short. Uses Brent's method on the closed form.
    """
    _validate(ZERO, periods, contribution, starting_balance)
    if target <= 0:
        raise DomainError("Goal must be greater than $0")
    if future_value(starting_balance, contribution, ZERO, periods) >= target:
        return ZERO

    start = float(starting_balance)
    contrib = float(contribution)
    goal = float(target)

    def shortfall(rate: float) -> float:
        factor = (1 + rate) ** periods
        return start * factor + contrib * (factor - 1) / rate * (1 + rate) - goal

    lower = 1e-9
    try:
        if shortfall(MAX_SOLVER_RATE) < 0:
            logger.debug("Goal %s unreachable within %d periods", target, periods)
            return None
        rate = brentq(shortfall, lower, MAX_SOLVER_RATE, xtol=1e-10, maxiter=1000)
    except (OverflowError, ValueError) as e:
        # (1 + rate) ** periods leaves float range on long horizons
        raise NumericError("Could not solve for the return needed") from e
    return Decimal(str(rate)).quantize(FOUR_PLACES, ROUND_HALF_UP)
