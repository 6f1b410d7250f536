"""Declining-balance payoff loop and annuity payment solver.

Pure functions: Decimal in, dataclass out. No I/O.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from maplecalc.engine.errors import DoesNotAmortizeError, DomainError
from maplecalc.engine.money import ONE, ZERO

logger = logging.getLogger(__name__)

DEFAULT_PERIOD_CAP = 1200  # 100 years of monthly periods
PAID_OFF_EPSILON = Decimal("0.01")
# Below this periodic rate (1+r)^n loses precision; treat as interest-free
ZERO_RATE_THRESHOLD = Decimal("1e-12")


@dataclass(frozen=True)
class FixedPayment:
    """Pay the same amount every period (never less than interest + increment)."""
    amount: Decimal
    min_increment: Decimal = Decimal("0.01")

    def amount_due(self, balance: Decimal, interest: Decimal) -> Decimal:
        return max(self.amount, interest + self.min_increment)

    def outpaces(self, balance: Decimal, interest: Decimal) -> bool:
        return self.amount > interest


@dataclass(frozen=True)
class MinimumPayment:
    """Card-issuer minimum: greater of a percent of balance, a floor, or interest + $1."""
    percent_of_balance: Decimal
    floor: Decimal
    interest_increment: Decimal = Decimal("1")

    def amount_due(self, balance: Decimal, interest: Decimal) -> Decimal:
        return max(self.floor, balance * self.percent_of_balance, interest + self.interest_increment)

    def outpaces(self, balance: Decimal, interest: Decimal) -> bool:
        return self.amount_due(balance, interest) > interest


PaymentRule = FixedPayment | MinimumPayment


@dataclass(frozen=True)
class PayoffPeriod:
    period: int
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal


@dataclass(frozen=True)
class PayoffSchedule:
    periods: tuple[PayoffPeriod, ...]
    opening_balance: Decimal
    capped: bool  # True when the period cap stopped the loop before payoff

    @property
    def amortizes(self) -> bool:
        return not self.capped

    @property
    def period_count(self) -> int:
        return len(self.periods)

    @property
    def total_paid(self) -> Decimal:
        return sum((p.payment for p in self.periods), ZERO)

    @property
    def total_interest(self) -> Decimal:
        return sum((p.interest for p in self.periods), ZERO)

    @property
    def total_principal(self) -> Decimal:
        return sum((p.principal for p in self.periods), ZERO)

    @property
    def final_balance(self) -> Decimal:
        if not self.periods:
            return self.opening_balance
        return self.periods[-1].balance

    @property
    def first_payment(self) -> Decimal:
        return self.periods[0].payment if self.periods else ZERO


@dataclass(frozen=True)
class TargetPayment:
    periods: int
    payment: Decimal
    total_paid: Decimal
    total_interest: Decimal


def payoff_schedule(
    balance: Decimal,
    periodic_rate: Decimal,
    rule: PaymentRule,
    period_cap: int = DEFAULT_PERIOD_CAP,
    epsilon: Decimal = PAID_OFF_EPSILON,
) -> PayoffSchedule:
    """Run the payoff recurrence until the balance is cleared or the cap is hit.

    Each period:
        interest  = balance * rate
        payment   = rule amount (at least interest + increment), capped at balance + interest
        principal = payment - interest
        balance   = max(0, balance - principal)

    A run that hits ``period_cap`` with a balance still owing is returned with
    ``capped=True``; callers must treat it as "does not amortize". So is a run
    whose own payment does not exceed the first period's interest, even when
    the interest + increment floor would eventually clear a small balance.
    """
    if balance <= 0:
        raise DomainError("Balance must be greater than $0")
    if periodic_rate < 0:
        raise DomainError("Interest rate cannot be negative")
    if period_cap <= 0:
        raise DomainError("Period cap must be positive")

    stalled = not rule.outpaces(balance, balance * periodic_rate)
    periods: list[PayoffPeriod] = []
    remaining = balance
    period = 0

    while remaining > epsilon and period < period_cap:
        period += 1
        interest = remaining * periodic_rate
        payment = min(remaining + interest, rule.amount_due(remaining, interest))
        principal = payment - interest
        remaining = max(ZERO, remaining - principal)
        periods.append(PayoffPeriod(
            period=period,
            payment=payment,
            interest=interest,
            principal=principal,
            balance=remaining,
        ))

    capped = stalled or remaining > epsilon
    if stalled:
        logger.warning("Payment does not exceed first-period interest on %s", balance)
    elif capped:
        logger.warning(
            "Payoff capped at %d periods with %s still owing", period_cap, remaining
        )
    return PayoffSchedule(periods=tuple(periods), opening_balance=balance, capped=capped)


def require_amortizing(schedule: PayoffSchedule) -> PayoffSchedule:
    """Raise DoesNotAmortizeError for a capped schedule, else return it."""
    if schedule.capped:
        raise DoesNotAmortizeError()
    return schedule


def annuity_payment(principal: Decimal, periodic_rate: Decimal, periods: int) -> Decimal:
    """Level payment that amortizes ``principal`` in exactly ``periods`` periods.

    payment = P * [r(1+r)^n] / [(1+r)^n - 1], or P / n when r is (near) zero.
    """
    if periods <= 0:
        raise DomainError("Number of periods must be greater than 0")
    if periodic_rate < 0:
        raise DomainError("Interest rate cannot be negative")
    if principal <= 0:
        return ZERO
    if periodic_rate < ZERO_RATE_THRESHOLD:
        return principal / periods

    factor = (ONE + periodic_rate) ** periods
    return principal * (periodic_rate * factor) / (factor - ONE)


def target_payment(principal: Decimal, periodic_rate: Decimal, periods: int) -> TargetPayment:
    """Payment needed to clear ``principal`` in ``periods``, with the interest it costs."""
    payment = annuity_payment(principal, periodic_rate, periods)
    total_paid = payment * periods
    return TargetPayment(
        periods=periods,
        payment=payment,
        total_paid=total_paid,
        total_interest=total_paid - principal,
    )


def max_principal(payment: Decimal, periodic_rate: Decimal, periods: int) -> Decimal:
    """Largest principal a level ``payment`` amortizes in ``periods`` (inverse annuity)."""
    if periods <= 0:
        raise DomainError("Number of periods must be greater than 0")
    if periodic_rate < 0:
        raise DomainError("Interest rate cannot be negative")
    if payment <= 0:
        return ZERO
    if periodic_rate < ZERO_RATE_THRESHOLD:
        return payment * periods

    factor = (ONE + periodic_rate) ** periods
    return payment * (factor - ONE) / (periodic_rate * factor)


def yearly_summary(schedule: PayoffSchedule, periods_per_year: int = 12) -> list[dict]:
    """Aggregate a payoff schedule into yearly blocks.

    Returns list of dicts with keys: year, paid, interest, principal, ending_balance
    """
    yearly: list[dict] = []
    year_paid = ZERO
    year_interest = ZERO
    year_principal = ZERO

    for p in schedule.periods:
        year_paid += p.payment
        year_interest += p.interest
        year_principal += p.principal

        if p.period % periods_per_year == 0 or p.period == schedule.period_count:
            yearly.append({
                "year": (p.period - 1) // periods_per_year + 1,
                "paid": year_paid,
                "interest": year_interest,
                "principal": year_principal,
                "ending_balance": p.balance,
            })
            year_paid = ZERO
            year_interest = ZERO
            year_principal = ZERO

    return yearly
