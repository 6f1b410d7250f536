"""Credit-card payoff: minimum payments vs a fixed payment vs fixed + extra.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

import logging
from decimal import Decimal

from maplecalc.engine.amortization import (
    DEFAULT_PERIOD_CAP,
    FixedPayment,
    MinimumPayment,
    payoff_schedule,
    target_payment,
    yearly_summary,
)
from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.money import ZERO, monthly_rate
from maplecalc.models.inputs import CreditCardInputs
from maplecalc.models.results import CreditCardResult, PayoffScenario

logger = logging.getLogger(__name__)

PAYOFF_TARGET_MONTHS = (12, 24, 36, 48, 60)


def _savings(
    slower: PayoffScenario, faster: PayoffScenario
) -> tuple[Decimal | None, int | None]:
    if not (slower.amortizes and faster.amortizes):
        return None, None
    return (
        slower.total_interest - faster.total_interest,
        slower.months - faster.months,
    )


def credit_card_payoff(
    inputs: CreditCardInputs, period_cap: int = DEFAULT_PERIOD_CAP
) -> CreditCardResult:
    """Compare minimum-only repayment with fixed and fixed-plus-extra payments."""
    if inputs.balance <= 0:
        raise MissingInputError("Enter your card balance")
    if inputs.annual_rate < 0:
        raise DomainError("Interest rate cannot be negative")
    if inputs.minimum_percent < 0 or inputs.minimum_floor < 0:
        raise DomainError("Minimum payment settings cannot be negative")
    if inputs.fixed_payment < 0 or inputs.extra_payment < 0:
        raise DomainError("Payments cannot be negative")

    rate = monthly_rate(inputs.annual_rate)
    logger.debug("Credit card payoff: balance=%s rate=%s", inputs.balance, inputs.annual_rate)

    minimum = PayoffScenario(
        label="Minimum payments",
        schedule=payoff_schedule(
            inputs.balance,
            rate,
            MinimumPayment(inputs.minimum_percent, inputs.minimum_floor),
            period_cap=period_cap,
        ),
    )

    fixed_amount = inputs.fixed_payment if inputs.fixed_payment > 0 else minimum.first_payment
    fixed = PayoffScenario(
        label="Fixed payment",
        schedule=payoff_schedule(
            inputs.balance, rate, FixedPayment(fixed_amount), period_cap=period_cap
        ),
    )

    extra = None
    if inputs.extra_payment > 0:
        extra = PayoffScenario(
            label="Fixed payment + extra",
            schedule=payoff_schedule(
                inputs.balance,
                rate,
                FixedPayment(fixed_amount + inputs.extra_payment),
                period_cap=period_cap,
            ),
        )

    interest_saved_fixed, months_saved_fixed = _savings(minimum, fixed)
    interest_saved_extra, months_saved_extra = (
        _savings(fixed, extra) if extra is not None else (ZERO, 0)
    )

    targets = tuple(
        target_payment(inputs.balance, rate, months) for months in PAYOFF_TARGET_MONTHS
    )

    return CreditCardResult(
        balance=inputs.balance,
        minimum=minimum,
        fixed=fixed,
        extra=extra,
        targets=targets,
        yearly=yearly_summary(minimum.schedule),
        interest_saved_fixed=interest_saved_fixed,
        months_saved_fixed=months_saved_fixed,
        interest_saved_extra=interest_saved_extra,
        months_saved_extra=months_saved_extra,
    )
