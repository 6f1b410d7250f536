"""50/30/20 budget: needs, wants and savings against monthly take-home pay.

Pure functions. No I/O.
"""

from decimal import Decimal
from typing import Mapping

from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.money import ONE, ZERO
from maplecalc.models.inputs import BudgetInputs
from maplecalc.models.results import BudgetBucket, BudgetResult

NEEDS_SHARE = Decimal("0.50")
WANTS_SHARE = Decimal("0.30")
SAVINGS_SHARE = Decimal("0.20")


def _bucket(name: str, share: Decimal, amounts: Mapping[str, Decimal], monthly_net: Decimal) -> BudgetBucket:
    if any(v < 0 for v in amounts.values()):
        raise DomainError(f"{name} amounts cannot be negative")
    actual = sum(amounts.values(), ZERO)
    return BudgetBucket(
        name=name,
        target_share=share,
        target=monthly_net * share,
        actual=actual,
        actual_share=actual / monthly_net,
    )


def budget_5030(inputs: BudgetInputs) -> BudgetResult:
    if inputs.gross_income <= 0:
        raise MissingInputError("Enter your gross income")
    if not ZERO <= inputs.tax_rate < ONE:
        raise DomainError("Tax rate must be between 0% and 100%")

    annual_gross = inputs.gross_income * inputs.pay_frequency.periods_per_year
    annual_net = annual_gross * (ONE - inputs.tax_rate)
    monthly_net = annual_net / 12

    needs = _bucket("Needs", NEEDS_SHARE, inputs.needs, monthly_net)
    wants = _bucket("Wants", WANTS_SHARE, inputs.wants, monthly_net)
    savings = _bucket("Savings", SAVINGS_SHARE, inputs.savings, monthly_net)
    allocated = needs.actual + wants.actual + savings.actual

    return BudgetResult(
        annual_gross=annual_gross,
        annual_net=annual_net,
        monthly_net=monthly_net,
        needs=needs,
        wants=wants,
        savings=savings,
        total_allocated=allocated,
        unallocated=monthly_net - allocated,
    )
