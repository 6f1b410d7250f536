"""Emergency fund sizing from essential expenses and household risk.

Pure functions. No I/O.
"""

import math
from decimal import Decimal

from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.money import ZERO, monthly_rate
from maplecalc.models.inputs import Dependents, EmergencyFundInputs, IncomeType, JobStability
from maplecalc.models.results import EmergencyFundResult, EmergencyMilestone

# (min months, max months)
STABILITY_MONTHS: dict[JobStability, tuple[int, int]] = {
    JobStability.VERY_STABLE: (3, 3),
    JobStability.STABLE: (3, 6),
    JobStability.VARIABLE: (6, 9),
    JobStability.UNCERTAIN: (9, 12),
}

DEPENDENT_MONTHS: dict[Dependents, int] = {
    Dependents.NONE: 0,
    Dependents.ONE: 1,
    Dependents.TWO_PLUS: 2,
}

INCOME_MONTHS: dict[IncomeType, int] = {
    IncomeType.EMPLOYED: 0,
    IncomeType.SELF_EMPLOYED: 2,
    IncomeType.DUAL_INCOME: -1,
    IncomeType.SINGLE_INCOME: 1,
}

MIN_RECOMMENDED_MONTHS = Decimal("3")
MAX_RECOMMENDED_MONTHS = Decimal("12")
MILESTONE_MONTHS = (Decimal("1"), Decimal("2"), Decimal("3"), Decimal("6"))
SAVINGS_PERIOD_CAP = 600  # Months


def recommended_months(
    stability: JobStability, dependents: Dependents, income_type: IncomeType
) -> Decimal:
    low, high = STABILITY_MONTHS[stability]
    months = Decimal(low + high) / 2 + DEPENDENT_MONTHS[dependents] + INCOME_MONTHS[income_type]
    return max(MIN_RECOMMENDED_MONTHS, min(MAX_RECOMMENDED_MONTHS, months))


def _months_with_interest(
    saved: Decimal, monthly: Decimal, rate: Decimal, target: Decimal
) -> tuple[int | None, Decimal]:
    """Months until ``target`` with deposits at month end, and interest earned on the way."""
    balance = saved
    interest = ZERO
    months = 0
    while balance < target:
        if months >= SAVINGS_PERIOD_CAP:
            return None, interest
        earned = balance * rate
        balance = balance + earned + monthly
        interest += earned
        months += 1
    return months, interest


def emergency_fund(inputs: EmergencyFundInputs) -> EmergencyFundResult:
    expenses = inputs.monthly_expenses
    if expenses <= 0:
        raise MissingInputError("Enter your monthly essential expenses")
    if inputs.current_savings < 0 or inputs.monthly_savings < 0:
        raise DomainError("Savings cannot be negative")
    if inputs.savings_rate < 0:
        raise DomainError("Interest rate cannot be negative")

    low, high = STABILITY_MONTHS[inputs.job_stability]
    dep_months = DEPENDENT_MONTHS[inputs.dependents]
    income_months = INCOME_MONTHS[inputs.income_type]
    months = recommended_months(inputs.job_stability, inputs.dependents, inputs.income_type)

    min_target = expenses * low
    ideal_target = expenses * months
    max_target = expenses * high + expenses * dep_months + expenses * max(0, income_months)

    saved = inputs.current_savings
    monthly = inputs.monthly_savings
    gap = max(ZERO, ideal_target - saved)

    months_to_goal = None
    if monthly > 0:
        months_to_goal = math.ceil(gap / monthly)

    months_with_interest = None
    interest_earned = ZERO
    if monthly > 0 and gap > 0:
        months_with_interest, interest_earned = _months_with_interest(
            saved, monthly, monthly_rate(inputs.savings_rate), ideal_target
        )

    milestones = []
    for m in sorted(set(MILESTONE_MONTHS) | {months}):
        amount = expenses * m
        away = None
        if monthly > 0:
            away = max(0, math.ceil((amount - saved) / monthly))
        milestones.append(EmergencyMilestone(
            months=m, amount=amount, reached=saved >= amount, months_away=away,
        ))

    percent = min(Decimal("100"), saved / ideal_target * 100)

    return EmergencyFundResult(
        monthly_expenses=expenses,
        recommended_months=months,
        min_target=min_target,
        ideal_target=ideal_target,
        max_target=max_target,
        gap=gap,
        months_to_goal=months_to_goal,
        months_with_interest=months_with_interest,
        interest_earned=interest_earned,
        percent_complete=percent,
        milestones=tuple(milestones),
    )
