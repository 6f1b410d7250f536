"""Canadian mortgage math: payment with CMHC insurance, amortization comparison,
and GDS/TDS affordability.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

import logging
from decimal import Decimal

from maplecalc.engine.amortization import (
    FixedPayment,
    annuity_payment,
    max_principal,
    payoff_schedule,
    yearly_summary,
)
from maplecalc.engine.errors import DomainError, MissingInputError
from maplecalc.engine.money import ZERO, monthly_rate
from maplecalc.models.inputs import AffordabilityInputs, MortgageComparisonInputs, MortgageInputs
from maplecalc.models.results import (
    AffordabilityResult,
    AmortizationOption,
    MortgageComparisonResult,
    MortgagePaymentResult,
)

logger = logging.getLogger(__name__)

MIN_DOWN_PAYMENT_RATIO = Decimal("0.05")
MIN_AMORTIZATION_YEARS = 1
MAX_AMORTIZATION_YEARS = 35
STRESS_TEST_BUFFER = Decimal("0.02")  # Qualifying rate = contract rate + 2%
EXTRA_PAYOFF_CAP = 600  # Months

# (min down ratio inclusive, max down ratio exclusive, premium rate)
CMHC_PREMIUMS: tuple[tuple[Decimal, Decimal, Decimal], ...] = (
    (Decimal("0.05"), Decimal("0.10"), Decimal("0.0400")),
    (Decimal("0.10"), Decimal("0.15"), Decimal("0.0310")),
    (Decimal("0.15"), Decimal("0.20"), Decimal("0.0280")),
)

GDS_RATIO = Decimal("0.32")
TDS_RATIO = Decimal("0.44")


def cmhc_premium_rate(down_payment_ratio: Decimal) -> Decimal:
    """Mortgage default insurance premium for a down payment ratio.

    20% or more down is uninsured; under 5% is not allowed.
    """
    if down_payment_ratio < MIN_DOWN_PAYMENT_RATIO:
        raise DomainError("Minimum down payment is 5% of the purchase price")
    for low, high, rate in CMHC_PREMIUMS:
        if low <= down_payment_ratio < high:
            return rate
    return ZERO


def _validate_amortization(years: int) -> None:
    if not MIN_AMORTIZATION_YEARS <= years <= MAX_AMORTIZATION_YEARS:
        raise DomainError(
            f"Amortization must be between {MIN_AMORTIZATION_YEARS} and {MAX_AMORTIZATION_YEARS} years"
        )


def monthly_mortgage_payment(principal: Decimal, annual_rate: Decimal, amortization_years: int) -> Decimal:
    """Level monthly payment (monthly compounding, as the site quotes it)."""
    _validate_amortization(amortization_years)
    return annuity_payment(principal, monthly_rate(annual_rate), amortization_years * 12)


def mortgage_payment(inputs: MortgageInputs) -> MortgagePaymentResult:
    """Monthly payment, insurance premium, stress test and schedule for a purchase."""
    if inputs.home_price <= 0:
        raise MissingInputError("Enter the home price")
    if inputs.down_payment < 0:
        raise DomainError("Down payment cannot be negative")
    if inputs.down_payment >= inputs.home_price:
        raise DomainError("Down payment must be less than the home price")
    if inputs.annual_rate < 0:
        raise DomainError("Interest rate cannot be negative")
    if inputs.term_years <= 0:
        raise DomainError("Term must be at least 1 year")
    _validate_amortization(inputs.amortization_years)

    down_ratio = inputs.down_payment_ratio
    principal = inputs.home_price - inputs.down_payment
    cmhc_rate = cmhc_premium_rate(down_ratio)
    cmhc_premium = principal * cmhc_rate
    insured = principal + cmhc_premium

    rate = monthly_rate(inputs.annual_rate)
    months = inputs.amortization_years * 12
    monthly = annuity_payment(insured, rate, months)

    stress_rate = inputs.annual_rate + STRESS_TEST_BUFFER
    stress_payment = annuity_payment(insured, monthly_rate(stress_rate), months)

    extra = inputs.extra_monthly
    with_extra = payoff_schedule(insured, rate, FixedPayment(monthly + extra), period_cap=months)
    base = payoff_schedule(insured, rate, FixedPayment(monthly), period_cap=months)

    yearly = yearly_summary(with_extra)
    term = yearly[: inputs.term_years]
    term_interest = sum((y["interest"] for y in term), ZERO)
    term_principal = sum((y["principal"] for y in term), ZERO)
    if len(yearly) >= inputs.term_years:
        balance_at_term = yearly[inputs.term_years - 1]["ending_balance"]
    else:
        balance_at_term = ZERO  # Paid off before the term ends

    monthly_tax = inputs.property_tax / 12
    total_monthly_cost = monthly + monthly_tax + inputs.condo_fee + inputs.home_insurance

    logger.debug(
        "Mortgage: price=%s down=%s insured=%s payment=%s", inputs.home_price,
        inputs.down_payment, insured, monthly,
    )

    return MortgagePaymentResult(
        principal=principal,
        down_payment_ratio=down_ratio,
        cmhc_rate=cmhc_rate,
        cmhc_premium=cmhc_premium,
        insured_principal=insured,
        monthly_payment=monthly,
        stress_rate=stress_rate,
        stress_payment=stress_payment,
        extra_monthly=extra,
        total_monthly_payment=monthly + extra,
        total_interest=with_extra.total_interest,
        total_paid=with_extra.total_paid,
        payoff_months=with_extra.period_count,
        base_interest=base.total_interest,
        base_months=base.period_count,
        interest_saved=base.total_interest - with_extra.total_interest,
        months_saved=base.period_count - with_extra.period_count,
        term_years=inputs.term_years,
        term_interest=term_interest,
        term_principal=term_principal,
        balance_at_term=balance_at_term,
        monthly_property_tax=monthly_tax,
        monthly_condo_fee=inputs.condo_fee,
        monthly_insurance=inputs.home_insurance,
        total_monthly_cost=total_monthly_cost,
        yearly=yearly,
    )


def compare_amortizations(inputs: MortgageComparisonInputs) -> MortgageComparisonResult:
    """Cost of the same loan over several amortization periods, with and without extra payments."""
    if inputs.principal <= 0:
        raise MissingInputError("Enter the mortgage amount")
    if inputs.annual_rate <= 0:
        raise DomainError("Interest rate must be greater than 0%")
    if not inputs.amortization_years:
        raise MissingInputError("Choose at least one amortization period")
    if inputs.extra_monthly < 0:
        raise DomainError("Extra payment cannot be negative")

    rate = monthly_rate(inputs.annual_rate)
    options: list[AmortizationOption] = []

    for years in sorted(set(inputs.amortization_years)):
        _validate_amortization(years)
        n = years * 12
        payment = annuity_payment(inputs.principal, rate, n)
        total_paid = payment * n
        total_interest = total_paid - inputs.principal

        accelerated = payoff_schedule(
            inputs.principal,
            rate,
            FixedPayment(payment + inputs.extra_monthly),
            period_cap=EXTRA_PAYOFF_CAP,
        )

        options.append(AmortizationOption(
            years=years,
            monthly_payment=payment,
            total_paid=total_paid,
            total_interest=total_interest,
            interest_share=total_interest / total_paid,
            extra_monthly=inputs.extra_monthly,
            months_with_extra=accelerated.period_count,
            interest_with_extra=accelerated.total_interest,
            interest_saved=total_interest - accelerated.total_interest,
        ))

    return MortgageComparisonResult(
        principal=inputs.principal,
        annual_rate=inputs.annual_rate,
        options=tuple(options),
    )


def max_affordability(inputs: AffordabilityInputs) -> AffordabilityResult:
    """Largest purchase price the GDS (32%) and TDS (44%) ratios allow."""
    if inputs.gross_income <= 0:
        raise DomainError("Income must be positive")
    if inputs.annual_rate <= 0:
        raise DomainError("Interest rate must be positive")
    if inputs.amortization_years <= 0:
        raise DomainError("Amortization years must be positive")
    if inputs.down_payment < 0 or inputs.monthly_debts < 0:
        raise DomainError("Amounts cannot be negative")

    monthly_income = inputs.gross_income / 12
    gds_limit = monthly_income * GDS_RATIO
    tds_limit = monthly_income * TDS_RATIO

    max_payment = min(
        gds_limit - inputs.property_tax / 12 - inputs.heating_monthly,
        tds_limit - inputs.monthly_debts,
    )
    if max_payment <= 0:
        raise DomainError("Income too low for a mortgage with these costs")

    principal = max_principal(
        max_payment, monthly_rate(inputs.annual_rate), inputs.amortization_years * 12
    )

    return AffordabilityResult(
        max_price=principal + inputs.down_payment,
        max_principal=principal,
        max_mortgage_payment=max_payment,
        gds_limit=gds_limit,
        tds_limit=tds_limit,
        gds_ratio=GDS_RATIO,
        tds_ratio=TDS_RATIO,
    )
