"""Catalogue of generic form calculators.

Each descriptor lists its form fields and names one built-in strategy. Raw
form values go in as strings; a ``CalculatorOutcome`` comes out. Bad input
never raises: it becomes an "incomplete" or "error" outcome.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Callable, Mapping

from maplecalc.engine.errors import CalculationError, DomainError, MissingInputError, NumericError
from maplecalc.engine.money import ONE, ZERO, parse_decimal, percent, to_cents, to_rate
from maplecalc.engine.mortgage import cmhc_premium_rate, max_affordability, monthly_mortgage_payment
from maplecalc.engine.projection import future_value
from maplecalc.models.inputs import AffordabilityInputs

logger = logging.getLogger(__name__)


class StrategyKind(Enum):
    TFSA_FUTURE_VALUE = "tfsa_future_value"
    TFSA_VS_RRSP = "tfsa_vs_rrsp"
    MORTGAGE_AFFORDABILITY = "mortgage_affordability"
    MAX_AFFORDABILITY = "max_affordability"


class OutcomeStatus(str, Enum):
    INCOMPLETE = "incomplete"
    ERROR = "error"
    OK = "ok"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    unit: str = "$"
    placeholder: str | None = None


@dataclass(frozen=True)
class CalculatorDescriptor:
    slug: str
    title: str
    result_unit: str
    kind: StrategyKind
    fields: tuple[FieldSpec, ...]
    notes: str | None = None


@dataclass(frozen=True)
class CalculatorOutcome:
    status: OutcomeStatus
    message: str | None = None
    values: dict[str, Decimal] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK


def _tfsa_future_value(v: Mapping[str, Decimal]) -> dict[str, Decimal]:
    rate = percent(v["annual_return"])
    if rate == 0:
        raise DomainError("Return cannot be 0%")
    years = _whole_years(v["years"])
    return {"future_value": future_value(v["current_balance"], v["annual_contribution"], rate, years)}


def _tfsa_vs_rrsp(v: Mapping[str, Decimal]) -> dict[str, Decimal]:
    """Same after-tax dollars in both accounts.

    The RRSP deposit is grossed up by the refund at today's rate and taxed on
    withdrawal at the retirement rate.
    """
    rate = percent(v["annual_return"])
    if rate == 0:
        raise DomainError("Return cannot be 0%")
    years = _whole_years(v["years"])
    current_tax = percent(v["current_tax_rate"])
    future_tax = percent(v["future_tax_rate"])
    if not (ZERO <= current_tax < ONE and ZERO <= future_tax < ONE):
        raise DomainError("Tax rates must be between 0% and 100%")

    contribution = v["annual_contribution"]
    tfsa = future_value(ZERO, contribution, rate, years)
    rrsp_gross = future_value(ZERO, contribution / (ONE - current_tax), rate, years)
    rrsp = rrsp_gross * (ONE - future_tax)
    return {"tfsa": tfsa, "rrsp": rrsp, "difference": tfsa - rrsp}


def _mortgage_affordability(v: Mapping[str, Decimal]) -> dict[str, Decimal]:
    price = v["purchase_price"]
    down_ratio = percent(v["down_payment_percent"])
    annual_rate = percent(v["interest_rate"])
    if price <= 0:
        raise DomainError("Purchase price must be greater than $0")
    if not ZERO <= down_ratio < ONE:
        raise DomainError("Down payment percent must be between 0 and 100")
    if annual_rate <= 0:
        raise DomainError("Interest rate must be greater than 0%")

    principal = price * (ONE - down_ratio)
    premium = principal * cmhc_premium_rate(down_ratio)
    payment = monthly_mortgage_payment(
        principal + premium, annual_rate, _whole_years(v["amortization_years"])
    )
    total = payment + v["property_tax_yearly"] / 12 + v["heating_costs_monthly"]
    return {
        "monthly_payment": payment,
        "total_monthly": total,
        "cmhc_premium": premium,
        "principal": principal,
    }


def _max_affordability(v: Mapping[str, Decimal]) -> dict[str, Decimal]:
    result = max_affordability(AffordabilityInputs(
        gross_income=v["gross_income_yearly"],
        annual_rate=percent(v["interest_rate"]),
        amortization_years=_whole_years(v["amortization_years"]),
        down_payment=v["down_payment_amount"],
        monthly_debts=v["monthly_debt_payments"],
        property_tax=v["property_tax_yearly"],
        heating_monthly=v["heating_costs_monthly"],
    ))
    return {
        "max_price": result.max_price,
        "max_mortgage_payment": result.max_mortgage_payment,
        "gds_ratio": result.gds_ratio,
        "tds_ratio": result.tds_ratio,
    }


def _whole_years(value: Decimal) -> int:
    if value != value.to_integral_value() or value <= 0:
        raise DomainError("Years must be a whole number greater than 0")
    return int(value)


STRATEGIES: dict[StrategyKind, Callable[[Mapping[str, Decimal]], dict[str, Decimal]]] = {
    StrategyKind.TFSA_FUTURE_VALUE: _tfsa_future_value,
    StrategyKind.TFSA_VS_RRSP: _tfsa_vs_rrsp,
    StrategyKind.MORTGAGE_AFFORDABILITY: _mortgage_affordability,
    StrategyKind.MAX_AFFORDABILITY: _max_affordability,
}

# Outputs that are rates rather than dollar amounts
RATE_OUTPUTS = {"gds_ratio", "tds_ratio"}

CATALOG: tuple[CalculatorDescriptor, ...] = (
    CalculatorDescriptor(
        slug="tfsa-growth-calculator",
        title="TFSA Growth Calculator",
        result_unit="$",
        kind=StrategyKind.TFSA_FUTURE_VALUE,
        fields=(
            FieldSpec("current_balance", "Current TFSA balance", placeholder="0"),
            FieldSpec("annual_contribution", "Annual contribution", placeholder="7000"),
            FieldSpec("annual_return", "Expected annual return", unit="%", placeholder="6"),
            FieldSpec("years", "Years of growth", unit="years", placeholder="25"),
        ),
        notes="Contributions are made at the start of each year. Growth and withdrawals are tax-free.",
    ),
    CalculatorDescriptor(
        slug="tfsa-vs-rrsp",
        title="TFSA vs RRSP Calculator",
        result_unit="$",
        kind=StrategyKind.TFSA_VS_RRSP,
        fields=(
            FieldSpec("annual_contribution", "After-tax annual contribution", placeholder="7000"),
            FieldSpec("annual_return", "Expected annual return", unit="%", placeholder="6"),
            FieldSpec("years", "Years until retirement", unit="years", placeholder="25"),
            FieldSpec("current_tax_rate", "Current marginal tax rate", unit="%", placeholder="43.41"),
            FieldSpec("future_tax_rate", "Expected tax rate in retirement", unit="%", placeholder="30"),
        ),
        notes="The RRSP wins when your tax rate in retirement is lower than it is today.",
    ),
    CalculatorDescriptor(
        slug="mortgage-payment-affordability",
        title="Mortgage Payment & Affordability Calculator",
        result_unit="$/month",
        kind=StrategyKind.MORTGAGE_AFFORDABILITY,
        fields=(
            FieldSpec("purchase_price", "Purchase price", placeholder="600000"),
            FieldSpec("down_payment_percent", "Down payment", unit="%", placeholder="20"),
            FieldSpec("interest_rate", "Interest rate", unit="%", placeholder="5"),
            FieldSpec("amortization_years", "Amortization", unit="years", placeholder="25"),
            FieldSpec("property_tax_yearly", "Property tax (yearly)", placeholder="4000"),
            FieldSpec("heating_costs_monthly", "Heating costs (monthly)", placeholder="100"),
        ),
    ),
    CalculatorDescriptor(
        slug="max-house-affordability",
        title="Maximum House Affordability Calculator",
        result_unit="$",
        kind=StrategyKind.MAX_AFFORDABILITY,
        fields=(
            FieldSpec("gross_income_yearly", "Gross household income (yearly)", placeholder="120000"),
            FieldSpec("monthly_debt_payments", "Monthly debt payments", placeholder="500"),
            FieldSpec("down_payment_amount", "Down payment", placeholder="60000"),
            FieldSpec("interest_rate", "Interest rate", unit="%", placeholder="5"),
            FieldSpec("amortization_years", "Amortization", unit="years", placeholder="25"),
            FieldSpec("property_tax_yearly", "Property tax (yearly)", placeholder="4000"),
            FieldSpec("heating_costs_monthly", "Heating costs (monthly)", placeholder="100"),
        ),
        notes="Lenders cap housing costs at 32% (GDS) and all debt at 44% (TDS) of gross income.",
    ),
)

_BY_SLUG = {d.slug: d for d in CATALOG}


def get_descriptor(slug: str) -> CalculatorDescriptor:
    """Raises KeyError for an unknown slug."""
    return _BY_SLUG[slug]


def parse_fields(descriptor: CalculatorDescriptor, raw_values: Mapping[str, object]) -> dict[str, Decimal]:
    """Every field is required; blank or non-numeric raises MissingInputError."""
    parsed = {}
    missing = False
    for spec in descriptor.fields:
        try:
            parsed[spec.name] = parse_decimal(raw_values.get(spec.name), spec.label)
        except MissingInputError:
            missing = True
    if missing:
        raise MissingInputError("Please fill all fields")
    return parsed


def run_catalog_calculator(slug: str, raw_values: Mapping[str, object]) -> CalculatorOutcome:
    descriptor = get_descriptor(slug)
    try:
        values = parse_fields(descriptor, raw_values)
        raw_result = STRATEGIES[descriptor.kind](values)
        result = {
            key: to_rate(value) if key in RATE_OUTPUTS else to_cents(value)
            for key, value in raw_result.items()
        }
    except MissingInputError as e:
        return CalculatorOutcome(status=OutcomeStatus.INCOMPLETE, message=e.detail)
    except NumericError as e:
        logger.warning("Catalogue calculator %s produced a non-finite result", slug)
        return CalculatorOutcome(status=OutcomeStatus.ERROR, message=e.detail)
    except CalculationError as e:
        return CalculatorOutcome(status=OutcomeStatus.ERROR, message=e.detail)
    except ArithmeticError:
        logger.warning("Catalogue calculator %s failed numerically", slug, exc_info=True)
        return CalculatorOutcome(status=OutcomeStatus.ERROR, message=NumericError.message)

    logger.debug("Catalogue calculator %s -> %s", slug, result)
    return CalculatorOutcome(status=OutcomeStatus.OK, values=result)
