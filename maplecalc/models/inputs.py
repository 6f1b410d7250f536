"""Immutable input records, one per calculator.

A form change replaces the whole record; nothing is mutated in place.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Mapping


class Province(Enum):
    AB = "AB"
    BC = "BC"
    MB = "MB"
    NB = "NB"
    NL = "NL"
    NS = "NS"
    NT = "NT"
    NU = "NU"
    ON = "ON"
    PE = "PE"
    QC = "QC"
    SK = "SK"
    YT = "YT"


class JobStability(Enum):
    VERY_STABLE = "very_stable"
    STABLE = "stable"
    VARIABLE = "variable"
    UNCERTAIN = "uncertain"


class Dependents(Enum):
    NONE = "none"
    ONE = "one"
    TWO_PLUS = "two_plus"


class IncomeType(Enum):
    EMPLOYED = "employed"
    SELF_EMPLOYED = "self_employed"
    DUAL_INCOME = "dual_income"
    SINGLE_INCOME = "single_income"


class PayFrequency(Enum):
    ANNUAL = "annual"
    MONTHLY = "monthly"
    SEMI_MONTHLY = "semi_monthly"
    BI_WEEKLY = "bi_weekly"
    WEEKLY = "weekly"

    @property
    def periods_per_year(self) -> int:
        return {
            PayFrequency.ANNUAL: 1,
            PayFrequency.MONTHLY: 12,
            PayFrequency.SEMI_MONTHLY: 24,
            PayFrequency.BI_WEEKLY: 26,
            PayFrequency.WEEKLY: 52,
        }[self]


class AgeGroup(Enum):
    UNDER_35 = "under_35"
    AGE_35_44 = "35_44"
    AGE_45_54 = "45_54"
    AGE_55_64 = "55_64"
    AGE_65_PLUS = "65_plus"


@dataclass(frozen=True)
class CreditCardInputs:
    balance: Decimal
    annual_rate: Decimal = Decimal("0.1999")
    minimum_percent: Decimal = Decimal("0.02")
    minimum_floor: Decimal = Decimal("10")
    fixed_payment: Decimal = Decimal("0")  # 0 = use the first minimum payment
    extra_payment: Decimal = Decimal("0")


@dataclass(frozen=True)
class MortgageInputs:
    home_price: Decimal
    down_payment: Decimal  # Dollar amount
    annual_rate: Decimal = Decimal("0.05")
    amortization_years: int = 25
    term_years: int = 5
    extra_monthly: Decimal = Decimal("0")
    property_tax: Decimal = Decimal("0")  # Annual
    condo_fee: Decimal = Decimal("0")  # Monthly
    home_insurance: Decimal = Decimal("0")  # Monthly

    @property
    def down_payment_ratio(self) -> Decimal:
        if self.home_price <= 0:
            return Decimal("0")
        return self.down_payment / self.home_price


@dataclass(frozen=True)
class MortgageComparisonInputs:
    principal: Decimal
    annual_rate: Decimal = Decimal("0.05")
    amortization_years: tuple[int, ...] = (20, 25, 30)
    extra_monthly: Decimal = Decimal("0")


@dataclass(frozen=True)
class AffordabilityInputs:
    gross_income: Decimal  # Annual
    annual_rate: Decimal
    amortization_years: int = 25
    down_payment: Decimal = Decimal("0")
    monthly_debts: Decimal = Decimal("0")
    property_tax: Decimal = Decimal("0")  # Annual
    heating_monthly: Decimal = Decimal("0")


@dataclass(frozen=True)
class LandTransferInputs:
    province: Province
    purchase_price: Decimal
    first_time_buyer: bool = False
    toronto: bool = False  # Municipal tax only applies in Ontario


@dataclass(frozen=True)
class TFSAInputs:
    current_balance: Decimal = Decimal("0")
    annual_contribution: Decimal = Decimal("0")
    annual_return: Decimal = Decimal("0.085")
    years: int = 25
    birth_year: int | None = None
    contributed_to_date: Decimal = Decimal("0")
    goal: Decimal | None = None


@dataclass(frozen=True)
class FHSAInputs:
    income: Decimal
    annual_contribution: Decimal
    annual_return: Decimal = Decimal("0.05")
    province: Province = Province.ON
    years_open: int = 0
    down_payment_goal: Decimal | None = None


@dataclass(frozen=True)
class CPPInputs:
    average_income: Decimal
    years_contributed: int
    current_age: int


@dataclass(frozen=True)
class EmergencyFundInputs:
    expenses: Mapping[str, Decimal] = field(default_factory=dict)  # Monthly essentials
    job_stability: JobStability = JobStability.STABLE
    dependents: Dependents = Dependents.NONE
    income_type: IncomeType = IncomeType.EMPLOYED
    current_savings: Decimal = Decimal("0")
    monthly_savings: Decimal = Decimal("0")
    savings_rate: Decimal = Decimal("0.025")  # HISA rate, annual

    @property
    def monthly_expenses(self) -> Decimal:
        return sum(self.expenses.values(), Decimal("0"))


@dataclass(frozen=True)
class BudgetInputs:
    gross_income: Decimal  # Per pay period
    pay_frequency: PayFrequency = PayFrequency.ANNUAL
    tax_rate: Decimal = Decimal("0.25")
    needs: Mapping[str, Decimal] = field(default_factory=dict)  # Monthly
    wants: Mapping[str, Decimal] = field(default_factory=dict)
    savings: Mapping[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class NetWorthInputs:
    assets: Mapping[str, Decimal] = field(default_factory=dict)
    liabilities: Mapping[str, Decimal] = field(default_factory=dict)
    age_group: AgeGroup = AgeGroup.AGE_35_44
