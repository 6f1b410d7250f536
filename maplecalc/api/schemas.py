"""Pydantic schemas for API request/response models.

Rates are decimal fractions (0.0499 for 4.99%). Money in responses is
rounded to cents, rates to four places.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from maplecalc.engine.money import to_cents, to_rate
from maplecalc.models.inputs import (
    AgeGroup,
    Dependents,
    IncomeType,
    JobStability,
    PayFrequency,
    Province,
)

Cents = Annotated[Decimal, AfterValidator(to_cents)]
Rate = Annotated[Decimal, AfterValidator(to_rate)]


# ---- Request schemas ----

class CreditCardRequest(BaseModel):
    balance: Decimal
    annual_rate: Decimal = Decimal("0.1999")
    minimum_percent: Decimal = Decimal("0.02")
    minimum_floor: Decimal = Decimal("10")
    fixed_payment: Decimal = Field(Decimal("0"), description="0 uses the first minimum payment")
    extra_payment: Decimal = Decimal("0")


class PayoffRequest(BaseModel):
    balance: Decimal
    annual_rate: Decimal
    monthly_payment: Decimal
    require_payoff: bool = Field(False, description="Reject payments that never clear the balance")


class TargetPaymentRequest(BaseModel):
    balance: Decimal
    annual_rate: Decimal
    months: int = Field(..., gt=0)


class MortgageRequest(BaseModel):
    home_price: Decimal
    down_payment: Decimal
    annual_rate: Decimal = Decimal("0.05")
    amortization_years: int = 25
    term_years: int = 5
    extra_monthly: Decimal = Decimal("0")
    property_tax: Decimal = Field(Decimal("0"), description="Annual")
    condo_fee: Decimal = Decimal("0")
    home_insurance: Decimal = Decimal("0")


class MortgageComparisonRequest(BaseModel):
    principal: Decimal
    annual_rate: Decimal = Decimal("0.05")
    amortization_years: list[int] = [20, 25, 30]
    extra_monthly: Decimal = Decimal("0")


class AffordabilityRequest(BaseModel):
    gross_income: Decimal
    annual_rate: Decimal
    amortization_years: int = 25
    down_payment: Decimal = Decimal("0")
    monthly_debts: Decimal = Decimal("0")
    property_tax: Decimal = Field(Decimal("0"), description="Annual")
    heating_monthly: Decimal = Decimal("0")


class LandTransferRequest(BaseModel):
    province: Province
    purchase_price: Decimal
    first_time_buyer: bool = False
    toronto: bool = False


class TFSARequest(BaseModel):
    current_balance: Decimal = Decimal("0")
    annual_contribution: Decimal = Decimal("0")
    annual_return: Decimal = Decimal("0.085")
    years: int = Field(25, gt=0, le=100)
    birth_year: int | None = None
    contributed_to_date: Decimal = Decimal("0")
    goal: Decimal | None = None


class FHSARequest(BaseModel):
    income: Decimal
    annual_contribution: Decimal
    annual_return: Decimal = Decimal("0.05")
    province: Province = Province.ON
    years_open: int = 0
    down_payment_goal: Decimal | None = None


class EmergencyFundRequest(BaseModel):
    expenses: dict[str, Decimal]
    job_stability: JobStability = JobStability.STABLE
    dependents: Dependents = Dependents.NONE
    income_type: IncomeType = IncomeType.EMPLOYED
    current_savings: Decimal = Decimal("0")
    monthly_savings: Decimal = Decimal("0")
    savings_rate: Decimal = Decimal("0.025")


class BudgetRequest(BaseModel):
    gross_income: Decimal = Field(..., description="Per pay period")
    pay_frequency: PayFrequency = PayFrequency.ANNUAL
    tax_rate: Decimal = Decimal("0.25")
    needs: dict[str, Decimal] = {}
    wants: dict[str, Decimal] = {}
    savings: dict[str, Decimal] = {}


class NetWorthRequest(BaseModel):
    assets: dict[str, Decimal] = {}
    liabilities: dict[str, Decimal] = {}
    age_group: AgeGroup = AgeGroup.AGE_35_44


class CPPRequest(BaseModel):
    average_income: Decimal
    years_contributed: int
    current_age: int


class CalculateRequest(BaseModel):
    values: dict[str, str | float | None] = {}


# ---- Response schemas ----

class YearSummaryResponse(BaseModel):
    year: int
    paid: Cents
    interest: Cents
    principal: Cents
    ending_balance: Cents


class PayoffPeriodResponse(BaseModel):
    period: int
    payment: Cents
    interest: Cents
    principal: Cents
    balance: Cents


class ScenarioResponse(BaseModel):
    label: str
    amortizes: bool
    first_payment: Cents
    months: int | None = None
    total_paid: Cents | None = None
    total_interest: Cents | None = None


class TargetPaymentResponse(BaseModel):
    months: int
    payment: Cents
    total_paid: Cents
    total_interest: Cents


class CreditCardResponse(BaseModel):
    balance: Cents
    minimum: ScenarioResponse
    fixed: ScenarioResponse
    extra: ScenarioResponse | None = None
    targets: list[TargetPaymentResponse]
    yearly: list[YearSummaryResponse]
    interest_saved_fixed: Cents | None = None
    months_saved_fixed: int | None = None
    interest_saved_extra: Cents | None = None
    months_saved_extra: int | None = None


class PayoffResponse(BaseModel):
    amortizes: bool
    months: int | None = None
    total_paid: Cents | None = None
    total_interest: Cents | None = None
    periods: list[PayoffPeriodResponse]
    yearly: list[YearSummaryResponse]


class MortgageResponse(BaseModel):
    principal: Cents
    down_payment_ratio: Rate
    requires_cmhc: bool
    cmhc_rate: Rate
    cmhc_premium: Cents
    insured_principal: Cents
    monthly_payment: Cents
    stress_rate: Rate
    stress_payment: Cents
    total_monthly_payment: Cents
    total_interest: Cents
    total_paid: Cents
    payoff_months: int
    interest_saved: Cents
    months_saved: int
    term_years: int
    term_interest: Cents
    term_principal: Cents
    balance_at_term: Cents
    total_monthly_cost: Cents
    yearly: list[YearSummaryResponse]


class AmortizationOptionResponse(BaseModel):
    years: int
    monthly_payment: Cents
    total_paid: Cents
    total_interest: Cents
    interest_share: Rate
    months_with_extra: int
    interest_with_extra: Cents
    interest_saved: Cents


class MortgageComparisonResponse(BaseModel):
    principal: Cents
    annual_rate: Rate
    options: list[AmortizationOptionResponse]
    cheapest_years: int


class AffordabilityResponse(BaseModel):
    max_price: Cents
    max_principal: Cents
    max_mortgage_payment: Cents
    gds_limit: Cents
    tds_limit: Cents
    gds_ratio: Rate
    tds_ratio: Rate


class BracketLineResponse(BaseModel):
    label: str
    rate: Rate
    taxable: Cents
    tax: Cents


class LandTransferResponse(BaseModel):
    province: Province
    province_name: str
    has_tax: bool
    provincial_tax: Cents
    provincial_rebate: Cents
    provincial_net: Cents
    municipal_tax: Cents
    municipal_rebate: Cents
    municipal_net: Cents
    total_tax: Cents
    total_rebate: Cents
    total_net: Cents
    effective_rate: Rate
    marginal_rate: Rate
    brackets: list[BracketLineResponse] = []
    rebate_label: str | None = None
    notes: str | None = None


class GrowthYearResponse(BaseModel):
    year: int
    contribution: Cents
    growth: Cents
    ending_balance: Cents


class MilestoneResponse(BaseModel):
    year: int
    balance: Cents


class TFSAResponse(BaseModel):
    final_balance: Cents
    total_invested: Cents
    total_growth: Cents
    growth_ratio: Rate
    tax_savings: Cents
    lifetime_room: Cents
    remaining_room: Cents
    exceeds_room: bool
    milestones: list[MilestoneResponse]
    max_contribution_final: Cents
    required_return: Rate | None = None
    goal_reachable: bool | None = None
    yearly: list[GrowthYearResponse]


class FHSAResponse(BaseModel):
    marginal_rate: Rate
    room_accrued: Cents
    current_room: Cents
    years_to_max: int
    final_balance: Cents
    total_contributions: Cents
    total_growth: Cents
    annual_tax_saving: Cents
    total_tax_saving: Cents
    rrsp_final_after_tax: Cents
    fhsa_advantage: Cents
    years_to_goal: int | None = None
    on_track: bool | None = None
    yearly: list[GrowthYearResponse]


class EmergencyMilestoneResponse(BaseModel):
    months: Decimal
    amount: Cents
    reached: bool
    months_away: int | None = None


class EmergencyFundResponse(BaseModel):
    monthly_expenses: Cents
    recommended_months: Decimal
    min_target: Cents
    ideal_target: Cents
    max_target: Cents
    gap: Cents
    months_to_goal: int | None = None
    months_with_interest: int | None = None
    interest_earned: Cents
    percent_complete: Cents
    milestones: list[EmergencyMilestoneResponse]


class BudgetBucketResponse(BaseModel):
    name: str
    target_share: Rate
    target: Cents
    actual: Cents
    actual_share: Rate
    difference: Cents
    over_target: bool


class BudgetResponse(BaseModel):
    annual_gross: Cents
    annual_net: Cents
    monthly_net: Cents
    needs: BudgetBucketResponse
    wants: BudgetBucketResponse
    savings: BudgetBucketResponse
    total_allocated: Cents
    unallocated: Cents


class CategoryTotalResponse(BaseModel):
    key: str
    label: str
    total: Cents


class NetWorthResponse(BaseModel):
    total_assets: Cents
    total_liabilities: Cents
    net_worth: Cents
    debt_ratio: Rate
    benchmark_label: str
    benchmark_median: Cents
    versus_median: Cents
    asset_breakdown: list[CategoryTotalResponse]
    liability_breakdown: list[CategoryTotalResponse]


class CPPResponse(BaseModel):
    pensionable_income: Cents
    earnings_ratio: Rate
    years_factor: Rate
    at_60_monthly: Cents
    at_65_monthly: Cents
    at_70_monthly: Cents
    breakeven_60_65: Decimal | None = None
    breakeven_65_70: Decimal | None = None
    lifetime_60_to_85: Cents
    lifetime_65_to_85: Cents
    lifetime_70_to_85: Cents
    years_until_65: int


class FieldSpecResponse(BaseModel):
    name: str
    label: str
    unit: str
    placeholder: str | None = None


class CalculatorSummaryResponse(BaseModel):
    slug: str
    title: str
    result_unit: str


class CalculatorDescriptorResponse(CalculatorSummaryResponse):
    kind: str
    fields: list[FieldSpecResponse]
    notes: str | None = None


class CalculatorOutcomeResponse(BaseModel):
    status: str
    message: str | None = None
    values: dict[str, Decimal] = {}
