from dataclasses import dataclass, field
from decimal import Decimal

from maplecalc.engine.amortization import PayoffSchedule, TargetPayment
from maplecalc.engine.brackets import BracketLine
from maplecalc.engine.projection import GrowthProjection


@dataclass(frozen=True)
class PayoffScenario:
    """One repayment strategy. Totals are None when the balance never pays off."""
    label: str
    schedule: PayoffSchedule

    @property
    def amortizes(self) -> bool:
        return self.schedule.amortizes

    @property
    def months(self) -> int | None:
        return self.schedule.period_count if self.amortizes else None

    @property
    def total_paid(self) -> Decimal | None:
        return self.schedule.total_paid if self.amortizes else None

    @property
    def total_interest(self) -> Decimal | None:
        return self.schedule.total_interest if self.amortizes else None

    @property
    def first_payment(self) -> Decimal:
        return self.schedule.first_payment


@dataclass(frozen=True)
class CreditCardResult:
    balance: Decimal
    minimum: PayoffScenario
    fixed: PayoffScenario
    extra: PayoffScenario | None
    targets: tuple[TargetPayment, ...]
    yearly: list[dict]  # Minimum-payment scenario by year

    # None when either side of the comparison does not amortize
    interest_saved_fixed: Decimal | None = None
    months_saved_fixed: int | None = None
    interest_saved_extra: Decimal | None = None
    months_saved_extra: int | None = None


@dataclass(frozen=True)
class MortgagePaymentResult:
    principal: Decimal
    down_payment_ratio: Decimal
    cmhc_rate: Decimal
    cmhc_premium: Decimal
    insured_principal: Decimal

    monthly_payment: Decimal
    stress_rate: Decimal
    stress_payment: Decimal
    extra_monthly: Decimal
    total_monthly_payment: Decimal

    # With extra payments
    total_interest: Decimal
    total_paid: Decimal
    payoff_months: int

    # Without extra payments
    base_interest: Decimal
    base_months: int
    interest_saved: Decimal
    months_saved: int

    # First term
    term_years: int
    term_interest: Decimal
    term_principal: Decimal
    balance_at_term: Decimal

    # Carrying costs
    monthly_property_tax: Decimal
    monthly_condo_fee: Decimal
    monthly_insurance: Decimal
    total_monthly_cost: Decimal

    yearly: list[dict] = field(default_factory=list)

    @property
    def requires_cmhc(self) -> bool:
        return self.cmhc_rate > 0


@dataclass(frozen=True)
class AmortizationOption:
    years: int
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
    interest_share: Decimal  # Interest / total paid
    extra_monthly: Decimal
    months_with_extra: int
    interest_with_extra: Decimal
    interest_saved: Decimal


@dataclass(frozen=True)
class MortgageComparisonResult:
    principal: Decimal
    annual_rate: Decimal
    options: tuple[AmortizationOption, ...]

    @property
    def cheapest(self) -> AmortizationOption:
        return min(self.options, key=lambda o: o.total_interest)


@dataclass(frozen=True)
class AffordabilityResult:
    max_price: Decimal
    max_principal: Decimal
    max_mortgage_payment: Decimal
    gds_limit: Decimal  # Monthly housing cost allowed by GDS
    tds_limit: Decimal  # Monthly debt service allowed by TDS
    gds_ratio: Decimal
    tds_ratio: Decimal


@dataclass(frozen=True)
class LandTransferResult:
    province: str
    province_name: str
    has_tax: bool
    purchase_price: Decimal

    provincial_tax: Decimal
    provincial_rebate: Decimal
    provincial_net: Decimal

    municipal_tax: Decimal
    municipal_rebate: Decimal
    municipal_net: Decimal

    total_tax: Decimal
    total_rebate: Decimal
    total_net: Decimal
    effective_rate: Decimal
    marginal_rate: Decimal  # Provincial rate on the next dollar

    brackets: tuple[BracketLine, ...] = ()
    rebate_label: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class TFSAResult:
    projection: GrowthProjection
    final_balance: Decimal
    total_invested: Decimal  # Starting balance + contributions
    total_growth: Decimal
    growth_ratio: Decimal  # Growth / invested
    tax_savings: Decimal
    lifetime_room: Decimal
    remaining_room: Decimal
    exceeds_room: bool
    milestones: tuple[tuple[int, Decimal], ...]
    max_contribution_final: Decimal
    required_return: Decimal | None = None  # Only when a goal is given
    goal_reachable: bool | None = None


@dataclass(frozen=True)
class FHSAResult:
    projection: GrowthProjection
    marginal_rate: Decimal
    room_accrued: Decimal
    current_room: Decimal
    years_to_max: int

    final_balance: Decimal
    total_contributions: Decimal
    total_growth: Decimal

    annual_tax_saving: Decimal
    total_tax_saving: Decimal

    rrsp_final_after_tax: Decimal
    fhsa_advantage: Decimal

    years_to_goal: int | None = None
    on_track: bool | None = None


@dataclass(frozen=True)
class CPPResult:
    pensionable_income: Decimal
    earnings_ratio: Decimal
    years_factor: Decimal
    base_monthly: Decimal
    at_60_monthly: Decimal
    at_65_monthly: Decimal
    at_70_monthly: Decimal
    breakeven_60_65: Decimal | None
    breakeven_65_70: Decimal | None
    lifetime_60_to_85: Decimal
    lifetime_65_to_85: Decimal
    lifetime_70_to_85: Decimal
    years_until_65: int


@dataclass(frozen=True)
class EmergencyMilestone:
    months: Decimal
    amount: Decimal
    reached: bool
    months_away: int | None


@dataclass(frozen=True)
class EmergencyFundResult:
    monthly_expenses: Decimal
    recommended_months: Decimal
    min_target: Decimal
    ideal_target: Decimal
    max_target: Decimal
    gap: Decimal
    months_to_goal: int | None
    months_with_interest: int | None
    interest_earned: Decimal
    percent_complete: Decimal
    milestones: tuple[EmergencyMilestone, ...] = ()


@dataclass(frozen=True)
class BudgetBucket:
    name: str
    target_share: Decimal
    target: Decimal
    actual: Decimal
    actual_share: Decimal  # Of monthly net income

    @property
    def difference(self) -> Decimal:
        """Positive = over target."""
        return self.actual - self.target

    @property
    def over_target(self) -> bool:
        return self.difference > 0


@dataclass(frozen=True)
class BudgetResult:
    annual_gross: Decimal
    annual_net: Decimal
    monthly_net: Decimal
    needs: BudgetBucket
    wants: BudgetBucket
    savings: BudgetBucket
    total_allocated: Decimal
    unallocated: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    key: str
    label: str
    total: Decimal


@dataclass(frozen=True)
class NetWorthResult:
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    debt_ratio: Decimal  # Liabilities / assets
    benchmark_label: str
    benchmark_median: Decimal
    versus_median: Decimal
    asset_breakdown: tuple[CategoryTotal, ...] = ()
    liability_breakdown: tuple[CategoryTotal, ...] = ()
