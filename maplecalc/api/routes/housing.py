"""Home-buying routes: mortgage, affordability and land transfer tax."""

from fastapi import APIRouter

from maplecalc.api.routes.debt import yearly_rows
from maplecalc.api.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    AmortizationOptionResponse,
    BracketLineResponse,
    LandTransferRequest,
    LandTransferResponse,
    MortgageComparisonRequest,
    MortgageComparisonResponse,
    MortgageRequest,
    MortgageResponse,
)
from maplecalc.config import settings
from maplecalc.engine.land_transfer import land_transfer_tax
from maplecalc.engine.mortgage import compare_amortizations, max_affordability, mortgage_payment
from maplecalc.models.inputs import (
    AffordabilityInputs,
    LandTransferInputs,
    MortgageComparisonInputs,
    MortgageInputs,
)

router = APIRouter(prefix=f"{settings.api_prefix}/housing", tags=["housing"])


@router.post("/mortgage", response_model=MortgageResponse)
async def mortgage(req: MortgageRequest):
    """Monthly payment with CMHC insurance, stress test and first-term summary."""
    r = mortgage_payment(MortgageInputs(**req.model_dump()))
    return MortgageResponse(
        principal=r.principal,
        down_payment_ratio=r.down_payment_ratio,
        requires_cmhc=r.requires_cmhc,
        cmhc_rate=r.cmhc_rate,
        cmhc_premium=r.cmhc_premium,
        insured_principal=r.insured_principal,
        monthly_payment=r.monthly_payment,
        stress_rate=r.stress_rate,
        stress_payment=r.stress_payment,
        total_monthly_payment=r.total_monthly_payment,
        total_interest=r.total_interest,
        total_paid=r.total_paid,
        payoff_months=r.payoff_months,
        interest_saved=r.interest_saved,
        months_saved=r.months_saved,
        term_years=r.term_years,
        term_interest=r.term_interest,
        term_principal=r.term_principal,
        balance_at_term=r.balance_at_term,
        total_monthly_cost=r.total_monthly_cost,
        yearly=yearly_rows(r.yearly),
    )


@router.post("/mortgage-comparison", response_model=MortgageComparisonResponse)
async def mortgage_comparison(req: MortgageComparisonRequest):
    result = compare_amortizations(MortgageComparisonInputs(
        principal=req.principal,
        annual_rate=req.annual_rate,
        amortization_years=tuple(req.amortization_years),
        extra_monthly=req.extra_monthly,
    ))
    return MortgageComparisonResponse(
        principal=result.principal,
        annual_rate=result.annual_rate,
        options=[
            AmortizationOptionResponse(
                years=o.years,
                monthly_payment=o.monthly_payment,
                total_paid=o.total_paid,
                total_interest=o.total_interest,
                interest_share=o.interest_share,
                months_with_extra=o.months_with_extra,
                interest_with_extra=o.interest_with_extra,
                interest_saved=o.interest_saved,
            )
            for o in result.options
        ],
        cheapest_years=result.cheapest.years,
    )


@router.post("/affordability", response_model=AffordabilityResponse)
async def affordability(req: AffordabilityRequest):
    """Maximum purchase price under the GDS/TDS limits."""
    r = max_affordability(AffordabilityInputs(**req.model_dump()))
    return AffordabilityResponse(
        max_price=r.max_price,
        max_principal=r.max_principal,
        max_mortgage_payment=r.max_mortgage_payment,
        gds_limit=r.gds_limit,
        tds_limit=r.tds_limit,
        gds_ratio=r.gds_ratio,
        tds_ratio=r.tds_ratio,
    )


@router.post("/land-transfer-tax", response_model=LandTransferResponse)
async def land_transfer(req: LandTransferRequest):
    r = land_transfer_tax(LandTransferInputs(**req.model_dump()))
    return LandTransferResponse(
        province=r.province,
        province_name=r.province_name,
        has_tax=r.has_tax,
        provincial_tax=r.provincial_tax,
        provincial_rebate=r.provincial_rebate,
        provincial_net=r.provincial_net,
        municipal_tax=r.municipal_tax,
        municipal_rebate=r.municipal_rebate,
        municipal_net=r.municipal_net,
        total_tax=r.total_tax,
        total_rebate=r.total_rebate,
        total_net=r.total_net,
        effective_rate=r.effective_rate,
        marginal_rate=r.marginal_rate,
        brackets=[
            BracketLineResponse(label=b.label, rate=b.rate, taxable=b.taxable, tax=b.tax)
            for b in r.brackets
        ],
        rebate_label=r.rebate_label,
        notes=r.notes,
    )
