"""Planning routes: budget, net worth and CPP."""

from fastapi import APIRouter

from maplecalc.api.schemas import (
    BudgetBucketResponse,
    BudgetRequest,
    BudgetResponse,
    CategoryTotalResponse,
    CPPRequest,
    CPPResponse,
    NetWorthRequest,
    NetWorthResponse,
)
from maplecalc.config import settings
from maplecalc.engine.budget import budget_5030
from maplecalc.engine.cpp import cpp_benefits
from maplecalc.engine.money import to_cents
from maplecalc.engine.net_worth import net_worth
from maplecalc.models.inputs import BudgetInputs, CPPInputs, NetWorthInputs
from maplecalc.models.results import BudgetBucket

router = APIRouter(prefix=f"{settings.api_prefix}/planning", tags=["planning"])


def _bucket(b: BudgetBucket) -> BudgetBucketResponse:
    return BudgetBucketResponse(
        name=b.name,
        target_share=b.target_share,
        target=b.target,
        actual=b.actual,
        actual_share=b.actual_share,
        difference=b.difference,
        over_target=b.over_target,
    )


@router.post("/budget", response_model=BudgetResponse)
async def budget(req: BudgetRequest):
    """50/30/20 split of monthly take-home pay."""
    r = budget_5030(BudgetInputs(**req.model_dump()))
    return BudgetResponse(
        annual_gross=r.annual_gross,
        annual_net=r.annual_net,
        monthly_net=r.monthly_net,
        needs=_bucket(r.needs),
        wants=_bucket(r.wants),
        savings=_bucket(r.savings),
        total_allocated=r.total_allocated,
        unallocated=r.unallocated,
    )


@router.post("/net-worth", response_model=NetWorthResponse)
async def worth(req: NetWorthRequest):
    r = net_worth(NetWorthInputs(**req.model_dump()))
    return NetWorthResponse(
        total_assets=r.total_assets,
        total_liabilities=r.total_liabilities,
        net_worth=r.net_worth,
        debt_ratio=r.debt_ratio,
        benchmark_label=r.benchmark_label,
        benchmark_median=r.benchmark_median,
        versus_median=r.versus_median,
        asset_breakdown=[
            CategoryTotalResponse(key=c.key, label=c.label, total=c.total) for c in r.asset_breakdown
        ],
        liability_breakdown=[
            CategoryTotalResponse(key=c.key, label=c.label, total=c.total)
            for c in r.liability_breakdown
        ],
    )


@router.post("/cpp", response_model=CPPResponse)
async def cpp(req: CPPRequest):
    """CPP retirement pension at 60, 65 and 70."""
    r = cpp_benefits(CPPInputs(**req.model_dump()))
    return CPPResponse(
        pensionable_income=r.pensionable_income,
        earnings_ratio=r.earnings_ratio,
        years_factor=r.years_factor,
        at_60_monthly=r.at_60_monthly,
        at_65_monthly=r.at_65_monthly,
        at_70_monthly=r.at_70_monthly,
        breakeven_60_65=to_cents(r.breakeven_60_65) if r.breakeven_60_65 is not None else None,
        breakeven_65_70=to_cents(r.breakeven_65_70) if r.breakeven_65_70 is not None else None,
        lifetime_60_to_85=r.lifetime_60_to_85,
        lifetime_65_to_85=r.lifetime_65_to_85,
        lifetime_70_to_85=r.lifetime_70_to_85,
        years_until_65=r.years_until_65,
    )
