"""Savings routes: TFSA, FHSA and emergency fund."""

from fastapi import APIRouter

from maplecalc.api.schemas import (
    EmergencyFundRequest,
    EmergencyFundResponse,
    EmergencyMilestoneResponse,
    FHSARequest,
    FHSAResponse,
    GrowthYearResponse,
    MilestoneResponse,
    TFSARequest,
    TFSAResponse,
)
from maplecalc.config import settings
from maplecalc.engine.emergency_fund import emergency_fund
from maplecalc.engine.fhsa import fhsa_projection
from maplecalc.engine.projection import GrowthProjection
from maplecalc.engine.tfsa import tfsa_growth
from maplecalc.models.inputs import EmergencyFundInputs, FHSAInputs, TFSAInputs

router = APIRouter(prefix=f"{settings.api_prefix}/savings", tags=["savings"])


def _growth_years(projection: GrowthProjection) -> list[GrowthYearResponse]:
    return [
        GrowthYearResponse(
            year=p.period,
            contribution=p.contribution,
            growth=p.growth,
            ending_balance=p.ending_balance,
        )
        for p in projection.periods
    ]


@router.post("/tfsa", response_model=TFSAResponse)
async def tfsa(req: TFSARequest):
    r = tfsa_growth(TFSAInputs(**req.model_dump()), current_year=settings.tax_year)
    return TFSAResponse(
        final_balance=r.final_balance,
        total_invested=r.total_invested,
        total_growth=r.total_growth,
        growth_ratio=r.growth_ratio,
        tax_savings=r.tax_savings,
        lifetime_room=r.lifetime_room,
        remaining_room=r.remaining_room,
        exceeds_room=r.exceeds_room,
        milestones=[MilestoneResponse(year=y, balance=b) for y, b in r.milestones],
        max_contribution_final=r.max_contribution_final,
        required_return=r.required_return,
        goal_reachable=r.goal_reachable,
        yearly=_growth_years(r.projection),
    )


@router.post("/fhsa", response_model=FHSAResponse)
async def fhsa(req: FHSARequest):
    r = fhsa_projection(FHSAInputs(**req.model_dump()))
    return FHSAResponse(
        marginal_rate=r.marginal_rate,
        room_accrued=r.room_accrued,
        current_room=r.current_room,
        years_to_max=r.years_to_max,
        final_balance=r.final_balance,
        total_contributions=r.total_contributions,
        total_growth=r.total_growth,
        annual_tax_saving=r.annual_tax_saving,
        total_tax_saving=r.total_tax_saving,
        rrsp_final_after_tax=r.rrsp_final_after_tax,
        fhsa_advantage=r.fhsa_advantage,
        years_to_goal=r.years_to_goal,
        on_track=r.on_track,
        yearly=_growth_years(r.projection),
    )


@router.post("/emergency-fund", response_model=EmergencyFundResponse)
async def emergency(req: EmergencyFundRequest):
    r = emergency_fund(EmergencyFundInputs(**req.model_dump()))
    return EmergencyFundResponse(
        monthly_expenses=r.monthly_expenses,
        recommended_months=r.recommended_months,
        min_target=r.min_target,
        ideal_target=r.ideal_target,
        max_target=r.max_target,
        gap=r.gap,
        months_to_goal=r.months_to_goal,
        months_with_interest=r.months_with_interest,
        interest_earned=r.interest_earned,
        percent_complete=r.percent_complete,
        milestones=[
            EmergencyMilestoneResponse(
                months=m.months, amount=m.amount, reached=m.reached, months_away=m.months_away
            )
            for m in r.milestones
        ],
    )
