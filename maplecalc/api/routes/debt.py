"""Debt repayment routes."""

from fastapi import APIRouter

from maplecalc.api.schemas import (
    CreditCardRequest,
    CreditCardResponse,
    PayoffPeriodResponse,
    PayoffRequest,
    PayoffResponse,
    ScenarioResponse,
    TargetPaymentRequest,
    TargetPaymentResponse,
    YearSummaryResponse,
)
from maplecalc.config import settings
from maplecalc.engine.amortization import (
    FixedPayment,
    TargetPayment,
    payoff_schedule,
    require_amortizing,
    target_payment,
    yearly_summary,
)
from maplecalc.engine.credit_card import credit_card_payoff
from maplecalc.engine.errors import MissingInputError
from maplecalc.engine.money import monthly_rate
from maplecalc.models.inputs import CreditCardInputs
from maplecalc.models.results import PayoffScenario

router = APIRouter(prefix=f"{settings.api_prefix}/debt", tags=["debt"])


def _scenario(s: PayoffScenario) -> ScenarioResponse:
    return ScenarioResponse(
        label=s.label,
        amortizes=s.amortizes,
        first_payment=s.first_payment,
        months=s.months,
        total_paid=s.total_paid,
        total_interest=s.total_interest,
    )


def _target(t: TargetPayment) -> TargetPaymentResponse:
    return TargetPaymentResponse(
        months=t.periods,
        payment=t.payment,
        total_paid=t.total_paid,
        total_interest=t.total_interest,
    )


def yearly_rows(rows: list[dict]) -> list[YearSummaryResponse]:
    return [
        YearSummaryResponse(
            year=r["year"],
            paid=r["paid"],
            interest=r["interest"],
            principal=r["principal"],
            ending_balance=r["ending_balance"],
        )
        for r in rows
    ]


@router.post("/credit-card", response_model=CreditCardResponse)
async def credit_card(req: CreditCardRequest):
    """Minimum payments vs a fixed payment vs fixed + extra."""
    result = credit_card_payoff(
        CreditCardInputs(**req.model_dump()), period_cap=settings.payoff_period_cap
    )
    return CreditCardResponse(
        balance=result.balance,
        minimum=_scenario(result.minimum),
        fixed=_scenario(result.fixed),
        extra=_scenario(result.extra) if result.extra else None,
        targets=[_target(t) for t in result.targets],
        yearly=yearly_rows(result.yearly),
        interest_saved_fixed=result.interest_saved_fixed,
        months_saved_fixed=result.months_saved_fixed,
        interest_saved_extra=result.interest_saved_extra,
        months_saved_extra=result.months_saved_extra,
    )


@router.post("/payoff", response_model=PayoffResponse)
async def payoff(req: PayoffRequest):
    """Month-by-month schedule for a fixed monthly payment."""
    if req.monthly_payment <= 0:
        raise MissingInputError("Enter your monthly payment")
    schedule = payoff_schedule(
        req.balance,
        monthly_rate(req.annual_rate),
        FixedPayment(req.monthly_payment),
        period_cap=settings.payoff_period_cap,
    )
    if req.require_payoff:
        require_amortizing(schedule)

    return PayoffResponse(
        amortizes=schedule.amortizes,
        months=schedule.period_count if schedule.amortizes else None,
        total_paid=schedule.total_paid if schedule.amortizes else None,
        total_interest=schedule.total_interest if schedule.amortizes else None,
        periods=[
            PayoffPeriodResponse(
                period=p.period,
                payment=p.payment,
                interest=p.interest,
                principal=p.principal,
                balance=p.balance,
            )
            for p in schedule.periods
        ],
        yearly=yearly_rows(yearly_summary(schedule)),
    )


@router.post("/target-payment", response_model=TargetPaymentResponse)
async def payment_for_target(req: TargetPaymentRequest):
    """Level payment that clears the balance in the requested number of months."""
    if req.balance <= 0:
        raise MissingInputError("Enter your balance")
    return _target(target_payment(req.balance, monthly_rate(req.annual_rate), req.months))
