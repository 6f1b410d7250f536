"""Credit card payoff page: minimum payments vs a fixed payment."""

import dash
from dash import Input, Output, callback, dcc, html

from maplecalc.config import settings
from maplecalc.dashboard.components import ROW_STYLE, empty_state, error_state, field, kpi_card
from maplecalc.dashboard.figures import payoff_balance_figure, payoff_interest_figure
from maplecalc.engine.credit_card import credit_card_payoff
from maplecalc.engine.errors import CalculationError, MissingInputError
from maplecalc.engine.money import fmt_money, fmt_months, parse_decimal, percent
from maplecalc.models.inputs import CreditCardInputs

dash.register_page(__name__, path="/", name="Credit Card")

layout = html.Div([
    html.H2("Credit Card Payoff"),
    html.P("See what minimum payments really cost, and how much a fixed payment saves."),
    html.Div([
        field("Card balance ($)", dcc.Input(id="cc-balance", type="number", placeholder="5,000")),
        field("Interest rate (%)", dcc.Input(id="cc-rate", type="number", value=19.99, step=0.01)),
        field("Minimum payment (%)", dcc.Input(id="cc-min-pct", type="number", value=2, step=0.5)),
        field("Minimum floor ($)", dcc.Input(id="cc-min-floor", type="number", value=10)),
        field("Fixed monthly payment ($)", dcc.Input(id="cc-fixed", type="number", value=0)),
        field("Extra monthly payment ($)", dcc.Input(id="cc-extra", type="number", value=0)),
    ], style=ROW_STYLE),
    html.Div(id="cc-results"),
])


@callback(
    Output("cc-results", "children"),
    Input("cc-balance", "value"),
    Input("cc-rate", "value"),
    Input("cc-min-pct", "value"),
    Input("cc-min-floor", "value"),
    Input("cc-fixed", "value"),
    Input("cc-extra", "value"),
)
def render_payoff(balance, rate, min_pct, min_floor, fixed, extra):
    try:
        result = credit_card_payoff(CreditCardInputs(
            balance=parse_decimal(balance, "Balance"),
            annual_rate=percent(parse_decimal(rate, "Interest rate")),
            minimum_percent=percent(parse_decimal(min_pct, "Minimum payment")),
            minimum_floor=parse_decimal(min_floor, "Minimum floor"),
            fixed_payment=parse_decimal(fixed or 0),
            extra_payment=parse_decimal(extra or 0),
        ), period_cap=settings.payoff_period_cap)
    except MissingInputError:
        return empty_state("Enter your card balance to see your payoff timeline.")
    except CalculationError as e:
        return error_state(e.detail)

    minimum = result.minimum
    if minimum.amortizes:
        min_time = fmt_months(minimum.months)
        min_interest = fmt_money(minimum.total_interest)
    else:
        min_time = "Never"
        min_interest = "Unbounded"

    cards = [
        kpi_card("Time on minimums", min_time, color="#e94560"),
        kpi_card("Interest on minimums", min_interest, color="#e94560"),
    ]
    if result.fixed.amortizes:
        cards.append(kpi_card(
            "Time at fixed payment", fmt_months(result.fixed.months),
            f"{fmt_money(result.fixed.first_payment, cents=True)}/month",
        ))
    if result.interest_saved_fixed is not None:
        cards.append(kpi_card(
            "Interest saved", fmt_money(result.interest_saved_fixed), color="#2ecc71",
        ))

    return html.Div([
        html.Div(cards, style=ROW_STYLE),
        html.Div([
            html.Div(dcc.Graph(figure=payoff_balance_figure(result)), style={"width": "60%"}),
            html.Div(dcc.Graph(figure=payoff_interest_figure(result)), style={"width": "40%"}),
        ], style={"display": "flex", "gap": "1rem"}),
        html.H3("Pay it off by a deadline"),
        html.Ul([
            html.Li(f"{t.periods} months: {fmt_money(t.payment, cents=True)}/month "
                    f"({fmt_money(t.total_interest)} interest)")
            for t in result.targets
        ]),
    ])
