"""TFSA growth page."""

import dash
from dash import Input, Output, callback, dcc, html

from maplecalc.config import settings
from maplecalc.dashboard.components import ROW_STYLE, empty_state, error_state, field, kpi_card
from maplecalc.dashboard.figures import tfsa_growth_figure
from maplecalc.engine.errors import CalculationError, MissingInputError
from maplecalc.engine.money import fmt_money, parse_decimal
from maplecalc.engine.tfsa import INVESTMENT_PRESETS, tfsa_growth
from maplecalc.models.inputs import TFSAInputs

dash.register_page(__name__, path="/tfsa", name="TFSA")

PRESET_LABELS = {
    "hisa_gic": "HISA / GIC",
    "conservative_etf": "Conservative ETF",
    "balanced_etf": "Balanced ETF",
    "growth_etf": "Growth ETF",
    "all_equity_etf": "All-Equity ETF",
}

layout = html.Div([
    html.H2("TFSA Growth"),
    html.Div([
        field("Current balance ($)", dcc.Input(id="tfsa-balance", type="number", value=0)),
        field("Annual contribution ($)", dcc.Input(id="tfsa-contribution", type="number", value=7000)),
        field("Investment mix", dcc.Dropdown(
            id="tfsa-preset",
            options=[
                {"label": f"{PRESET_LABELS[k]} ({float(v) * 100:g}%)", "value": k}
                for k, v in INVESTMENT_PRESETS.items()
            ],
            value="growth_etf",
            clearable=False,
        )),
        field("Years", dcc.Input(id="tfsa-years", type="number", value=25, min=1, max=60)),
        field("Birth year", dcc.Input(id="tfsa-birth-year", type="number", placeholder="1990")),
        field("Contributed to date ($)", dcc.Input(id="tfsa-contributed", type="number", value=0)),
        field("Goal ($, optional)", dcc.Input(id="tfsa-goal", type="number")),
    ], style=ROW_STYLE),
    html.Div(id="tfsa-results"),
])


@callback(
    Output("tfsa-results", "children"),
    Input("tfsa-balance", "value"),
    Input("tfsa-contribution", "value"),
    Input("tfsa-preset", "value"),
    Input("tfsa-years", "value"),
    Input("tfsa-birth-year", "value"),
    Input("tfsa-contributed", "value"),
    Input("tfsa-goal", "value"),
)
def render_tfsa(balance, contribution, preset, years, birth_year, contributed, goal):
    try:
        result = tfsa_growth(TFSAInputs(
            current_balance=parse_decimal(balance or 0),
            annual_contribution=parse_decimal(contribution or 0),
            annual_return=INVESTMENT_PRESETS[preset],
            years=int(parse_decimal(years, "Years")),
            birth_year=int(birth_year) if birth_year else None,
            contributed_to_date=parse_decimal(contributed or 0),
            goal=parse_decimal(goal) if goal else None,
        ), current_year=settings.tax_year)
    except MissingInputError:
        return empty_state("Enter a balance or a yearly contribution to project your TFSA.")
    except CalculationError as e:
        return error_state(e.detail)

    cards = [
        kpi_card("Final balance", fmt_money(result.final_balance), color="#1a1a2e"),
        kpi_card("Tax-free growth", fmt_money(result.total_growth), color="#2ecc71"),
        kpi_card("Tax saved vs taxable account", fmt_money(result.tax_savings), "At a 40% rate"),
        kpi_card(
            "Room remaining", fmt_money(result.remaining_room),
            f"Of {fmt_money(result.lifetime_room)} lifetime room",
            color="#e94560" if result.exceeds_room else None,
        ),
    ]
    if result.required_return is not None:
        cards.append(kpi_card(
            "Return needed for goal", f"{float(result.required_return) * 100:.2f}%",
        ))
    elif result.goal_reachable is False:
        cards.append(kpi_card("Return needed for goal", "Out of reach", color="#e94560"))

    return html.Div([
        html.Div(cards, style=ROW_STYLE),
        dcc.Graph(figure=tfsa_growth_figure(result)),
        html.P(
            f"Maxing out at the {settings.tax_year} limit would grow to "
            f"{fmt_money(result.max_contribution_final)}."
        ),
    ])
