"""Land transfer tax page."""

import dash
from dash import Input, Output, callback, dcc, html

from maplecalc.dashboard.components import ROW_STYLE, empty_state, error_state, field, kpi_card
from maplecalc.dashboard.figures import land_transfer_figure
from maplecalc.engine.errors import CalculationError, MissingInputError
from maplecalc.engine.land_transfer import PROVINCIAL_TABLES, land_transfer_tax
from maplecalc.engine.money import fmt_money, parse_decimal
from maplecalc.models.inputs import LandTransferInputs, Province

dash.register_page(__name__, path="/land-transfer-tax", name="Land Transfer Tax")

layout = html.Div([
    html.H2("Land Transfer Tax"),
    html.Div([
        field("Province", dcc.Dropdown(
            id="ltt-province",
            options=[{"label": t.name, "value": p.value} for p, t in PROVINCIAL_TABLES.items()],
            value="ON",
            clearable=False,
        )),
        field("Purchase price ($)", dcc.Input(id="ltt-price", type="number", placeholder="750,000")),
        field("Buyer", dcc.Checklist(
            id="ltt-options",
            options=[
                {"label": " First-time buyer", "value": "first_time"},
                {"label": " Toronto", "value": "toronto"},
            ],
            value=[],
        )),
    ], style=ROW_STYLE),
    html.Div(id="ltt-results"),
])


@callback(
    Output("ltt-results", "children"),
    Input("ltt-province", "value"),
    Input("ltt-price", "value"),
    Input("ltt-options", "value"),
)
def render_land_transfer(province, price, options):
    options = options or []
    try:
        result = land_transfer_tax(LandTransferInputs(
            province=Province(province),
            purchase_price=parse_decimal(price, "Purchase price"),
            first_time_buyer="first_time" in options,
            toronto="toronto" in options,
        ))
    except MissingInputError:
        return empty_state("Enter a purchase price to estimate your land transfer tax.")
    except CalculationError as e:
        return error_state(e.detail)

    if not result.has_tax:
        return html.Div([
            html.Div([kpi_card("Land transfer tax", "$0", result.province_name)], style=ROW_STYLE),
            html.P(result.notes),
        ])

    cards = [
        kpi_card("Provincial tax", fmt_money(result.provincial_net, cents=True)),
        kpi_card("Total payable", fmt_money(result.total_net, cents=True), color="#1a1a2e"),
        kpi_card("Effective rate", f"{float(result.effective_rate) * 100:.2f}%"),
    ]
    if result.municipal_tax > 0:
        cards.insert(1, kpi_card("Toronto MLTT", fmt_money(result.municipal_net, cents=True)))
    if result.total_rebate > 0:
        cards.append(kpi_card(
            "Rebates", fmt_money(result.total_rebate, cents=True), result.rebate_label, color="#2ecc71",
        ))

    return html.Div([
        html.Div(cards, style=ROW_STYLE),
        dcc.Graph(figure=land_transfer_figure(result)),
        html.P(result.notes) if result.notes else None,
    ])
