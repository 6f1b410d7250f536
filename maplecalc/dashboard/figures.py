"""Plotly figure builders. Results in, go.Figure out; no Dash state."""

import plotly.graph_objects as go

from maplecalc.models.results import CreditCardResult, LandTransferResult, TFSAResult

NAVY = "#1a1a2e"
RED = "#e94560"
GREEN = "#2ecc71"
GREY = "#999999"

SCENARIO_COLORS = [RED, NAVY, GREEN]


def payoff_balance_figure(result: CreditCardResult) -> go.Figure:
    """Remaining balance month by month for each repayment scenario."""
    fig = go.Figure()
    scenarios = [result.minimum, result.fixed]
    if result.extra is not None:
        scenarios.append(result.extra)

    for scenario, color in zip(scenarios, SCENARIO_COLORS):
        periods = scenario.schedule.periods
        name = scenario.label if scenario.amortizes else f"{scenario.label} (never paid off)"
        fig.add_trace(go.Scatter(
            x=[0] + [p.period for p in periods],
            y=[float(result.balance)] + [float(p.balance) for p in periods],
            mode="lines",
            name=name,
            line=dict(color=color, width=3 if color == NAVY else 2),
        ))

    fig.update_layout(
        title="Balance Over Time",
        xaxis_title="Month",
        yaxis_title="Balance ($)",
        hovermode="x unified",
        legend=dict(x=0.6, y=0.98),
        margin=dict(t=40, b=20),
    )
    return fig


def payoff_interest_figure(result: CreditCardResult) -> go.Figure:
    """Total interest per scenario. Scenarios that never pay off are left out."""
    scenarios = [result.minimum, result.fixed]
    if result.extra is not None:
        scenarios.append(result.extra)
    paid_off = [s for s in scenarios if s.amortizes]

    fig = go.Figure(go.Bar(
        x=[s.label for s in paid_off],
        y=[float(s.total_interest) for s in paid_off],
        marker_color=SCENARIO_COLORS[: len(paid_off)],
        text=[f"${float(s.total_interest):,.0f}" for s in paid_off],
        textposition="outside",
    ))
    fig.update_layout(
        title="Total Interest Paid",
        yaxis_title="$",
        showlegend=False,
        margin=dict(t=40, b=20),
    )
    return fig


def tfsa_growth_figure(result: TFSAResult) -> go.Figure:
    """Stacked invested vs growth by year, with the balance line on top."""
    periods = result.projection.periods
    years = [p.period for p in periods]
    start = result.projection.starting_balance
    invested = [float(start + p.cumulative_contributions) for p in periods]
    growth = [float(p.cumulative_growth) for p in periods]

    fig = go.Figure()
    fig.add_trace(go.Bar(x=years, y=invested, name="Invested", marker_color=NAVY))
    fig.add_trace(go.Bar(x=years, y=growth, name="Tax-free growth", marker_color=GREEN))
    fig.add_trace(go.Scatter(
        x=years,
        y=[float(p.ending_balance) for p in periods],
        mode="lines",
        name="Balance",
        line=dict(color=RED, width=2),
    ))
    fig.update_layout(
        title=f"TFSA Growth over {len(years)} Years",
        barmode="stack",
        xaxis_title="Year",
        yaxis_title="$",
        legend=dict(x=0.02, y=0.98),
        margin=dict(t=40, b=20),
    )
    return fig


def land_transfer_figure(result: LandTransferResult) -> go.Figure:
    """Provincial tax contributed by each bracket the price reaches."""
    lines = [b for b in result.brackets if b.applies]
    fig = go.Figure(go.Bar(
        x=[b.label for b in lines],
        y=[float(b.tax) for b in lines],
        marker_color=NAVY,
        text=[f"{float(b.rate) * 100:.1f}%" for b in lines],
        textposition="outside",
    ))
    fig.update_layout(
        title=f"{result.province_name} Tax by Bracket",
        yaxis_title="$",
        showlegend=False,
        margin=dict(t=40, b=20),
    )
    return fig
