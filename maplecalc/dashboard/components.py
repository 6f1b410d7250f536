"""Shared layout pieces for the dashboard pages."""

from dash import html

CARD_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "padding": "1rem 1.5rem",
    "minWidth": "180px",
    "textAlign": "center",
}

EMPTY_MSG_STYLE = {
    "textAlign": "center",
    "padding": "4rem 2rem",
    "color": "#888",
    "fontSize": "1.1rem",
}

ERROR_MSG_STYLE = {**EMPTY_MSG_STYLE, "color": "#e94560"}

ROW_STYLE = {"display": "flex", "gap": "1rem", "marginBottom": "1.5rem", "flexWrap": "wrap"}


def field(label, component):
    return html.Div([
        html.Label(label, style={"display": "block", "fontWeight": "500", "marginBottom": "0.25rem"}),
        component,
    ], style={"width": "220px"})


def kpi_card(label, value, subtitle=None, color=None):
    value_style = {"fontSize": "1.5rem", "fontWeight": "bold"}
    if color:
        value_style["color"] = color
    children = [
        html.Div(value, style=value_style),
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
    ]
    if subtitle:
        children.append(
            html.Div(subtitle, style={"fontSize": "0.75rem", "color": "#999", "marginTop": "0.25rem"})
        )
    return html.Div(children, style=CARD_STYLE)


def empty_state(message):
    return html.Div(message, style=EMPTY_MSG_STYLE)


def error_state(message):
    return html.Div(message, style=ERROR_MSG_STYLE)
