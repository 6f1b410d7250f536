"""Plotly Dash application: multi-page layout."""

import logging

from dash import Dash, dcc, html, page_container

from maplecalc.config import settings

logging.basicConfig(level=settings.log_level)

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title=settings.app_name,
)

app.layout = html.Div([
    # Navigation
    html.Nav([
        html.Div([
            html.H1(settings.app_name, style={"fontSize": "1.5rem", "margin": "0"}),
            html.Div([
                dcc.Link("Credit Card", href="/", style={"marginRight": "1rem"}),
                dcc.Link("TFSA", href="/tfsa", style={"marginRight": "1rem"}),
                dcc.Link("Land Transfer Tax", href="/land-transfer-tax", style={"marginRight": "1rem"}),
            ]),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=settings.dashboard_port)
