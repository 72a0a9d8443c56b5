from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from poke_browser.core.view_registry import ViewRegistry
from poke_browser.ui.ids import IDs


def build_view_panel(registry: ViewRegistry, default_view_id: str | None) -> dbc.Card:
    view_options = registry.options()

    return dbc.Card(
        [
            dbc.CardHeader("View", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("View type", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.VIEW_SELECT,
                        options=view_options,
                        value=default_view_id,
                        clearable=False,
                        placeholder="Select view type",
                        className="mb-1",
                    ),
                    html.Small(
                        "Choose the kind of chart (type distribution, radar, parallel coordinates, histogram).",
                        className="text-muted",
                    ),
                ]
            ),
        ],
        className="pb-view-card mb-3",
    )
