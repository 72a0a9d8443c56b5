from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from poke_browser.ui.helpers import initial_filter_state
from poke_browser.ui.ids import IDs
from poke_browser.ui.layout.build_filter_panel import build_filter_panel
from poke_browser.ui.layout.build_navbar import build_navbar
from poke_browser.ui.layout.build_plot_panel import build_plot_panel
from poke_browser.ui.layout.build_view_panel import build_view_panel

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    state = initial_filter_state(ctx)

    navbar = build_navbar(ctx.dataset, ctx.global_config)
    view_panel = build_view_panel(ctx.registry, state.view_id)
    filter_panel = build_filter_panel(ctx.dataset, state)
    plot_panel = build_plot_panel()

    return dbc.Container(
        fluid=True,
        className="pb-root",
        children=[
            navbar,

            # One chart session per browser tab
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="memory", data=state.to_dict()),

            dbc.Row(
                [
                    dbc.Col(
                        [
                            view_panel,
                            filter_panel,
                        ],
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        plot_panel,
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
