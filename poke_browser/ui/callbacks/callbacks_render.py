from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from poke_browser.core.filter_state import FilterState
from poke_browser.ui.ids import IDs

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def status_text(ctx: AppConfig, state: FilterState) -> str:
    """
    One-line summary under the chart: visible count while searching/filtering.
    """
    records = ctx.dataset.records
    interaction = state.interaction
    active = (
        interaction.search_active
        or interaction.type1_filter.enabled
        or interaction.type2_filter.enabled
    )
    if not active:
        return f"{len(records)} Pokémon"

    n_visible = len(interaction.visible_records(records))
    if n_visible == 0:
        return f"No results (0 of {len(records)} Pokémon visible)"
    return f"{n_visible} of {len(records)} Pokémon visible"


def render_state(ctx: AppConfig, fs_data: dict[str, Any] | None) -> go.Figure:
    if fs_data is None:
        return _message_figure(
            "No view selected.",
            "Choose a view to see a chart.",
        )

    try:
        state = FilterState.from_dict(fs_data)
    except (TypeError, ValueError):
        logger.exception("Invalid filter state in main graph callback: %r", fs_data)
        return _error_figure("Internal error: invalid filter state.")

    registry = ctx.registry
    if registry is None:
        return _error_figure("View registry is not available.")
    if state.view_id not in registry:
        return _error_figure(f"Unknown view '{state.view_id}'.")

    try:
        view = registry.create(state.view_id, ctx.dataset)

        logger.info(
            "render_start",
            extra={
                "view_id": state.view_id,
                "dataset": ctx.dataset.name,
                "search_active": state.interaction.search_active,
            },
        )

        data = view.timed_compute(state)
        return view.render_figure(data, state)

    except Exception:
        logger.exception(
            "Error in update_main_graph_from_state",
            extra={"filter_state": fs_data},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main figure: FilterState -> figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_main_graph_from_state(fs_data: dict[str, Any] | None):
        fig = render_state(ctx, fs_data)
        if fs_data is None:
            return fig, ""
        try:
            status = status_text(ctx, FilterState.from_dict(fs_data))
        except (TypeError, ValueError):
            status = ""
        return fig, status
