from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

import dash
from dash import ALL, Input, Output, State, no_update

from poke_browser.core.filter_state import FilterState
from poke_browser.core.interaction_state import SUGGESTION_LIMIT
from poke_browser.core.record import Record
from poke_browser.ui.helpers import suggestion_items
from poke_browser.ui.ids import IDs
from poke_browser.views.type_distribution_view import TypeDistributionView

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _clicked_type(click_data: Optional[dict]) -> Optional[str]:
    if not click_data:
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    return custom if isinstance(custom, str) else None


def _is_suggestion(triggered_id: Any) -> bool:
    return isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.SUGGESTION


def apply_ui_event(
    state: FilterState,
    triggered_id: Any,
    inputs: dict[str, Any],
    records: Sequence[Record],
    suggestion_limit: int = SUGGESTION_LIMIT,
) -> FilterState:
    """
    Pure helper: apply the single UI event identified by ``triggered_id`` to the
    session's FilterState and return it.

    Each widget maps to exactly one transition so the renderer only ever sees
    the combined state, never raw widget values.
    """
    interaction = state.interaction

    if triggered_id == IDs.Control.VIEW_SELECT:
        if inputs.get("view"):
            state.view_id = inputs["view"]

    elif triggered_id == IDs.Control.GENERATION_SLIDER:
        value = inputs.get("generation")
        state.generation = int(value) if value is not None else None

    elif triggered_id == IDs.Control.POKEMON_SELECT:
        state.pokemon = inputs.get("pokemon")

    elif triggered_id == IDs.Control.COMPARE_SELECT:
        state.compare_pokemon = inputs.get("compare_pokemon")

    elif triggered_id == IDs.Control.TYPE_LEGEND_SELECT:
        state.selected_type = inputs.get("selected_type") or None

    elif triggered_id == IDs.Control.BAR_RESET_BTN:
        state.selected_type = None

    elif triggered_id == IDs.Control.MAIN_GRAPH:
        clicked = _clicked_type(inputs.get("click_data"))
        if clicked is not None and state.view_id == TypeDistributionView.id:
            state.toggle_selected_type(clicked)

    elif triggered_id == IDs.Control.SEARCH_INPUT:
        interaction.set_search_term(inputs.get("search"), records, suggestion_limit)

    elif _is_suggestion(triggered_id):
        interaction.select_suggestion(triggered_id["index"])

    elif triggered_id in (IDs.Control.TYPE1_ENABLED, IDs.Control.TYPE1_VALUE):
        interaction.set_type1_filter(bool(inputs.get("type1_enabled")), inputs.get("type1_value"))

    elif triggered_id in (IDs.Control.TYPE2_ENABLED, IDs.Control.TYPE2_VALUE):
        interaction.set_type2_filter(bool(inputs.get("type2_enabled")), inputs.get("type2_value"))

    elif triggered_id == IDs.Control.RESET_BTN:
        interaction.reset()

    else:
        logger.debug("Ignoring unknown UI event", extra={"triggered_id": str(triggered_id)})

    return state


def register_state_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Every widget event -> one FilterState transition
    # ---------------------------------------------------------
    @app.callback(
        output=[
            Output(IDs.Store.FILTER_STATE, "data"),
            Output(IDs.Control.SUGGESTIONS, "children"),
            Output(IDs.Control.SEARCH_INPUT, "value"),
            Output(IDs.Control.TYPE1_ENABLED, "value"),
            Output(IDs.Control.TYPE2_ENABLED, "value"),
            Output(IDs.Control.TYPE_LEGEND_SELECT, "value"),
        ],
        inputs=dict(
            view=Input(IDs.Control.VIEW_SELECT, "value"),
            generation=Input(IDs.Control.GENERATION_SLIDER, "value"),
            pokemon=Input(IDs.Control.POKEMON_SELECT, "value"),
            compare_pokemon=Input(IDs.Control.COMPARE_SELECT, "value"),
            selected_type=Input(IDs.Control.TYPE_LEGEND_SELECT, "value"),
            bar_reset=Input(IDs.Control.BAR_RESET_BTN, "n_clicks"),
            click_data=Input(IDs.Control.MAIN_GRAPH, "clickData"),
            search=Input(IDs.Control.SEARCH_INPUT, "value"),
            suggestion_clicks=Input({"type": IDs.Pattern.SUGGESTION, "index": ALL}, "n_clicks"),
            type1_enabled=Input(IDs.Control.TYPE1_ENABLED, "value"),
            type1_value=Input(IDs.Control.TYPE1_VALUE, "value"),
            type2_enabled=Input(IDs.Control.TYPE2_ENABLED, "value"),
            type2_value=Input(IDs.Control.TYPE2_VALUE, "value"),
            reset=Input(IDs.Control.RESET_BTN, "n_clicks"),
        ),
        state=dict(fs_data=State(IDs.Store.FILTER_STATE, "data")),
        prevent_initial_call=True,
    )
    def on_ui_event(**inputs):
        triggered_id = dash.ctx.triggered_id

        # Re-rendered suggestion items fire with n_clicks=0; only real clicks count
        if _is_suggestion(triggered_id) and not dash.ctx.triggered[0].get("value"):
            raise dash.exceptions.PreventUpdate

        fs_data = inputs.pop("fs_data")
        try:
            state = FilterState.from_dict(fs_data or {})
        except (TypeError, ValueError):
            logger.exception("Invalid filter state in store: %r", fs_data)
            raise dash.exceptions.PreventUpdate

        state = apply_ui_event(
            state,
            triggered_id,
            inputs,
            ctx.dataset.records,
            getattr(ctx.global_config, "suggestion_limit", SUGGESTION_LIMIT),
        )

        search_value = no_update
        type1_enabled = no_update
        type2_enabled = no_update
        legend_value = no_update

        if _is_suggestion(triggered_id):
            search_value = state.interaction.search_term
        elif triggered_id == IDs.Control.RESET_BTN:
            search_value = ""
            type1_enabled = False
            type2_enabled = False
        elif triggered_id in (IDs.Control.MAIN_GRAPH, IDs.Control.BAR_RESET_BTN):
            legend_value = state.selected_type

        logger.debug(
            "ui_event",
            extra={"triggered_id": str(triggered_id), "view_id": state.view_id},
        )

        return (
            state.to_dict(),
            suggestion_items(state.interaction.suggestions),
            search_value,
            type1_enabled,
            type2_enabled,
            legend_value,
        )
