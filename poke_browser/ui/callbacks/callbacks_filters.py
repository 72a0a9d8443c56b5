from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from poke_browser.ui.ids import IDs

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Hide/show sidebar widgets based on the active view's FilterProfile
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TYPE_LEGEND_CONTAINER, "style"),
        Output(IDs.Control.GENERATION_CONTAINER, "style"),
        Output(IDs.Control.POKEMON_CONTAINER, "style"),
        Output(IDs.Control.COMPARE_CONTAINER, "style"),
        Output(IDs.Control.SEARCH_CONTAINER, "style"),
        Output(IDs.Control.TYPE_FILTER_CONTAINER, "style"),
        Output(IDs.Control.RESET_BTN, "style"),
        Input(IDs.Control.VIEW_SELECT, "value"),
    )
    def update_filter_visibility(view_id: str | None):
        def style(flag: bool) -> dict:
            return {} if flag else {"display": "none"}

        if not view_id or ctx.registry is None or view_id not in ctx.registry:
            return tuple(style(False) for _ in range(7))

        profile = ctx.registry.create(view_id, ctx.dataset).filter_profile
        interactive = bool(profile.search or profile.type_filters)

        return (
            style(profile.type_legend),
            style(profile.generation),
            style(profile.pokemon),
            style(profile.compare_pokemon),
            style(profile.search),
            style(profile.type_filters),
            style(interactive),
        )
