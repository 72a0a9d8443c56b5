from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Tuple

import dash_bootstrap_components as dbc

from poke_browser.core.dataset import Dataset
from poke_browser.core.filter_state import FilterState
from poke_browser.core.record import NO_TYPE
from poke_browser.ui.ids import suggestion_id

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig


def get_filter_dropdown_options(
    dataset: Dataset,
) -> Tuple[List[dict], List[dict], List[dict], Dict[int, str]]:
    types = dataset.types
    type_options = [{"label": t, "value": t} for t in types]

    # Type 2 can also be "no secondary type"
    type2_options = type_options + [{"label": "None (single type)", "value": NO_TYPE}]

    # Dropdown keeps file order, like the dataset's own listing
    pokemon_options = [{"label": n, "value": n} for n in dataset.names]

    generation_marks = {gen: f"Gen {gen}" for gen in dataset.generations}

    return type_options, type2_options, pokemon_options, generation_marks


def suggestion_items(names: List[str]) -> List[dbc.ListGroupItem]:
    return [
        dbc.ListGroupItem(
            name,
            id=suggestion_id(name),
            n_clicks=0,
            action=True,
            className="py-1 px-2",
        )
        for name in names
    ]


def initial_filter_state(ctx: "AppConfig") -> FilterState:
    """
    Session start: configured (or first registered) view, first two Pokémon
    on the radar, first generation on the slider, no search or filters.
    """
    view_ids = ctx.registry.ids() if ctx.registry else []
    default_view = getattr(ctx.global_config, "default_view", None)
    if default_view not in view_ids:
        default_view = view_ids[0] if view_ids else None

    names = ctx.dataset.names
    generations = ctx.dataset.generations

    return FilterState(
        view_id=default_view,
        generation=generations[0] if generations else None,
        pokemon=names[0] if names else None,
        compare_pokemon=names[1] if len(names) > 1 else None,
    )
