from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from poke_browser.core.dataset import Dataset
from poke_browser.core.filter_state import FilterState
from poke_browser.ui.helpers import get_filter_dropdown_options
from poke_browser.ui.ids import IDs


def build_filter_panel(dataset: Dataset, state: FilterState) -> dbc.Card:
    (
        type_options,
        type2_options,
        pokemon_options,
        generation_marks,
    ) = get_filter_dropdown_options(dataset)

    generations = dataset.generations
    gen_min = generations[0] if generations else 1
    gen_max = generations[-1] if generations else 1

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(
                        id=IDs.Control.TYPE_LEGEND_CONTAINER,
                        children=[
                            html.Label("Show type", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.TYPE_LEGEND_SELECT,
                                options=type_options,
                                value=state.selected_type,
                                placeholder="All types",
                                className="mb-2",
                            ),
                            dbc.Button(
                                "Reset",
                                id=IDs.Control.BAR_RESET_BTN,
                                n_clicks=0,
                                color="secondary",
                                outline=True,
                                size="sm",
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id=IDs.Control.GENERATION_CONTAINER,
                        children=[
                            html.Label("Generation", className="form-label"),
                            dcc.Slider(
                                id=IDs.Control.GENERATION_SLIDER,
                                min=gen_min,
                                max=gen_max,
                                step=1,
                                value=state.generation if state.generation is not None else gen_min,
                                marks=generation_marks,
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id=IDs.Control.POKEMON_CONTAINER,
                        children=[
                            html.Label("Pokémon", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.POKEMON_SELECT,
                                options=pokemon_options,
                                value=state.pokemon,
                                clearable=False,
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id=IDs.Control.COMPARE_CONTAINER,
                        children=[
                            html.Label("Compare with", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.COMPARE_SELECT,
                                options=pokemon_options,
                                value=state.compare_pokemon,
                                clearable=False,
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id=IDs.Control.SEARCH_CONTAINER,
                        children=[
                            html.Label("Search Pokémon", className="form-label"),
                            dcc.Input(
                                id=IDs.Control.SEARCH_INPUT,
                                type="text",
                                value="",
                                placeholder="Start typing a name",
                                className="form-control",
                                autoComplete="off",
                            ),
                            dbc.ListGroup(
                                id=IDs.Control.SUGGESTIONS,
                                children=[],
                                className="pb-suggestions mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id=IDs.Control.TYPE_FILTER_CONTAINER,
                        children=[
                            dbc.Checkbox(
                                id=IDs.Control.TYPE1_ENABLED,
                                label="Filter by Type 1",
                                value=False,
                            ),
                            dcc.Dropdown(
                                id=IDs.Control.TYPE1_VALUE,
                                options=type_options,
                                placeholder="Type 1",
                                className="mb-2",
                            ),
                            dbc.Checkbox(
                                id=IDs.Control.TYPE2_ENABLED,
                                label="Filter by Type 2",
                                value=False,
                            ),
                            dcc.Dropdown(
                                id=IDs.Control.TYPE2_VALUE,
                                options=type2_options,
                                placeholder="Type 2",
                                className="mb-3",
                            ),
                            html.Hr(),
                        ],
                    ),
                    dbc.Button(
                        "Reset search & filters",
                        id=IDs.Control.RESET_BTN,
                        n_clicks=0,
                        color="secondary",
                        size="sm",
                    ),
                ]
            ),
        ],
        className="pb-sidebar",
    )
