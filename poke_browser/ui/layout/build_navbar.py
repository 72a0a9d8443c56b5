from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from poke_browser.core.dataset import Dataset


def build_navbar(dataset: Dataset, global_config) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "Pokémon Stats Browser")
    subtitle = getattr(global_config, "subtitle", "Interactive Pokédex Explorer")

    generations = dataset.generations
    if generations:
        gen_text = f"Gen {generations[0]}–{generations[-1]}"
    else:
        gen_text = "no generations"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id="navbar-subtitle"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Dataset", className="navbar-dataset-title"),
                        html.Div(
                            f"{dataset.name} · {len(dataset)} Pokémon · {gen_text}",
                            id="navbar-dataset-meta",
                            className="navbar-dataset-meta",
                        ),
                    ],
                    className="ms-auto text-end",
                ),
            ],
        ),
        color="light",
        className="pb-navbar mb-2",
    )
