from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from poke_browser.config.model import GlobalConfig
from poke_browser.config.loader import load_global_config
from poke_browser.config.dataset_loader import from_config
from poke_browser.core.dataset import Dataset
from poke_browser.core.view_registry import ViewRegistry
from poke_browser.ui.layout.build_layout import build_layout
from poke_browser.ui.callbacks.callbacks_state import register_state_callbacks
from poke_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from poke_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def build_view_registry(settings: Optional[GlobalConfig] = None) -> ViewRegistry:
    from poke_browser.views import (
        TypeDistributionView,
        TypeCountView,
        StatRadarView,
        StatComparisonView,
        ParallelCoordinatesView,
        TotalHistogramView,
    )

    registry = ViewRegistry(settings=settings)
    registry.register(TypeDistributionView)
    registry.register(StatComparisonView)
    registry.register(ParallelCoordinatesView)
    registry.register(TotalHistogramView)
    registry.register(StatRadarView)
    registry.register(TypeCountView)
    return registry


def create_dash_app(
    config_root: Path | str = Path("config"),
    dataset: Optional[Dataset] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load the dataset once; every session shares the same read-only records
    if dataset is None:
        dataset = from_config(global_config, config_root)
    if not dataset.records:
        logger.warning("Dataset has no records", extra={"dataset": dataset.name})

    registry = build_view_registry(global_config)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        registry=registry,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = getattr(global_config, "ui_title", "Pokémon Stats Browser")

    app.layout = build_layout(ctx)

    # Register callbacks
    register_state_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={
            "dataset": dataset.name,
            "n_records": len(dataset),
            "views": [cls.id for cls in registry.all_classes()],
        },
    )
    return app
