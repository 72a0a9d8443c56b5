from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

import plotly.graph_objs as go

from .dataset import Dataset
from .filter_state import FilterState, FilterProfile

if TYPE_CHECKING:
    from poke_browser.config.model import GlobalConfig

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive the chart's view model from the current FilterState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None
    filter_profile = FilterProfile()

    def __init__(self, dataset: Dataset, settings: Optional[GlobalConfig] = None):
        self.dataset = dataset
        self.settings = settings

    @abstractmethod
    def compute_data(self, state: FilterState) -> Any:
        """
        Compute the data given the current FilterState
        :param state: the current {@link FilterState} - selections and interaction state
        :return: data: the aggregation output this view renders
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: FilterState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link FilterState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def setting(self, name: str, default: Any) -> Any:
        return getattr(self.settings, name, default) if self.settings is not None else default

    def timed_compute(self, state: FilterState) -> Any:
        start = time.perf_counter()
        data = self.compute_data(state)
        logger.info(
            "compute_data",
            extra={
                "view_id": self.id,
                "dataset": self.dataset.name,
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def empty_figure(message: str, details: Optional[str] = None) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        if details:
            fig.add_annotation(
                text=details,
                showarrow=False,
                xref="paper",
                yref="paper",
                x=0.5,
                y=0.5,
            )
        return fig
