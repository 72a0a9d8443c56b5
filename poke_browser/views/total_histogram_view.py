from __future__ import annotations

from typing import List

import plotly.graph_objects as go

from poke_browser.core.aggregation import (
    DEFAULT_BIN_WIDTH,
    DEFAULT_HISTOGRAM_FLOOR,
    HistogramBin,
    build_total_histogram,
)
from poke_browser.core.base_view import BaseView
from poke_browser.core.filter_state import FilterProfile, FilterState


class TotalHistogramView(BaseView):
    """
    Histogram of base-stat totals for the generation picked on the slider.
    """

    id = "total_histogram"
    label = "Total stats histogram"
    filter_profile = FilterProfile(generation=True)

    def selected_generation(self, state: FilterState) -> int | None:
        if state.generation is not None:
            return state.generation
        generations = self.dataset.generations
        return generations[0] if generations else None

    def compute_data(self, state: FilterState) -> List[HistogramBin]:
        generation = self.selected_generation(state)
        if generation is None:
            return []
        return build_total_histogram(
            self.dataset.records,
            generation,
            bin_width=self.setting("bin_width", DEFAULT_BIN_WIDTH),
            floor=self.setting("histogram_floor", DEFAULT_HISTOGRAM_FLOOR),
        )

    def render_figure(self, data: List[HistogramBin], state: FilterState) -> go.Figure:
        generation = self.selected_generation(state)
        if not data:
            return self.empty_figure(f"No Pokémon in generation {generation}")

        fig = go.Figure(
            go.Bar(
                x=[f"{b.bin_start}–{b.bin_end - 1}" for b in data],
                y=[b.count for b in data],
                marker_color="#6390F0",
                hovertemplate="Total %{x}: %{y}<extra></extra>",
            )
        )
        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title="Total base stats",
            yaxis_title="Count",
            title=f"Total stats, generation {generation}",
            bargap=0.05,
            showlegend=False,
        )
        return fig
