from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from poke_browser.core.aggregation import (
    StackSeries,
    build_stack_series,
    count_by_generation_and_type,
)
from poke_browser.core.base_view import BaseView
from poke_browser.core.filter_state import FilterProfile, FilterState
from poke_browser.core.palette import color_for


class TypeDistributionView(BaseView):
    """
    Stacked bar chart: primary-type counts per generation.

    Clicking a segment (or picking a type in the sidebar) drills down to that
    single type; picking it again goes back to every type.
    """

    id = "type_distribution"
    label = "Type distribution by generation"
    filter_profile = FilterProfile(type_legend=True)

    def compute_data(self, state: FilterState) -> Optional[StackSeries]:
        records = self.dataset.records
        if not records:
            return None

        counts = count_by_generation_and_type(records)

        selected = state.selected_type
        if selected is not None and selected in counts.types:
            type_order = [selected]
        else:
            type_order = counts.types

        return build_stack_series(counts, type_order, counts.generations)

    def render_figure(self, data: Optional[StackSeries], state: FilterState) -> go.Figure:
        if data is None or not data.generations:
            return self.empty_figure("No Pokémon loaded")

        x = [f"Gen {gen}" for gen in data.generations]

        fig = go.Figure()
        # Segments carry their own baselines, so bars are overlaid, not re-stacked
        for type_name in data.keys:
            baselines = [data.segments[gen][type_name][0] for gen in data.generations]
            heights = [data.rows[gen][type_name] for gen in data.generations]
            fig.add_bar(
                x=x,
                y=heights,
                base=baselines,
                name=type_name,
                marker_color=color_for(type_name),
                customdata=[type_name] * len(x),
                hovertemplate=f"{type_name}<br>%{{x}}: %{{y}}<extra></extra>",
            )

        fig.update_layout(
            barmode="overlay",
            height=600,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title="Generation",
            yaxis_title="Count",
            yaxis_range=[0, max(data.max_top(), 1)],
            legend_title="Type",
            title=(
                f"{state.selected_type} Pokémon per generation"
                if len(data.keys) == 1 and state.selected_type
                else "Pokémon type distribution per generation"
            ),
        )
        return fig
