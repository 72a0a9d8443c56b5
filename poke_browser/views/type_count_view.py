from __future__ import annotations

from typing import Dict

import plotly.graph_objects as go

from poke_browser.core.aggregation import count_by_type
from poke_browser.core.base_view import BaseView
from poke_browser.core.filter_state import FilterState
from poke_browser.core.palette import color_for


class TypeCountView(BaseView):
    """
    Plain bar chart of how many Pokémon have each primary type.
    """

    id = "type_count"
    label = "Primary type counts"

    def compute_data(self, state: FilterState) -> Dict[str, int]:
        return count_by_type(self.dataset.records)

    def render_figure(self, data: Dict[str, int], state: FilterState) -> go.Figure:
        if not data:
            return self.empty_figure("No Pokémon loaded")

        types = list(data)
        fig = go.Figure(
            go.Bar(
                x=types,
                y=[data[t] for t in types],
                marker_color=[color_for(t) for t in types],
                hovertemplate="%{x}: %{y}<extra></extra>",
            )
        )
        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, t=60, b=100),
            xaxis_title="Type 1",
            yaxis_title="Count",
            title="Pokémon per primary type",
            showlegend=False,
        )
        return fig
