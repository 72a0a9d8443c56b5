from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from poke_browser.core.aggregation import RadarComparison, build_radar_comparison
from poke_browser.core.base_view import BaseView
from poke_browser.core.filter_state import FilterProfile, FilterState
from poke_browser.core.record import STAT_LABELS, Record


class StatRadarView(BaseView):
    """
    Radar chart of one Pokémon's six base stats.

    The radial axis is scaled to the highest stat shown, so small Pokémon
    still fill the chart.
    """

    id = "stat_radar"
    label = "Stat radar"
    filter_profile = FilterProfile(pokemon=True)
    compare = False

    def _pick(self, name: Optional[str], fallback_index: int) -> Optional[Record]:
        record = self.dataset.find(name)
        if record is not None:
            return record
        records = self.dataset.records
        if len(records) > fallback_index:
            return records[fallback_index]
        return None

    def compute_data(self, state: FilterState) -> Optional[RadarComparison]:
        first = self._pick(state.pokemon, 0)
        if first is None:
            return None

        second = self._pick(state.compare_pokemon, 1) if self.compare else None
        return build_radar_comparison(first, second)

    def render_figure(self, data: Optional[RadarComparison], state: FilterState) -> go.Figure:
        if data is None:
            return self.empty_figure("No Pokémon selected")

        theta = [STAT_LABELS.get(stat, stat) for stat in data.stat_names]

        fig = go.Figure()
        for series in data.series:
            # Repeat the first point so the polygon closes
            fig.add_trace(
                go.Scatterpolar(
                    r=series.values + series.values[:1],
                    theta=theta + theta[:1],
                    name=series.name,
                    fill="toself",
                    opacity=0.5,
                    line=dict(color=series.color, width=2),
                    fillcolor=series.color,
                )
            )

        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, t=60, b=40),
            polar=dict(radialaxis=dict(visible=True, range=[0, data.radial_max])),
            title=" vs ".join(s.name for s in data.series),
            showlegend=len(data.series) > 1,
        )
        return fig


class StatComparisonView(StatRadarView):
    """
    Two Pokémon overlaid on one radar. Same-type pairs get a hue-shifted
    second colour.
    """

    id = "stat_comparison"
    label = "Stat comparison"
    filter_profile = FilterProfile(pokemon=True, compare_pokemon=True)
    compare = True
