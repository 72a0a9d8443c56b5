from __future__ import annotations

from typing import Dict, List, Tuple

import pandas as pd
import plotly.graph_objects as go

from poke_browser.core.aggregation import stat_extents
from poke_browser.core.base_view import BaseView
from poke_browser.core.filter_state import FilterProfile, FilterState
from poke_browser.core.palette import color_for
from poke_browser.core.record import STAT_LABELS, STAT_NAMES

BASE_WIDTH = 1
BASE_OPACITY = 0.5
EMPHASIS_WIDTH = 5


def _scale(value: float, lo: float, hi: float) -> float:
    if hi <= lo:
        return 0.5
    return (value - lo) / (hi - lo)


class ParallelCoordinatesView(BaseView):
    """
    One polyline per Pokémon across the six stats, coloured by primary type.

    Visibility and emphasis come from the session's InteractionState; axis
    ranges always come from the full dataset so they stay put while filtering.
    """

    id = "parallel_coordinates"
    label = "Parallel coordinates"
    filter_profile = FilterProfile(search=True, type_filters=True)

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        records = self.dataset.records
        if not records:
            return pd.DataFrame()

        extents = stat_extents(records, STAT_NAMES)
        decisions = state.interaction.decisions(records)

        rows = []
        for rec, decision in zip(records, decisions):
            row = {
                "name": rec.name,
                "type1": rec.type1,
                "type2": rec.type2,
                "visible": decision.visible,
                "emphasized": decision.emphasized,
            }
            for stat in STAT_NAMES:
                lo, hi = extents[stat]
                row[stat] = rec.stat(stat)
                row[f"{stat}_scaled"] = _scale(rec.stat(stat), lo, hi)
            rows.append(row)

        df = pd.DataFrame(rows)
        df.attrs["extents"] = extents
        return df

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No Pokémon loaded")

        shown = data[data["visible"]]
        if shown.empty:
            return self.empty_figure(
                "No Pokémon match",
                "No Pokémon match the current search and type filters.",
            )

        fig = go.Figure()
        x_positions = list(range(len(STAT_NAMES)))

        # One trace per (type, emphasis) group; lines are joined with None breaks
        for (type1, emphasized), group in shown.groupby(["type1", "emphasized"], sort=True):
            xs: List = []
            ys: List = []
            texts: List = []
            for _, row in group.iterrows():
                xs.extend(x_positions + [None])
                ys.extend([row[f"{stat}_scaled"] for stat in STAT_NAMES] + [None])
                hover = (
                    f"<b>{row['name']}</b><br>"
                    f"Type 1: {row['type1']}<br>"
                    f"Type 2: {row['type2'] or 'None'}"
                )
                texts.extend([f"{hover}<br>{STAT_LABELS[stat]}: {row[stat]}" for stat in STAT_NAMES] + [None])

            fig.add_trace(
                go.Scatter(
                    x=xs,
                    y=ys,
                    mode="lines",
                    name=str(type1),
                    legendgroup=str(type1),
                    showlegend=not emphasized,
                    line=dict(
                        color=color_for(type1),
                        width=EMPHASIS_WIDTH if emphasized else BASE_WIDTH,
                    ),
                    opacity=1.0 if emphasized else BASE_OPACITY,
                    text=texts,
                    hoverinfo="text",
                )
            )

        extents: Dict[str, Tuple[int, int]] = data.attrs.get("extents", {})
        for pos, stat in zip(x_positions, STAT_NAMES):
            lo, hi = extents.get(stat, (0, 0))
            fig.add_vline(x=pos, line_color="#888", line_width=1)
            fig.add_annotation(x=pos, y=1.02, text=str(hi), showarrow=False, yanchor="bottom")
            fig.add_annotation(x=pos, y=-0.02, text=str(lo), showarrow=False, yanchor="top")

        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, t=60, b=60),
            title="Pokémon stats (parallel coordinates)",
            legend_title="Type 1",
            xaxis=dict(
                tickmode="array",
                tickvals=x_positions,
                ticktext=[STAT_LABELS[stat] for stat in STAT_NAMES],
                side="bottom",
            ),
            yaxis=dict(visible=False, range=[-0.1, 1.1]),
        )
        return fig
