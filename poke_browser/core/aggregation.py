from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from poke_browser.core.palette import color_for, shift_hue
from poke_browser.core.record import NO_TYPE, STAT_NAMES, Record


DEFAULT_BIN_WIDTH = 100
DEFAULT_HISTOGRAM_FLOOR = 200
RADAR_PADDING = 5
SAME_TYPE_HUE_SHIFT = 40


# -----------------------------------------------------------------------------
# Result shapes
# -----------------------------------------------------------------------------
@dataclass
class TypeGenerationCounts:
    """
    Primary-type counts per generation.

    - counts: generation -> type1 -> count
    - types: distinct type1/type2 values, sorted, without absent/"None"
    - generations: distinct generations, sorted numerically
    """
    counts: Dict[int, Dict[str, int]] = field(default_factory=dict)
    types: List[str] = field(default_factory=list)
    generations: List[int] = field(default_factory=list)

    def count(self, generation: int, type_name: str) -> int:
        return self.counts.get(generation, {}).get(type_name, 0)

    def generation_total(self, generation: int) -> int:
        return sum(self.counts.get(generation, {}).values())


@dataclass
class StackSeries:
    """
    Stacked-bar layout.

    segments[generation][type] is (baseline, top), where baseline is the sum of
    the counts of every type before it in ``keys``.
    """
    keys: List[str]
    generations: List[int]
    rows: Dict[int, Dict[str, int]]
    segments: Dict[int, Dict[str, Tuple[int, int]]]

    def total(self, generation: int) -> int:
        if not self.keys or generation not in self.segments:
            return 0
        return self.segments[generation][self.keys[-1]][1]

    def max_top(self) -> int:
        return max((self.total(gen) for gen in self.generations), default=0)


@dataclass(frozen=True)
class HistogramBin:
    bin_start: int
    bin_end: int  # exclusive
    count: int


@dataclass
class RadarSeries:
    name: str
    values: List[int]
    color: str


@dataclass
class RadarComparison:
    stat_names: List[str]
    series: List[RadarSeries]
    radial_max: int


# -----------------------------------------------------------------------------
# Aggregations
# -----------------------------------------------------------------------------
def distinct_types(records: Sequence[Record]) -> List[str]:
    types = set()
    for rec in records:
        for type_name in (rec.type1, rec.type2):
            if type_name and type_name != NO_TYPE:
                types.add(type_name)
    return sorted(types)


def count_by_generation_and_type(records: Sequence[Record]) -> TypeGenerationCounts:
    """
    Count records per (generation, type1).

    Only the primary type is counted, so the per-generation sum equals the
    number of records in that generation. The distinct type list still covers
    both type slots so every chart shares the same legend.
    """
    counts: Dict[int, Dict[str, int]] = {}
    for rec in records:
        by_type = counts.setdefault(rec.generation, {})
        by_type[rec.type1] = by_type.get(rec.type1, 0) + 1

    return TypeGenerationCounts(
        counts=counts,
        types=distinct_types(records),
        generations=sorted(counts),
    )


def build_stack_series(
    counts: TypeGenerationCounts,
    type_order: Optional[Sequence[str]] = None,
    generation_order: Optional[Sequence[int]] = None,
) -> StackSeries:
    """
    Lay out cumulative (baseline, top) offsets per generation in a fixed type
    order. A single-type order gives (0, count) segments.
    """
    keys = list(counts.types if type_order is None else type_order)
    generations = list(counts.generations if generation_order is None else generation_order)

    rows: Dict[int, Dict[str, int]] = {}
    segments: Dict[int, Dict[str, Tuple[int, int]]] = {}

    for gen in generations:
        row = {type_name: counts.count(gen, type_name) for type_name in keys}
        offset = 0
        stacked: Dict[str, Tuple[int, int]] = {}
        for type_name in keys:
            top = offset + row[type_name]
            stacked[type_name] = (offset, top)
            offset = top
        rows[gen] = row
        segments[gen] = stacked

    return StackSeries(keys=keys, generations=generations, rows=rows, segments=segments)


def build_total_histogram(
    records: Sequence[Record],
    generation: int,
    bin_width: int = DEFAULT_BIN_WIDTH,
    floor: int = DEFAULT_HISTOGRAM_FLOOR,
) -> List[HistogramBin]:
    """
    Bin one generation's totals into [start, start + bin_width) buckets.

    Bins start at ``floor``; the last edge is the smallest multiple of
    ``bin_width`` at or above the highest total plus ``bin_width``. Totals
    below the floor are clamped into the first bin.
    An unknown generation yields an empty list.
    """
    if bin_width <= 0:
        raise ValueError(f"bin_width must be positive, got {bin_width}")

    totals = np.array([rec.total for rec in records if rec.generation == generation], dtype=int)
    if totals.size == 0:
        return []

    max_total = int(totals.max())
    last_edge = -(-(max_total + bin_width) // bin_width) * bin_width
    last_edge = max(last_edge, floor + bin_width)
    n_bins = -(-(last_edge - floor) // bin_width)

    idx = np.clip((totals - floor) // bin_width, 0, n_bins - 1)
    bin_counts = np.bincount(idx, minlength=n_bins)

    return [
        HistogramBin(
            bin_start=floor + i * bin_width,
            bin_end=floor + (i + 1) * bin_width,
            count=int(bin_counts[i]),
        )
        for i in range(n_bins)
    ]


def stat_extents(
    records: Sequence[Record],
    stat_names: Sequence[str] = STAT_NAMES,
) -> Dict[str, Tuple[int, int]]:
    """
    (min, max) per stat; (0, 0) when there are no records.
    """
    extents: Dict[str, Tuple[int, int]] = {}
    for stat in stat_names:
        values = [rec.stat(stat) for rec in records]
        extents[stat] = (min(values), max(values)) if values else (0, 0)
    return extents


def count_by_type(records: Sequence[Record]) -> Dict[str, int]:
    """Overall primary-type tally, keys sorted."""
    tally: Dict[str, int] = {}
    for rec in records:
        tally[rec.type1] = tally.get(rec.type1, 0) + 1
    return {type_name: tally[type_name] for type_name in sorted(tally)}


def type_pair_counts(records: Sequence[Record]) -> pd.DataFrame:
    """
    type1 x type2 cross-tab. Pokémon without a secondary type land in the
    "None" column. Rows and columns are sorted.
    """
    if not records:
        return pd.DataFrame()

    df = pd.DataFrame(
        {
            "type1": [rec.type1 for rec in records],
            "type2": [rec.type2 or NO_TYPE for rec in records],
        }
    )
    table = pd.crosstab(df["type1"], df["type2"])
    return table.sort_index(axis=0).sort_index(axis=1)


def build_radar_comparison(
    first: Record,
    second: Optional[Record] = None,
    stat_names: Sequence[str] = STAT_NAMES,
    padding: int = RADAR_PADDING,
) -> RadarComparison:
    """
    Stat vectors for one or two Pokémon on a shared radial scale.

    The scale tops out at the highest stat shown plus ``padding``. When both
    Pokémon share a primary type the second colour is hue-shifted so the two
    areas stay distinguishable.
    """
    first_color = color_for(first.type1, default="#1f77b4")
    series = [
        RadarSeries(
            name=first.name,
            values=[first.stat(s) for s in stat_names],
            color=first_color,
        )
    ]

    if second is not None:
        if second.type1 == first.type1:
            second_color = shift_hue(first_color, SAME_TYPE_HUE_SHIFT)
        else:
            second_color = color_for(second.type1, default="#ff7f0e")
        series.append(
            RadarSeries(
                name=second.name,
                values=[second.stat(s) for s in stat_names],
                color=second_color,
            )
        )

    radial_max = max((max(s.values, default=0) for s in series), default=0) + padding
    return RadarComparison(stat_names=list(stat_names), series=series, radial_max=radial_max)
