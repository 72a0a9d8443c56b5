from __future__ import annotations

import pytest

from poke_browser.core.aggregation import (
    HistogramBin,
    build_radar_comparison,
    build_stack_series,
    build_total_histogram,
    count_by_generation_and_type,
    count_by_type,
    stat_extents,
    type_pair_counts,
)
from poke_browser.core.palette import TYPE_COLORS
from poke_browser.core.record import STAT_NAMES, Record


def _rec(name, type1, type2=None, generation=1, total=300, **stats):
    base = {stat: 50 for stat in STAT_NAMES}
    base.update(stats)
    return Record(
        name=name,
        type1=type1,
        type2=type2,
        stats=base,
        total=total,
        generation=generation,
    )


def _make_records():
    """
    Small mixed set:
    - gen 1: Bulbasaur (Grass/Poison), Charmander (Fire), Charizard (Fire/Flying)
    - gen 2: Chikorita (Grass), Pichu (Electric)
    """
    return [
        _rec("Bulbasaur", "Grass", "Poison", 1, 318, HP=45),
        _rec("Charmander", "Fire", None, 1, 309, HP=39),
        _rec("Charizard", "Fire", "Flying", 1, 534, HP=78),
        _rec("Chikorita", "Grass", None, 2, 318, HP=45),
        _rec("Pichu", "Electric", None, 2, 205, HP=20),
    ]


# -----------------------------------------------------------------------------
# count_by_generation_and_type
# -----------------------------------------------------------------------------
def test_count_by_generation_and_type_scenario():
    records = [
        _rec("Bulbasaur", "Grass", "Poison", 1, 318),
        _rec("Charmander", "Fire", None, 1, 309),
    ]

    counts = count_by_generation_and_type(records)

    assert counts.counts == {1: {"Grass": 1, "Fire": 1}}
    assert counts.types == ["Fire", "Grass", "Poison"]
    assert counts.generations == [1]


def test_count_by_generation_counts_primary_type_only():
    records = _make_records()
    counts = count_by_generation_and_type(records)

    assert counts.count(1, "Fire") == 2
    assert counts.count(1, "Flying") == 0
    assert counts.count(1, "Poison") == 0
    assert counts.generations == [1, 2]

    for gen in counts.generations:
        n_in_gen = sum(1 for r in records if r.generation == gen)
        assert counts.generation_total(gen) == n_in_gen


def test_count_by_generation_type_axis_is_sorted_and_excludes_none():
    records = [
        _rec("B", "Water", "None", 3),
        _rec("A", "Bug", None, 1),
        _rec("C", "Normal", "Flying", 2),
    ]

    counts = count_by_generation_and_type(records)

    assert counts.types == ["Bug", "Flying", "Normal", "Water"]
    assert counts.generations == [1, 2, 3]


def test_count_by_generation_and_type_empty():
    counts = count_by_generation_and_type([])
    assert counts.counts == {}
    assert counts.types == []
    assert counts.generations == []


# -----------------------------------------------------------------------------
# build_stack_series
# -----------------------------------------------------------------------------
def test_build_stack_series_scenario():
    records = [
        _rec("Bulbasaur", "Grass", "Poison", 1, 318),
        _rec("Charmander", "Fire", None, 1, 309),
    ]
    counts = count_by_generation_and_type(records)

    series = build_stack_series(counts, ["Fire", "Grass"], [1])

    assert series.segments[1]["Fire"] == (0, 1)
    assert series.segments[1]["Grass"] == (1, 2)
    assert series.total(1) == 2


def test_build_stack_series_offsets_monotonic_and_end_at_generation_total():
    records = _make_records()
    counts = count_by_generation_and_type(records)

    series = build_stack_series(counts)

    assert series.keys == counts.types
    for gen in series.generations:
        tops = [series.segments[gen][t][1] for t in series.keys]
        baselines = [series.segments[gen][t][0] for t in series.keys]
        assert tops == sorted(tops)
        assert baselines[0] == 0
        # each baseline is the previous segment's top
        assert baselines[1:] == tops[:-1]
        assert tops[-1] == counts.generation_total(gen)

    assert series.max_top() == 3


def test_build_stack_series_single_type_drill_down():
    counts = count_by_generation_and_type(_make_records())

    series = build_stack_series(counts, ["Fire"], [1, 2])

    assert series.segments[1]["Fire"] == (0, 2)
    assert series.segments[2]["Fire"] == (0, 0)


def test_build_stack_series_unknown_generation_defaults_to_zero():
    counts = count_by_generation_and_type(_make_records())

    series = build_stack_series(counts, ["Fire", "Grass"], [7])

    assert series.rows[7] == {"Fire": 0, "Grass": 0}
    assert series.total(7) == 0


def test_build_stack_series_empty():
    series = build_stack_series(count_by_generation_and_type([]))
    assert series.generations == []
    assert series.max_top() == 0


# -----------------------------------------------------------------------------
# build_total_histogram
# -----------------------------------------------------------------------------
def test_build_total_histogram_bins_generation_totals():
    bins = build_total_histogram(_make_records(), generation=1)

    # gen 1 totals: 318, 309, 534 -> edges 200..700
    assert [b.bin_start for b in bins] == [200, 300, 400, 500, 600]
    assert [b.bin_end for b in bins] == [300, 400, 500, 600, 700]
    assert [b.count for b in bins] == [0, 2, 0, 1, 0]


@pytest.mark.parametrize(
    "max_total, last_edge",
    [(534, 700), (500, 600), (599, 700), (600, 700), (200, 300), (120, 300)],
)
def test_build_total_histogram_last_edge_covers_max_plus_one_bin(max_total, last_edge):
    records = [_rec("High", "Bug", generation=1, total=max_total)]

    bins = build_total_histogram(records, 1)

    assert bins[0].bin_start == 200
    assert bins[-1].bin_end == last_edge
    assert sum(b.count for b in bins) == 1


def test_build_total_histogram_counts_sum_to_generation_size():
    records = _make_records()
    for gen in (1, 2):
        bins = build_total_histogram(records, gen)
        assert sum(b.count for b in bins) == sum(1 for r in records if r.generation == gen)


def test_build_total_histogram_clamps_below_floor_into_first_bin():
    records = [_rec("Tiny", "Bug", generation=1, total=150), _rec("Mid", "Bug", generation=1, total=250)]

    bins = build_total_histogram(records, 1)

    assert bins == [HistogramBin(200, 300, 2), HistogramBin(300, 400, 0)]


def test_build_total_histogram_boundary_goes_to_upper_bin():
    records = [_rec("Edge", "Bug", generation=1, total=300)]

    bins = build_total_histogram(records, 1)

    assert [(b.bin_start, b.count) for b in bins] == [(200, 0), (300, 1)]


def test_build_total_histogram_unknown_generation_is_empty():
    assert build_total_histogram(_make_records(), generation=9) == []
    assert build_total_histogram([], generation=1) == []


def test_build_total_histogram_custom_width_and_floor():
    bins = build_total_histogram(_make_records(), 2, bin_width=50, floor=200)

    # gen 2 totals: 318, 205
    assert bins[0] == HistogramBin(200, 250, 1)
    assert bins[2] == HistogramBin(300, 350, 1)
    assert bins[-1] == HistogramBin(350, 400, 0)
    assert len(bins) == 4


def test_build_total_histogram_rejects_bad_width():
    with pytest.raises(ValueError):
        build_total_histogram(_make_records(), 1, bin_width=0)


# -----------------------------------------------------------------------------
# stat_extents
# -----------------------------------------------------------------------------
def test_stat_extents_empty_is_zero():
    assert stat_extents([]) == {stat: (0, 0) for stat in STAT_NAMES}


def test_stat_extents_singleton():
    rec = _rec("Solo", "Bug", HP=12, Speed=99)

    extents = stat_extents([rec])

    assert extents["HP"] == (12, 12)
    assert extents["Speed"] == (99, 99)


def test_stat_extents_min_max():
    extents = stat_extents(_make_records(), ["HP"])
    assert extents == {"HP": (20, 78)}


# -----------------------------------------------------------------------------
# Supplementary aggregations
# -----------------------------------------------------------------------------
def test_count_by_type_sorted():
    assert count_by_type(_make_records()) == {"Electric": 1, "Fire": 2, "Grass": 2}


def test_type_pair_counts_cross_tab():
    table = type_pair_counts(_make_records())

    assert list(table.index) == ["Electric", "Fire", "Grass"]
    assert list(table.columns) == ["Flying", "None", "Poison"]
    assert table.loc["Fire", "None"] == 1
    assert table.loc["Fire", "Flying"] == 1
    assert table.loc["Grass", "Poison"] == 1
    assert int(table.values.sum()) == 5


def test_type_pair_counts_empty():
    assert type_pair_counts([]).empty


def test_build_radar_comparison_single():
    rec = _rec("Charmander", "Fire", HP=39, Speed=65)

    radar = build_radar_comparison(rec)

    assert radar.stat_names == list(STAT_NAMES)
    assert len(radar.series) == 1
    assert radar.series[0].color == TYPE_COLORS["Fire"]
    assert radar.radial_max == 65 + 5


def test_build_radar_comparison_shared_scale_and_distinct_types():
    first = _rec("Charmander", "Fire", Speed=65)
    second = _rec("Squirtle", "Water", Defense=120)

    radar = build_radar_comparison(first, second)

    assert [s.name for s in radar.series] == ["Charmander", "Squirtle"]
    assert radar.series[1].color == TYPE_COLORS["Water"]
    assert radar.radial_max == 125


def test_build_radar_comparison_same_type_shifts_hue():
    first = _rec("Charmander", "Fire")
    second = _rec("Charizard", "Fire")

    radar = build_radar_comparison(first, second)

    assert radar.series[0].color == TYPE_COLORS["Fire"]
    assert radar.series[1].color.startswith("rgb(")
    assert radar.series[1].color != radar.series[0].color
