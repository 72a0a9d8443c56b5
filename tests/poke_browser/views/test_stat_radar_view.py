from poke_browser.core.dataset import Dataset
from poke_browser.core.filter_state import FilterState
from poke_browser.core.palette import TYPE_COLORS
from poke_browser.core.record import STAT_NAMES, Record
from poke_browser.views.stat_radar_view import StatComparisonView, StatRadarView


def _stats(**overrides):
    stats = {stat: 50 for stat in STAT_NAMES}
    stats.update(overrides)
    return stats


def _make_dataset():
    records = [
        Record(name="Charmander", type1="Fire", stats=_stats(Speed=65)),
        Record(name="Squirtle", type1="Water", stats=_stats(Defense=65)),
        Record(name="Vulpix", type1="Fire", stats=_stats(Speed=65, SpecialDefense=65)),
        Record(name="Snorlax", type1="Normal", stats=_stats(HP=160)),
    ]
    return Dataset(name="TestDex", records=records)


def test_stat_radar_single_pokemon():
    view = StatRadarView(_make_dataset())
    state = FilterState(view_id=view.id, pokemon="Snorlax")

    fig = view.render_figure(view.compute_data(state), state)

    assert len(fig.data) == 1
    trace = fig.data[0]
    assert trace.name == "Snorlax"
    # closed polygon: first point repeated
    assert len(trace.r) == len(STAT_NAMES) + 1
    assert trace.r[0] == trace.r[-1] == 160
    assert list(fig.layout.polar.radialaxis.range) == [0, 165]


def test_stat_radar_defaults_to_first_record():
    view = StatRadarView(_make_dataset())
    state = FilterState(view_id=view.id, pokemon="Missingno")

    data = view.compute_data(state)

    assert [s.name for s in data.series] == ["Charmander"]


def test_stat_radar_ignores_compare_pick():
    view = StatRadarView(_make_dataset())
    state = FilterState(view_id=view.id, pokemon="Charmander", compare_pokemon="Squirtle")

    assert len(view.compute_data(state).series) == 1


def test_stat_comparison_overlays_two_pokemon():
    view = StatComparisonView(_make_dataset())
    state = FilterState(view_id=view.id, pokemon="Charmander", compare_pokemon="Squirtle")

    data = view.compute_data(state)
    fig = view.render_figure(data, state)

    assert [trace.name for trace in fig.data] == ["Charmander", "Squirtle"]
    assert fig.data[0].line.color == TYPE_COLORS["Fire"]
    assert fig.data[1].line.color == TYPE_COLORS["Water"]
    assert fig.layout.showlegend is True
    assert data.radial_max == 70


def test_stat_comparison_same_type_gets_distinct_colour():
    view = StatComparisonView(_make_dataset())
    state = FilterState(view_id=view.id, pokemon="Charmander", compare_pokemon="Vulpix")

    fig = view.render_figure(view.compute_data(state), state)

    assert fig.data[0].line.color != fig.data[1].line.color


def test_stat_comparison_defaults_second_pick():
    view = StatComparisonView(_make_dataset())
    state = FilterState(view_id=view.id)

    data = view.compute_data(state)

    assert [s.name for s in data.series] == ["Charmander", "Squirtle"]


def test_stat_radar_empty_dataset():
    view = StatRadarView(Dataset(name="Empty", records=[]))
    state = FilterState(view_id=view.id)

    data = view.compute_data(state)
    fig = view.render_figure(data, state)

    assert data is None
    assert len(fig.data) == 0
