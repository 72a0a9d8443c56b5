from __future__ import annotations

from poke_browser.core.dataset import Dataset
from poke_browser.core.record import STAT_NAMES, Record


def _make_dataset():
    return Dataset(
        name="Tiny",
        records=[
            Record(name="Pichu", type1="Electric", generation=2, total=205, stats={"HP": 20}),
            Record(name="Bulbasaur", type1="Grass", type2="Poison", generation=1, total=318),
            Record(name="Charmander", type1="Fire", generation=1, total=309),
        ],
    )


def test_dataset_lookup_and_orderings():
    ds = _make_dataset()

    assert len(ds) == 3
    assert ds.names == ["Pichu", "Bulbasaur", "Charmander"]
    assert ds.types == ["Electric", "Fire", "Grass", "Poison"]
    assert ds.generations == [1, 2]
    assert ds.find("Bulbasaur").type2 == "Poison"
    assert ds.find("Missingno") is None
    assert ds.find(None) is None
    assert [r.name for r in ds.for_generation(1)] == ["Bulbasaur", "Charmander"]


def test_dataset_to_frame():
    df = _make_dataset().to_frame()

    assert list(df.columns) == ["name", "type1", "type2", *STAT_NAMES, "total", "generation", "legendary"]
    assert list(df["name"]) == ["Pichu", "Bulbasaur", "Charmander"]
    assert df.loc[0, "HP"] == 20
    assert df.loc[0, "Speed"] == 0


def test_empty_dataset():
    ds = Dataset(name="Empty", records=[])

    assert ds.types == []
    assert ds.generations == []
    assert ds.to_frame().empty
