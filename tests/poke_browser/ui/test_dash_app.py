import json

from poke_browser.core.dataset import Dataset
from poke_browser.core.record import Record
from poke_browser.ui.dash_app import build_view_registry, create_dash_app

HEADER = "Number,Name,Type_1,Type_2,Total,HP,Attack,Defense,Sp. Atk,Sp. Def,Speed,Generation,Legendary"


def _make_project(tmp_path, default_view=None):
    config_root = tmp_path / "config"
    config_root.mkdir()
    raw = {"ui_title": "Test Dex", "data_file": "data/pokemon.csv"}
    if default_view:
        raw["default_view"] = default_view
    (config_root / "global.json").write_text(json.dumps(raw))

    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "pokemon.csv").write_text(
        "\n".join(
            [
                HEADER,
                "1,Bulbasaur,Grass,Poison,318,45,49,49,65,65,45,1,False",
                "4,Charmander,Fire,,309,39,52,43,60,50,65,1,False",
            ]
        )
        + "\n"
    )
    return config_root


def test_build_view_registry_registers_every_view():
    registry = build_view_registry()

    assert [cls.id for cls in registry.all_classes()] == [
        "type_distribution",
        "stat_comparison",
        "parallel_coordinates",
        "total_histogram",
        "stat_radar",
        "type_count",
    ]


def test_create_dash_app_from_config(tmp_path, monkeypatch):
    monkeypatch.delenv("POKE_BROWSER_DATA_ROOT", raising=False)
    config_root = _make_project(tmp_path)

    app = create_dash_app(config_root)

    assert app.title == "Test Dex"
    assert app.layout is not None
    assert len(app.callback_map) >= 3


def test_create_dash_app_with_injected_dataset(tmp_path):
    config_root = _make_project(tmp_path, default_view="stat_radar")
    dataset = Dataset(name="Injected", records=[Record(name="Mew", type1="Psychic")])

    app = create_dash_app(config_root, dataset=dataset)

    assert app.layout is not None
