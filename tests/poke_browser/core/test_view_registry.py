from __future__ import annotations

import pytest

from poke_browser.config.model import GlobalConfig
from poke_browser.core.dataset import Dataset
from poke_browser.core.record import Record
from poke_browser.core.view_registry import ViewRegistry
from poke_browser.views import TotalHistogramView, TypeDistributionView


def _make_dataset():
    return Dataset(name="Tiny", records=[Record(name="Pichu", type1="Electric", total=205)])


def test_register_and_create():
    registry = ViewRegistry(settings=GlobalConfig(bin_width=50))
    registry.register(TypeDistributionView)
    registry.register(TotalHistogramView)

    view = registry.create("total_histogram", _make_dataset())

    assert isinstance(view, TotalHistogramView)
    assert view.setting("bin_width", 100) == 50
    assert [cls.id for cls in registry.all_classes()] == ["type_distribution", "total_histogram"]
    assert "type_distribution" in registry
    assert "missing" not in registry


def test_register_duplicate_id_raises():
    registry = ViewRegistry()
    registry.register(TypeDistributionView)

    with pytest.raises(ValueError):
        registry.register(TypeDistributionView)


def test_register_non_view_raises():
    registry = ViewRegistry()

    with pytest.raises(TypeError):
        registry.register(object)


def test_create_unknown_view_raises():
    with pytest.raises(KeyError):
        ViewRegistry().create("nope", _make_dataset())


def test_view_without_settings_uses_defaults():
    view = TotalHistogramView(_make_dataset())
    assert view.setting("bin_width", 100) == 100


def test_ids_and_selector_options_follow_registration_order():
    registry = ViewRegistry()
    registry.register(TotalHistogramView)
    registry.register(TypeDistributionView)

    assert registry.ids() == ["total_histogram", "type_distribution"]
    assert registry.options() == [
        {"label": TotalHistogramView.label, "value": "total_histogram"},
        {"label": TypeDistributionView.label, "value": "type_distribution"},
    ]
