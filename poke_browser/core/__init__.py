"""
Core domain layer: records, normalizer, aggregation engine, interaction state,
view base class and the view registry
"""

from .record import Record, STAT_NAMES
from .dataset import Dataset
from .interaction_state import InteractionState, TypeFilter, Visibility
from .filter_state import FilterState, FilterProfile
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = [
    "Record",
    "STAT_NAMES",
    "Dataset",
    "InteractionState",
    "TypeFilter",
    "Visibility",
    "FilterState",
    "FilterProfile",
    "BaseView",
    "ViewRegistry",
]
