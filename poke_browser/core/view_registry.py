from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List, Optional, Type

from .dataset import Dataset
from .base_view import BaseView

if TYPE_CHECKING:
    from poke_browser.config.model import GlobalConfig


class ViewRegistry:
    """
    Chart views known to the browser, keyed by view id.

    The view selector, the sidebar visibility callback and the renderer all
    look views up here, so adding a chart means registering one class.
    Classes are stored, not instances: a fresh view is built per render with
    the shared Dataset and GlobalConfig.
    """

    def __init__(self, settings: Optional[GlobalConfig] = None):
        self._views: Dict[str, Type[BaseView]] = {}
        self.settings = settings

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Add a chart class under its ``id``.

        :raises TypeError: if view_cls is not a BaseView subclass
        :raises ValueError: if the id is already taken
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str, dataset: Dataset) -> BaseView:
        """
        Build the chart for ``view_id`` over ``dataset``.

        :raises KeyError: for an unregistered id
        """
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls(dataset, settings=self.settings)

    def all_classes(self) -> List[Type[BaseView]]:
        """Registered chart classes, in registration order."""
        return list(self._views.values())

    def ids(self) -> List[str]:
        return list(self._views)

    def options(self) -> List[dict]:
        """Dropdown options (label/value) for the view selector."""
        return [{"label": cls.label, "value": cls.id} for cls in self._views.values()]

    def __contains__(self, view_id: str) -> bool:
        return view_id in self._views
