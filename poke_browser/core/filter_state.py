from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from poke_browser.core.interaction_state import InteractionState


@dataclass
class FilterProfile:
    """
    Represents the widget dependencies for different views.

    Fields:

    :param generation: the generation slider
    :param pokemon: the first Pokémon dropdown
    :param compare_pokemon: the second Pokémon dropdown (radar comparison)
    :param type_filters: the type-1 / type-2 checkbox filters
    :param search: the name search box
    :param type_legend: the stacked-bar type drill-down
    """
    generation: bool = False
    pokemon: bool = False
    compare_pokemon: bool = False
    type_filters: bool = False
    search: bool = False
    type_legend: bool = False


@dataclass
class FilterState:
    """
    Represents the current user selection for one chart session.

    Fields:

    - view_id: which view is being rendered
    - selected_type: stacked-bar drill-down type, None shows every type
    - generation: generation picked on the histogram slider
    - pokemon / compare_pokemon: radar chart picks, by name
    - interaction: search / highlight / type-filter state
    """

    view_id: str
    selected_type: Optional[str] = None
    generation: Optional[int] = None
    pokemon: Optional[str] = None
    compare_pokemon: Optional[str] = None
    interaction: InteractionState = field(default_factory=InteractionState)

    def toggle_selected_type(self, type_name: Optional[str]) -> None:
        """Legend click: pick a type, or go back to all types if it is already picked."""
        self.selected_type = None if self.selected_type == type_name else type_name

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["interaction"] = self.interaction.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        generation = data.get("generation")
        return cls(
            view_id=data.get("view_id"),
            selected_type=data.get("selected_type"),
            generation=int(generation) if generation is not None else None,
            pokemon=data.get("pokemon"),
            compare_pokemon=data.get("compare_pokemon"),
            interaction=InteractionState.from_dict(data.get("interaction")),
        )
