from __future__ import annotations

__all__ = ["IDs", "suggestion_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Core selectors
        VIEW_SELECT = "view-select"
        GENERATION_SLIDER = "generation-slider"
        POKEMON_SELECT = "pokemon-select"
        COMPARE_SELECT = "pokemon-select-2"
        TYPE_LEGEND_SELECT = "type-legend-select"
        BAR_RESET_BTN = "reset-bar-chart"

        # Search + type filters
        SEARCH_INPUT = "pokemon-search"
        SUGGESTIONS = "pokemon-suggestions"
        TYPE1_ENABLED = "type1-filter-enabled"
        TYPE1_VALUE = "type1-filter-value"
        TYPE2_ENABLED = "type2-filter-enabled"
        TYPE2_VALUE = "type2-filter-value"
        RESET_BTN = "reset-filters-btn"

        # Sidebar containers, shown per view FilterProfile
        GENERATION_CONTAINER = "generation-container"
        POKEMON_CONTAINER = "pokemon-container"
        COMPARE_CONTAINER = "compare-container"
        TYPE_LEGEND_CONTAINER = "type-legend-container"
        SEARCH_CONTAINER = "search-container"
        TYPE_FILTER_CONTAINER = "type-filter-container"

        # Graph
        MAIN_GRAPH = "main-graph"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings
        SUGGESTION = "pokemon-suggestion"


def suggestion_id(name: str) -> dict:
    return {"type": IDs.Pattern.SUGGESTION, "index": name}
