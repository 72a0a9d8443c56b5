from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from poke_browser.core.aggregation import DEFAULT_BIN_WIDTH, DEFAULT_HISTOGRAM_FLOOR
from poke_browser.core.interaction_state import SUGGESTION_LIMIT


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - data_file: CSV path, relative paths resolved by the dataset loader
    - bin_width / histogram_floor: total-stat histogram binning
    - suggestion_limit: max names offered by the search box
    - default_view: view selected on first load (None = first registered)
    """
    ui_title: str = "Pokémon Stats Browser"
    subtitle: str = "Interactive Pokédex Explorer"
    data_file: Path = Path("data/pokemon.csv")
    bin_width: int = DEFAULT_BIN_WIDTH
    histogram_floor: int = DEFAULT_HISTOGRAM_FLOOR
    suggestion_limit: int = SUGGESTION_LIMIT
    default_view: Optional[str] = None
    source_path: Optional[Path] = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Optional[Path] = None) -> GlobalConfig:
        return cls(
            ui_title=raw.get("ui_title", "Pokémon Stats Browser"),
            subtitle=raw.get("subtitle", "Interactive Pokédex Explorer"),
            data_file=Path(raw.get("data_file", "data/pokemon.csv")),
            bin_width=int(raw.get("bin_width", DEFAULT_BIN_WIDTH)),
            histogram_floor=int(raw.get("histogram_floor", DEFAULT_HISTOGRAM_FLOOR)),
            suggestion_limit=int(raw.get("suggestion_limit", SUGGESTION_LIMIT)),
            default_view=raw.get("default_view"),
            source_path=source_path,
        )
