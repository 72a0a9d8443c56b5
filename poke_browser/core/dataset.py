from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from poke_browser.core.aggregation import distinct_types
from poke_browser.core.record import STAT_NAMES, Record


class Dataset:
    """
    Unified dataset abstraction used throughout the browser.

    Includes:
    - the normalised records, in file order
    - lookup by name
    - sorted distinct types / generations for dropdowns and legends
    - a cached pandas view for the Plotly renderers
    """

    def __init__(
        self,
        name: str,
        records: Sequence[Record],
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.records: List[Record] = list(records)
        self.file_path = file_path

        self._by_name: Dict[str, Record] = {rec.name: rec for rec in self.records}
        self._frame: Optional[pd.DataFrame] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def names(self) -> List[str]:
        return [rec.name for rec in self.records]

    @property
    def types(self) -> List[str]:
        return distinct_types(self.records)

    @property
    def generations(self) -> List[int]:
        return sorted({rec.generation for rec in self.records})

    def find(self, name: Optional[str]) -> Optional[Record]:
        if name is None:
            return None
        return self._by_name.get(name)

    def for_generation(self, generation: int) -> List[Record]:
        return [rec for rec in self.records if rec.generation == generation]

    def to_frame(self) -> pd.DataFrame:
        """
        One row per record: name, types, stats, total, generation, legendary.
        Cached; callers must not mutate the result.
        """
        if self._frame is None:
            self._frame = pd.DataFrame(
                [
                    {
                        "name": rec.name,
                        "type1": rec.type1,
                        "type2": rec.type2,
                        **{stat: rec.stat(stat) for stat in STAT_NAMES},
                        "total": rec.total,
                        "generation": rec.generation,
                        "legendary": rec.legendary,
                    }
                    for rec in self.records
                ],
                columns=["name", "type1", "type2", *STAT_NAMES, "total", "generation", "legendary"],
            )
        return self._frame
