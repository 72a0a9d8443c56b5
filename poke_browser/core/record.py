from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

STAT_NAMES: Tuple[str, ...] = (
    "HP",
    "Attack",
    "Defense",
    "SpecialAttack",
    "SpecialDefense",
    "Speed",
)

# Stat name -> accepted CSV columns, first match wins
STAT_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "HP": ("HP",),
    "Attack": ("Attack",),
    "Defense": ("Defense",),
    "SpecialAttack": ("Sp. Atk", "Sp_Atk"),
    "SpecialDefense": ("Sp. Def", "Sp_Def"),
    "Speed": ("Speed",),
}

STAT_LABELS: Dict[str, str] = {
    "HP": "HP",
    "Attack": "Attack",
    "Defense": "Defense",
    "SpecialAttack": "Sp. Atk",
    "SpecialDefense": "Sp. Def",
    "Speed": "Speed",
}

# Placeholder some exports use for "no secondary type"
NO_TYPE = "None"


@dataclass(frozen=True)
class Record:
    """
    One Pokémon after normalisation.

    Fields:

    - name: unique key across the record set
    - type1: primary type, kept as read
    - type2: secondary type or None (never the literal "None")
    - stats: stat name -> non-negative int, keyed by STAT_NAMES
    - total: the dataset's Total column; may disagree with sum(stats)
    - generation: positive int cohort
    - legendary: parsed from the "True" token
    """

    name: str
    type1: str
    type2: Optional[str] = None
    stats: Dict[str, int] = field(default_factory=dict)
    total: int = 0
    generation: int = 1
    legendary: bool = False

    @property
    def key(self) -> str:
        """Lower-cased name, used for highlight matching."""
        return self.name.lower()

    @property
    def types(self) -> Tuple[str, ...]:
        if self.type2 is None:
            return (self.type1,)
        return (self.type1, self.type2)

    @property
    def stat_sum(self) -> int:
        return sum(self.stats.values())

    def stat(self, name: str) -> int:
        return self.stats.get(name, 0)
