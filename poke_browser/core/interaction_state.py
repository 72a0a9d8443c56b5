from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from poke_browser.core.record import NO_TYPE, Record

SUGGESTION_LIMIT = 10


@dataclass
class TypeFilter:
    """
    A checkbox-gated type predicate. ``value`` is ignored while disabled.
    """
    enabled: bool = False
    value: Optional[str] = None

    def matches(self, type_name: Optional[str]) -> bool:
        if not self.enabled:
            return True
        wanted = None if self.value == NO_TYPE else self.value
        return type_name == wanted

    def to_dict(self) -> Dict[str, Any]:
        return {"enabled": self.enabled, "value": self.value}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> TypeFilter:
        data = data or {}
        return cls(enabled=bool(data.get("enabled", False)), value=data.get("value"))


@dataclass(frozen=True)
class Visibility:
    visible: bool
    emphasized: bool


@dataclass
class InteractionState:
    """
    Search / highlight / type-filter state shared by the parallel-coordinates
    views.

    Fields:

    - search_term: the text as typed (or the picked suggestion)
    - highlighted_name: lower-cased name or fragment being highlighted;
      search counts as active while this is set
    - type1_filter, type2_filter: independent type predicates
    - suggestions: names offered for the current search text

    Transitions mutate the instance in place; ``visibility_and_emphasis`` is the
    only decision the renderer reads.
    """

    search_term: Optional[str] = None
    highlighted_name: Optional[str] = None
    type1_filter: TypeFilter = field(default_factory=TypeFilter)
    type2_filter: TypeFilter = field(default_factory=TypeFilter)
    suggestions: List[str] = field(default_factory=list)

    @property
    def search_active(self) -> bool:
        return self.highlighted_name is not None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def set_search_term(
        self,
        text: Optional[str],
        records: Sequence[Record],
        limit: int = SUGGESTION_LIMIT,
    ) -> List[str]:
        """
        Highlight eagerly on the typed text and offer up to ``limit`` names that
        contain it (case-insensitive, input order). Empty text clears the search.
        """
        text = (text or "").strip()
        if not text:
            self.clear_search()
            return []

        needle = text.lower()
        self.search_term = text
        self.highlighted_name = needle
        self.suggestions = [rec.name for rec in records if needle in rec.key][:limit]
        return list(self.suggestions)

    def select_suggestion(self, name: str) -> None:
        self.search_term = name
        self.highlighted_name = name.lower()
        self.suggestions = []

    def clear_search(self) -> None:
        self.search_term = None
        self.highlighted_name = None
        self.suggestions = []

    def set_type1_filter(self, enabled: bool, value: Optional[str] = None) -> None:
        self.type1_filter = TypeFilter(enabled=bool(enabled), value=value)

    def set_type2_filter(self, enabled: bool, value: Optional[str] = None) -> None:
        self.type2_filter = TypeFilter(enabled=bool(enabled), value=value)

    def reset(self) -> None:
        self.search_term = None
        self.highlighted_name = None
        self.type1_filter = TypeFilter()
        self.type2_filter = TypeFilter()
        self.suggestions = []

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------
    def visibility_and_emphasis(self, record: Record) -> Visibility:
        is_target = record.key == self.highlighted_name
        visible = (
            self.type1_filter.matches(record.type1)
            and self.type2_filter.matches(record.type2)
            and (not self.search_active or is_target)
        )
        return Visibility(visible=visible, emphasized=self.search_active and is_target)

    def decisions(self, records: Sequence[Record]) -> List[Visibility]:
        return [self.visibility_and_emphasis(rec) for rec in records]

    def visible_records(self, records: Sequence[Record]) -> List[Record]:
        return [rec for rec in records if self.visibility_and_emphasis(rec).visible]

    # ------------------------------------------------------------------
    # Store (de)serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "search_term": self.search_term,
            "highlighted_name": self.highlighted_name,
            "type1_filter": self.type1_filter.to_dict(),
            "type2_filter": self.type2_filter.to_dict(),
            "suggestions": list(self.suggestions),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> InteractionState:
        data = data or {}
        return cls(
            search_term=data.get("search_term"),
            highlighted_name=data.get("highlighted_name"),
            type1_filter=TypeFilter.from_dict(data.get("type1_filter")),
            type2_filter=TypeFilter.from_dict(data.get("type2_filter")),
            suggestions=list(data.get("suggestions", [])),
        )
