from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Set

from poke_browser.core.exceptions import RecordParseError
from poke_browser.core.record import NO_TYPE, STAT_COLUMNS, STAT_NAMES, Record

logger = logging.getLogger(__name__)

LEGENDARY_TOKEN = "True"


@dataclass(frozen=True)
class ParseWarning:
    """
    A field that could not be read and was replaced by 0.
    """
    name: str
    field: str
    raw_value: Any


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value.strip() == ""


def _coerce_count(value: Any) -> Optional[int]:
    """
    Parse a non-negative integer from a raw cell; None when unusable.
    """
    if _is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return int(number)


def _lookup(row: Mapping[str, Any], columns: Iterable[str]) -> Any:
    for col in columns:
        if col in row:
            return row[col]
    return None


def _numeric_or_zero(
    row: Mapping[str, Any],
    name: str,
    field_name: str,
    columns: Iterable[str],
    warnings: Optional[List[ParseWarning]],
) -> int:
    raw = _lookup(row, columns)
    value = _coerce_count(raw)
    if value is not None:
        return value

    logger.warning(
        "Unreadable numeric field replaced with 0",
        extra={"pokemon": name, "field": field_name, "raw_value": repr(raw)},
    )
    if warnings is not None:
        warnings.append(ParseWarning(name=name, field=field_name, raw_value=raw))
    return 0


def _normalise_type2(value: Any) -> Optional[str]:
    if _is_blank(value):
        return None
    text = str(value).strip()
    if text == NO_TYPE:
        return None
    return text


def _parse_legendary(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return value == LEGENDARY_TOKEN


def parse_record(
    row: Mapping[str, Any],
    warnings: Optional[List[ParseWarning]] = None,
) -> Record:
    """
    Turn one raw CSV row into a Record.

    Stats and Total fall back to 0 when missing or unreadable (each fallback is
    logged and, if a list is given, appended to ``warnings``). Name and Type_1
    are kept as-is, an empty or "None" Type_2 becomes None.

    :param row: a string-keyed row (CSV column -> raw value)
    :param warnings: optional sink for ParseWarning entries
    :return: the parsed Record
    :raises RecordParseError: if the row has no name, no primary type or no
        positive generation
    """
    name = row.get("Name")
    if _is_blank(name):
        raise RecordParseError(f"Row has no Name: {dict(row)!r}")
    name = str(name)

    type1 = row.get("Type_1")
    if _is_blank(type1):
        raise RecordParseError(f"Pokémon '{name}' has no Type_1")

    generation = _coerce_count(row.get("Generation"))
    if generation is None or generation < 1:
        raise RecordParseError(
            f"Pokémon '{name}' has invalid Generation {row.get('Generation')!r}"
        )

    stats = {
        stat: _numeric_or_zero(row, name, stat, STAT_COLUMNS[stat], warnings)
        for stat in STAT_NAMES
    }
    total = _numeric_or_zero(row, name, "Total", ("Total",), warnings)

    return Record(
        name=name,
        type1=str(type1),
        type2=_normalise_type2(row.get("Type_2")),
        stats=stats,
        total=total,
        generation=generation,
        legendary=_parse_legendary(row.get("Legendary")),
    )


def normalize_rows(
    rows: Iterable[Mapping[str, Any]],
    warnings: Optional[List[ParseWarning]] = None,
) -> List[Record]:
    """
    Parse an ordered sequence of rows, keeping input order.

    Rows that cannot be parsed, and rows repeating an earlier name, are skipped
    and logged so that names stay unique.
    """
    records: List[Record] = []
    seen: Set[str] = set()
    skipped = 0

    for idx, row in enumerate(rows):
        try:
            record = parse_record(row, warnings)
        except RecordParseError as e:
            skipped += 1
            logger.warning("Skipping row %d: %s", idx, e)
            continue

        if record.name in seen:
            skipped += 1
            logger.warning(
                "Skipping duplicate Pokémon name",
                extra={"row": idx, "pokemon": record.name},
            )
            continue

        seen.add(record.name)
        records.append(record)

    logger.info(
        "Rows normalised",
        extra={"n_records": len(records), "n_skipped": skipped},
    )
    return records
