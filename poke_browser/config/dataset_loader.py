from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import pandas as pd

from poke_browser.config.model import GlobalConfig
from poke_browser.core.dataset import Dataset
from poke_browser.core.exceptions import DatasetSchemaError
from poke_browser.core.normalizer import ParseWarning, normalize_rows
from poke_browser.core.record import STAT_COLUMNS, STAT_NAMES

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Name", "Type_1", "Type_2", "Total", "Generation", "Legendary")


def _validate_columns(df: pd.DataFrame, path: Path) -> None:
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    missing += [
        STAT_COLUMNS[stat][0]
        for stat in STAT_NAMES
        if not any(col in df.columns for col in STAT_COLUMNS[stat])
    ]
    if missing:
        msg = f"Dataset {path} is missing columns: {', '.join(missing)}"
        logger.error(msg, extra={"path": str(path), "missing": missing})
        raise DatasetSchemaError(msg)


def resolve_data_path(path: Path, config_root: Optional[Path] = None) -> Path:
    """
    Relative paths resolve against POKE_BROWSER_DATA_ROOT when it is set,
    otherwise against the config root's parent (the project directory).
    """
    path = Path(path)
    if path.is_absolute():
        return path

    data_root = os.environ.get("POKE_BROWSER_DATA_ROOT")
    if data_root:
        root_path = Path(data_root)
        resolved = root_path / path
        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt_path = root_path / Path(*path.parts[1:])
            if alt_path.is_file():
                resolved = alt_path
        return resolved

    if config_root is not None:
        return Path(config_root).parent / path
    return path


def load_dataset(path: Path | str, name: Optional[str] = None) -> Dataset:
    """
    Read a Pokémon CSV and normalise it into a Dataset.

    All cells are read as strings so the normaliser sees the raw tokens
    ("True", "", "None") rather than pandas' guesses.

    :raises FileNotFoundError: if the CSV does not exist
    :raises DatasetSchemaError: if required columns are missing
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset file not found at {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    _validate_columns(df, path)

    warnings: List[ParseWarning] = []
    records = normalize_rows(df.to_dict("records"), warnings)

    logger.info(
        "Dataset loaded",
        extra={
            "path": str(path),
            "n_rows": len(df),
            "n_records": len(records),
            "n_parse_warnings": len(warnings),
        },
    )

    return Dataset(name=name or path.stem, records=records, file_path=path)


def from_config(cfg: GlobalConfig, config_root: Optional[Path] = None) -> Dataset:
    """
    Materialise the configured Dataset.
    """
    path = resolve_data_path(cfg.data_file, config_root)
    return load_dataset(path)
