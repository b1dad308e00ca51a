"""
Utility functions for heatmap data import and export.

This module provides functions to build indicators and sectors from the
records served by the data API (`/indicators`, `/sectors`, `/matrix/U`) and
to load and save complete datasets and configurations as JSON files.
"""

from __future__ import annotations

import json
import logging
import warnings
from typing import Any, Dict, Iterable, List, Mapping

from impactmap.config import HeatmapConfig
from impactmap.core import Dataset, Indicator, IndicatorGroup, ResultMatrix, Sector

logger = logging.getLogger(__name__)


def _require(record: Mapping[str, Any], key: str, kind: str) -> Any:
    if key not in record:
        raise ValueError(f"Invalid {kind} record: missing key {key!r}")
    return record[key]


def indicators_from_records(records: Iterable[Mapping[str, Any]]) -> List[Indicator]:
    """
    Build indicators from API records.

    Args:
        records: Mappings with keys index, code, name, unit and group. The
            group may be given by member name or label.

    Returns:
        Indicators in record order.

    Raises:
        ValueError: If a record misses a key or names an unknown group.
    """
    out: List[Indicator] = []
    seen: set[str] = set()
    for rec in records:
        code = str(_require(rec, "code", "indicator"))
        indicator = Indicator(
            index=int(_require(rec, "index", "indicator")),
            code=code,
            name=str(rec.get("name", code)),
            unit=str(rec.get("unit", "")),
            group=IndicatorGroup.parse(_require(rec, "group", "indicator")),
        )
        if code in seen:
            warnings.warn(
                f"Duplicate indicator code {code!r}; lookups use the first occurrence",
                stacklevel=2,
            )
        seen.add(code)
        out.append(indicator)
    return out


def sectors_from_records(records: Iterable[Mapping[str, Any]]) -> List[Sector]:
    """
    Build sectors from API records.

    Raises:
        ValueError: If a record misses its index or name.
    """
    out: List[Sector] = []
    for rec in records:
        out.append(
            Sector(
                index=int(_require(rec, "index", "sector")),
                name=str(_require(rec, "name", "sector")),
                id=str(rec.get("id", "")),
                code=str(rec.get("code", "")),
                location=str(rec.get("location", "")),
            )
        )
    return out


def _read_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in {path}: {e}")


def load_from_json(path: str) -> Dataset:
    """
    Load a dataset from a JSON file.

    Args:
        path: Path to a JSON file of the form
            {
                "indicators": [{"index": 0, "code": "GHG", ...}, ...],
                "sectors": [{"index": 0, "name": "..."}, ...],
                "matrix": [[...], ...]
            }
            where matrix rows are indicator indices and columns are sector
            indices.

    Returns:
        The loaded `Dataset`.

    Raises:
        FileNotFoundError: If the file is not found.
        ValueError: If the JSON format is invalid.
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid dataset in {path}: expected a JSON object")
    for key in ("indicators", "sectors", "matrix"):
        if key not in data:
            raise ValueError(f"JSON missing {key!r} key")

    dataset = Dataset(
        indicators=indicators_from_records(data["indicators"]),
        sectors=sectors_from_records(data["sectors"]),
        matrix=ResultMatrix(data["matrix"]),
    )
    logger.debug(
        "Loaded %d indicators, %d sectors, matrix %s from %s",
        len(dataset.indicators),
        len(dataset.sectors),
        dataset.matrix.shape,
        path,
    )
    return dataset


def save_to_json(dataset: Dataset, path: str) -> None:
    """
    Save a dataset to a JSON file readable by `load_from_json`.

    Raises:
        IOError: If the file cannot be written.
    """
    data: Dict[str, Any] = {
        "indicators": [
            {
                "index": i.index,
                "code": i.code,
                "name": i.name,
                "unit": i.unit,
                "group": i.group.name,
            }
            for i in dataset.indicators
        ],
        "sectors": [
            {
                "index": s.index,
                "name": s.name,
                "id": s.id,
                "code": s.code,
                "location": s.location,
            }
            for s in dataset.sectors
        ],
        "matrix": dataset.matrix.to_list(),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_config_from_json(path: str) -> HeatmapConfig:
    """
    Load a heatmap configuration from a JSON object.

    Raises:
        FileNotFoundError: If the file is not found.
        ValueError: If the JSON or a configuration value is invalid.
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid configuration in {path}: expected a JSON object")
    return HeatmapConfig.from_mapping(data)
