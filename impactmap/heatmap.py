"""
Heatmap table assembly.

This module combines the column selection, row ranking and scaling steps into
one table model that a presentation layer can render directly:
  - ordered indicator columns and their group counts (column headers)
  - ordered sector rows
  - per-cell raw value, share, opacity and tooltip label
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from impactmap.config import HeatmapConfig
from impactmap.core import Indicator, MatrixLike, Sector, matrix_value
from impactmap.ranking import select_sectors
from impactmap.scaling import ResultRange, cell_alpha, get_share, result_ranges
from impactmap.selection import (
    GroupCount,
    find_indicator,
    group_counts,
    select_indicators,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeatmapCell:
    indicator: Indicator
    value: float
    share: float
    alpha: float

    @property
    def label(self) -> str:
        """Tooltip text such as "1.00e+1 kg CO2 eq" (exponent without padding)."""
        mantissa, exponent = f"{self.value:.2e}".split("e")
        return f"{mantissa}e{int(exponent):+d} {self.indicator.unit}"


@dataclass(frozen=True)
class HeatmapRow:
    sector: Sector
    cells: List[HeatmapCell] = field(default_factory=list)


@dataclass(frozen=True)
class HeatmapTable:
    columns: List[Indicator] = field(default_factory=list)
    groups: List[GroupCount] = field(default_factory=list)
    rows: List[HeatmapRow] = field(default_factory=list)
    ranges: List[ResultRange] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True if there is nothing to render (the "no data" state)."""
        return not self.columns or not self.rows

    def cell(self, code: str, sector_index: int) -> Optional[HeatmapCell]:
        """
        Look up the cell of an indicator code and a sector index.
        """
        for row in self.rows:
            if row.sector.index != int(sector_index):
                continue
            for c in row.cells:
                if c.indicator.code == code:
                    return c
        return None

    def to_dict(self) -> Dict[str, Any]:
        total = sum(g.count for g in self.groups)
        return {
            "columns": [i.code for i in self.columns],
            "groups": [
                {"group": g.group.value, "count": g.count, "width": g.width(total)}
                for g in self.groups
            ],
            "rows": [
                {
                    "sector": row.sector.name,
                    "index": row.sector.index,
                    "cells": [
                        {
                            "indicator": c.indicator.code,
                            "value": c.value,
                            "share": c.share,
                            "alpha": c.alpha,
                            "label": c.label,
                        }
                        for c in row.cells
                    ],
                }
                for row in self.rows
            ],
        }


def build_heatmap(
    indicators: Optional[Sequence[Indicator]],
    sectors: Optional[Sequence[Sector]],
    matrix: Optional[MatrixLike],
    config: Optional[HeatmapConfig] = None,
    *,
    search_term: Optional[str] = None,
    sort_code: Optional[str] = None,
) -> HeatmapTable:
    """
    Build the heatmap table for a dataset and the current selection.

    Args:
        indicators: Full indicator catalog.
        sectors: All sectors.
        matrix: Result matrix (indicator index, sector index) -> value.
        config: Heatmap configuration; defaults to `HeatmapConfig()`.
        search_term: Current free-text search, if any.
        sort_code: Code of a selected indicator to sort the rows by.

    Returns:
        A `HeatmapTable`; empty when no indicator is selected or no matrix is
        available.
    """
    config = config or HeatmapConfig()
    config.validate()

    columns = select_indicators(indicators, config.indicator_codes)
    if not columns or matrix is None:
        logger.debug("No indicators selected or no matrix; returning empty heatmap")
        return HeatmapTable()

    sort_indicator = find_indicator(columns, sort_code)
    if sort_code and sort_indicator is None:
        logger.warning("Sort indicator %r is not a selected column; ignored", sort_code)

    rows = select_sectors(
        sectors,
        columns,
        matrix,
        config.sector_count,
        search_term=search_term,
        sort_indicator=sort_indicator,
    )
    ranges = result_ranges(columns, rows, matrix)

    table_rows: List[HeatmapRow] = []
    for sector in rows:
        cells: List[HeatmapCell] = []
        for r in ranges:
            value = matrix_value(matrix, r.indicator.index, sector.index)
            share = get_share(value, r)
            cells.append(
                HeatmapCell(
                    indicator=r.indicator,
                    value=value,
                    share=share,
                    alpha=cell_alpha(share, config.alpha_floor),
                )
            )
        table_rows.append(HeatmapRow(sector=sector, cells=cells))

    logger.debug(
        "Built heatmap with %d columns and %d rows", len(columns), len(table_rows)
    )
    return HeatmapTable(
        columns=columns,
        groups=group_counts(columns),
        rows=table_rows,
        ranges=ranges,
    )
