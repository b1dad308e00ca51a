"""
Selection and scaling engine for environmental-impact heatmaps.

This package chooses the indicator columns and sector rows of an impact
heatmap, computes per-indicator result ranges over the selected sectors, and
maps raw results to normalized intensity shares.
"""

from impactmap.config import HeatmapConfig
from impactmap.core import (
    Dataset,
    Indicator,
    IndicatorGroup,
    MatrixLike,
    ResultMatrix,
    matrix_value,
    Sector,
)
from impactmap.heatmap import HeatmapCell, HeatmapRow, HeatmapTable, build_heatmap
from impactmap.ranking import (
    IndicatorRanking,
    MagnitudeRanking,
    NameRanking,
    SearchRanking,
    choose_ranking,
    sector_scores,
    select_sectors,
)
from impactmap.scaling import ResultRange, cell_alpha, get_share, result_ranges
from impactmap.selection import (
    DEFAULT_INDICATORS,
    INDICATOR_GROUPS,
    GroupCount,
    find_indicator,
    group_counts,
    select_indicators,
)
from impactmap.utils import (
    indicators_from_records,
    load_config_from_json,
    load_from_json,
    save_to_json,
    sectors_from_records,
)

__all__ = [
    "Dataset",
    "Indicator",
    "IndicatorGroup",
    "MatrixLike",
    "ResultMatrix",
    "matrix_value",
    "Sector",
    "HeatmapConfig",
    "DEFAULT_INDICATORS",
    "INDICATOR_GROUPS",
    "GroupCount",
    "select_indicators",
    "find_indicator",
    "group_counts",
    "NameRanking",
    "SearchRanking",
    "IndicatorRanking",
    "MagnitudeRanking",
    "choose_ranking",
    "sector_scores",
    "select_sectors",
    "ResultRange",
    "result_ranges",
    "get_share",
    "cell_alpha",
    "HeatmapCell",
    "HeatmapRow",
    "HeatmapTable",
    "build_heatmap",
    "indicators_from_records",
    "sectors_from_records",
    "load_from_json",
    "save_to_json",
    "load_config_from_json",
]
