"""
Sector ranking for the heatmap rows.

In this module, the row selection is expressed as a small set of ranking
strategies. Exactly one strategy is chosen per call, by precedence:

  - name fallback (no indicators or no matrix available)
  - search (a non-blank search term is given)
  - explicit sort by one indicator
  - default magnitude (Euclidean norm over the selected indicators)

Every strategy maps a sector to an ascending sort key, or to None if the
sector is excluded. A single stable sort then orders the sectors, so ties keep
their input order, and the result is truncated to the row limit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from impactmap.core import Indicator, MatrixLike, Sector, matrix_value
from impactmap.strings import compare_key, fold, search

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameRanking:
    """Sectors in ascending name order."""

    def score(self, sector: Sector, matrix: Optional[MatrixLike]) -> Optional[Any]:
        return compare_key(sector.name)


@dataclass(frozen=True)
class SearchRanking:
    """Sectors whose name matches the term, earliest match first."""

    term: str

    def score(self, sector: Sector, matrix: Optional[MatrixLike]) -> Optional[Any]:
        pos = search(sector.name, self.term)
        if pos < 0:
            return None
        return pos


@dataclass(frozen=True)
class IndicatorRanking:
    """Sectors in descending order of one indicator result."""

    indicator: Indicator

    def score(self, sector: Sector, matrix: Optional[MatrixLike]) -> Optional[Any]:
        if matrix is None:
            return None
        return -matrix_value(matrix, self.indicator.index, sector.index)


@dataclass(frozen=True)
class MagnitudeRanking:
    """Sectors in descending order of the norm of their indicator results."""

    indicators: Tuple[Indicator, ...]

    def magnitude(self, sector: Sector, matrix: MatrixLike) -> float:
        values = np.fromiter(
            (matrix_value(matrix, i.index, sector.index) for i in self.indicators),
            dtype=np.float64,
            count=len(self.indicators),
        )
        return float(np.sqrt(np.sum(np.square(values))))

    def score(self, sector: Sector, matrix: Optional[MatrixLike]) -> Optional[Any]:
        if matrix is None:
            return None
        return -self.magnitude(sector, matrix)


Ranking = Union[NameRanking, SearchRanking, IndicatorRanking, MagnitudeRanking]


def choose_ranking(
    indicators: Optional[Sequence[Indicator]],
    matrix: Optional[MatrixLike],
    search_term: Optional[str] = None,
    sort_indicator: Optional[Indicator] = None,
) -> Ranking:
    """
    The ranking strategy for a row selection is chosen by precedence.
    """
    if not indicators or matrix is None:
        return NameRanking()
    if search_term and fold(search_term).strip():
        return SearchRanking(term=search_term)
    if sort_indicator is not None:
        return IndicatorRanking(indicator=sort_indicator)
    return MagnitudeRanking(indicators=tuple(indicators))


def sector_scores(
    sectors: Optional[Sequence[Sector]],
    ranking: Ranking,
    matrix: Optional[MatrixLike],
) -> List[Tuple[Sector, Any]]:
    """
    Score and order the sectors with the given strategy.

    Returns:
        (sector, key) pairs in ascending key order; excluded sectors are
        dropped and ties keep the input order.
    """
    if not sectors:
        return []
    scored: List[Tuple[Sector, Any]] = []
    for sector in sectors:
        key = ranking.score(sector, matrix)
        if key is None:
            continue
        scored.append((sector, key))
    # sorted() is stable: equal keys keep input order.
    return sorted(scored, key=lambda pair: pair[1])


def select_sectors(
    sectors: Optional[Sequence[Sector]],
    indicators: Optional[Sequence[Indicator]],
    matrix: Optional[MatrixLike],
    limit: int,
    search_term: Optional[str] = None,
    sort_indicator: Optional[Indicator] = None,
) -> List[Sector]:
    """
    Select and order the sectors displayed in the rows of the heatmap.

    Args:
        sectors: All sectors of the dataset.
        indicators: The selected indicator columns.
        matrix: Result matrix (indicator index, sector index) -> value.
        limit: Maximum number of rows.
        search_term: Optional free-text filter on sector names; takes
            precedence over `sort_indicator`.
        sort_indicator: Optional indicator to sort by, descending.

    Returns:
        At most `limit` sectors. Empty if `limit` is not positive, if no
        sectors are given, or if the search term matches nothing.
    """
    if sectors is None or int(limit) <= 0:
        return []
    ranking = choose_ranking(indicators, matrix, search_term, sort_indicator)
    logger.debug(
        "Ranking %d sectors with %s (limit=%d)",
        len(sectors),
        type(ranking).__name__,
        int(limit),
    )
    scored = sector_scores(sectors, ranking, matrix)
    return [sector for sector, _ in scored[: int(limit)]]
