"""
Indicator column selection.

The heatmap columns are a fixed allow-list of indicator codes, ordered by
indicator group and then by code. Group counts size the grouped column
headers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from impactmap.core import Indicator, IndicatorGroup
from impactmap.strings import compare_key


DEFAULT_INDICATORS: Tuple[str, ...] = (
    "ACID",
    "ETOX",
    "EUTR",
    "GHG",
    "HRSP",
    "HTOX",
    "OZON",
    "SMOG",
    "ENRG",
    "LAND",
    "MNRL",
    "WATR",
    "CMSW",
    "CRHW",
    "METL",
    "PEST",
)

INDICATOR_GROUPS: Tuple[IndicatorGroup, ...] = (
    IndicatorGroup.IMPACT_POTENTIAL,
    IndicatorGroup.RESOURCE_USE,
    IndicatorGroup.CHEMICAL_RELEASES,
    IndicatorGroup.WASTE_GENERATED,
    IndicatorGroup.ECONOMIC_SOCIAL,
)


def _group_position(group: IndicatorGroup) -> int:
    try:
        return INDICATOR_GROUPS.index(group)
    except ValueError:
        return len(INDICATOR_GROUPS)


def select_indicators(
    catalog: Optional[Sequence[Indicator]],
    codes: Optional[Iterable[str]],
) -> List[Indicator]:
    """
    Select and sort the indicators shown as heatmap columns.

    Args:
        catalog: Full indicator catalog.
        codes: Allow-list of indicator codes.

    Returns:
        The catalog indicators whose code is allowed, ordered by group (in
        `INDICATOR_GROUPS` order) and then by code. Empty if either input is
        missing or empty.
    """
    if not catalog or not codes:
        return []
    allowed = set(codes)
    selected = [i for i in catalog if i.code in allowed]
    return sorted(
        selected,
        key=lambda i: (_group_position(i.group), compare_key(i.code)),
    )


def find_indicator(
    indicators: Optional[Sequence[Indicator]], code: Optional[str]
) -> Optional[Indicator]:
    """Return the first indicator with the given code, if any."""
    if not indicators or not code:
        return None
    for indicator in indicators:
        if indicator.code == code:
            return indicator
    return None


@dataclass(frozen=True)
class GroupCount:
    group: IndicatorGroup
    count: int

    def width(self, total: int, span: float = 80.0) -> float:
        """
        Share of `span` (percent of the table width) taken by this group.
        """
        if int(total) <= 0:
            return 0.0
        return float(span) * self.count / int(total)


def group_counts(indicators: Optional[Sequence[Indicator]]) -> List[GroupCount]:
    """
    Count the indicators per group.

    Only groups with at least one indicator are returned, in the order of
    `INDICATOR_GROUPS`.
    """
    if not indicators:
        return []
    counts: List[GroupCount] = []
    for group in INDICATOR_GROUPS:
        n = sum(1 for i in indicators if i.group == group)
        if n > 0:
            counts.append(GroupCount(group=group, count=n))
    return counts
