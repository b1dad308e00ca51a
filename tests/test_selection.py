"""
Unit tests for indicator column selection and group counts.
"""

from __future__ import annotations

from impactmap.benchmark_data import benchmark_dataset_h1
from impactmap.core import Indicator, IndicatorGroup
from impactmap.example_data import example_dataset
from impactmap.selection import (
    DEFAULT_INDICATORS,
    INDICATOR_GROUPS,
    GroupCount,
    find_indicator,
    group_counts,
    select_indicators,
)

G = IndicatorGroup


def _codes(indicators) -> list:
    return [i.code for i in indicators]


class TestSelectIndicators:
    def test_orders_by_group_then_code(self) -> None:
        ds = example_dataset()
        selected = select_indicators(ds.indicators, ["GHG", "ACID", "WATR"])
        assert _codes(selected) == ["ACID", "GHG", "WATR"]

    def test_drops_unknown_and_not_allowed_codes(self) -> None:
        ds = example_dataset()
        selected = select_indicators(ds.indicators, ["GHG", "NOPE"])
        assert _codes(selected) == ["GHG"]

    def test_empty_inputs(self) -> None:
        ds = example_dataset()
        assert select_indicators(None, ["GHG"]) == []
        assert select_indicators([], ["GHG"]) == []
        assert select_indicators(ds.indicators, None) == []
        assert select_indicators(ds.indicators, []) == []

    def test_subset_and_ordering_properties(self) -> None:
        ds = benchmark_dataset_h1()
        allow = list(DEFAULT_INDICATORS[:10]) + ["JOBS", "UNKNOWN"]
        selected = select_indicators(ds.indicators, allow)

        assert len(selected) <= len(allow)
        assert all(i in ds.indicators for i in selected)
        assert all(i.code in allow for i in selected)

        for a, b in zip(selected, selected[1:]):
            ga = INDICATOR_GROUPS.index(a.group)
            gb = INDICATOR_GROUPS.index(b.group)
            assert ga <= gb
            if ga == gb:
                assert a.code.casefold() <= b.code.casefold()

    def test_is_deterministic_and_does_not_mutate(self) -> None:
        ds = benchmark_dataset_h1()
        catalog = list(ds.indicators)
        before = list(catalog)
        first = select_indicators(catalog, DEFAULT_INDICATORS)
        second = select_indicators(catalog, DEFAULT_INDICATORS)
        assert first == second
        assert catalog == before

    def test_code_order_is_case_insensitive(self) -> None:
        catalog = [
            Indicator(0, "b2", "", "", G.RESOURCE_USE),
            Indicator(1, "A1", "", "", G.RESOURCE_USE),
            Indicator(2, "Z9", "", "", G.IMPACT_POTENTIAL),
        ]
        selected = select_indicators(catalog, ["b2", "A1", "Z9"])
        assert _codes(selected) == ["Z9", "A1", "b2"]


def test_find_indicator() -> None:
    ds = example_dataset()
    assert find_indicator(ds.indicators, "WATR").index == 2
    assert find_indicator(ds.indicators, "NOPE") is None
    assert find_indicator(ds.indicators, None) is None
    assert find_indicator(None, "GHG") is None


class TestGroupCounts:
    def test_counts_omit_empty_groups(self) -> None:
        ds = example_dataset()
        selected = select_indicators(ds.indicators, ["GHG", "ACID", "WATR"])
        counts = group_counts(selected)
        assert counts == [
            GroupCount(G.IMPACT_POTENTIAL, 2),
            GroupCount(G.RESOURCE_USE, 1),
        ]

    def test_counts_sum_to_selection_size(self) -> None:
        ds = benchmark_dataset_h1()
        selected = select_indicators(ds.indicators, DEFAULT_INDICATORS)
        counts = group_counts(selected)
        assert sum(c.count for c in counts) == len(selected)
        assert all(c.count > 0 for c in counts)
        positions = [INDICATOR_GROUPS.index(c.group) for c in counts]
        assert positions == sorted(positions)

    def test_empty(self) -> None:
        assert group_counts([]) == []
        assert group_counts(None) == []

    def test_header_width(self) -> None:
        c = GroupCount(G.IMPACT_POTENTIAL, 2)
        assert c.width(4) == 40.0
        assert c.width(0) == 0.0
        assert c.width(2, span=100.0) == 100.0
