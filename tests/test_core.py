"""
Unit tests for the heatmap data model.
"""

from __future__ import annotations

import pytest

from impactmap.core import Indicator, IndicatorGroup, ResultMatrix, Sector, matrix_value


class TestIndicatorGroup:
    def test_parse_by_name_and_label(self) -> None:
        assert IndicatorGroup.parse("RESOURCE_USE") is IndicatorGroup.RESOURCE_USE
        assert IndicatorGroup.parse("resource_use") is IndicatorGroup.RESOURCE_USE
        assert IndicatorGroup.parse("Economic & social") is IndicatorGroup.ECONOMIC_SOCIAL
        assert IndicatorGroup.parse(IndicatorGroup.WASTE_GENERATED) is IndicatorGroup.WASTE_GENERATED

    def test_parse_unknown_group(self) -> None:
        with pytest.raises(ValueError):
            IndicatorGroup.parse("Biodiversity")

    def test_member_order_is_column_order(self) -> None:
        assert [g.name for g in IndicatorGroup] == [
            "IMPACT_POTENTIAL",
            "RESOURCE_USE",
            "CHEMICAL_RELEASES",
            "WASTE_GENERATED",
            "ECONOMIC_SOCIAL",
        ]


class TestResultMatrix:
    def test_get_and_shape(self) -> None:
        m = ResultMatrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert m.shape == (2, 3)
        assert m.n_rows == 2
        assert m.n_cols == 3
        assert m.get(1, 2) == 6.0
        assert m.get(0, 0) == 1.0

    def test_absent_and_non_finite_values_read_as_zero(self) -> None:
        m = ResultMatrix([[float("nan"), float("inf")], [1.0, -2.0]])
        assert m.get(0, 0) == 0.0
        assert m.get(0, 1) == 0.0
        assert m.get(5, 0) == 0.0
        assert m.get(0, 7) == 0.0
        assert m.get(-1, 0) == 0.0
        assert m.get(1, 1) == -2.0

    def test_invalid_data(self) -> None:
        with pytest.raises(ValueError):
            ResultMatrix([[1.0, 2.0], [3.0]])
        with pytest.raises(ValueError):
            ResultMatrix([[[1.0]]])
        with pytest.raises(ValueError):
            ResultMatrix([["a", "b"]])

    def test_empty_matrix(self) -> None:
        m = ResultMatrix([])
        assert m.shape == (0, 0)
        assert m.get(0, 0) == 0.0

    def test_to_list(self) -> None:
        m = ResultMatrix([[1, 2], [3, 4]])
        assert m.to_list() == [[1.0, 2.0], [3.0, 4.0]]


def test_model_objects_are_immutable() -> None:
    i = Indicator(0, "GHG", "Greenhouse Gases", "kg CO2 eq", IndicatorGroup.IMPACT_POTENTIAL)
    s = Sector(0, "Oilseed farming")
    with pytest.raises(AttributeError):
        i.code = "X"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        s.name = "X"  # type: ignore[misc]
    assert s.code == ""


class _SparseMatrix:
    def __init__(self, cells) -> None:
        self.cells = dict(cells)

    def get(self, row: int, col: int):
        return self.cells.get((row, col))


def test_matrix_value_reads_absent_cells_as_zero() -> None:
    m = _SparseMatrix({(0, 1): 3.0, (1, 0): float("nan"), (1, 1): float("-inf")})
    assert matrix_value(m, 0, 1) == 3.0
    assert matrix_value(m, 0, 0) == 0.0
    assert matrix_value(m, 1, 0) == 0.0
    assert matrix_value(m, 1, 1) == 0.0
    assert matrix_value(ResultMatrix([[2.0]]), 0, 0) == 2.0
