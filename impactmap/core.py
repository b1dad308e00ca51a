"""
Core heatmap data structures.

This module provides the immutable inputs of the selection and scaling engine:
IndicatorGroup for the fixed column grouping, Indicator and Sector for the
catalog entries, and ResultMatrix for the precomputed impact values keyed by
(indicator index, sector index).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple

import numpy as np


class IndicatorGroup(str, Enum):
    """
    Classification group of an indicator.

    The member order is the fixed column order of the heatmap.
    """

    IMPACT_POTENTIAL = "Impact potential"
    RESOURCE_USE = "Resource use"
    CHEMICAL_RELEASES = "Chemical releases"
    WASTE_GENERATED = "Waste generated"
    ECONOMIC_SOCIAL = "Economic & social"

    @classmethod
    def parse(cls, text: str) -> "IndicatorGroup":
        """
        Resolve a group from its member name or its label.

        Raises:
            ValueError: If the text names no group.
        """
        if isinstance(text, IndicatorGroup):
            return text
        key = str(text).strip()
        for group in cls:
            if key == group.value or key.upper() == group.name:
                return group
        raise ValueError(f"Unknown indicator group: {text!r}")


@dataclass(frozen=True)
class Indicator:
    index: int
    code: str
    name: str
    unit: str
    group: IndicatorGroup


@dataclass(frozen=True)
class Sector:
    index: int
    name: str
    # Identifiers passed through from the data source.
    id: str = ""
    code: str = ""
    location: str = ""


class MatrixLike(Protocol):
    # May return None for an absent cell; see matrix_value.
    def get(self, row: int, col: int) -> Optional[float]:
        ...


class ResultMatrix:
    """
    Dense, read-only matrix of indicator results.

    Rows are indicator indices and columns are sector indices. Lookups always
    return a finite number: indices outside the matrix and non-finite entries
    read as 0.0.

    Attributes:
        _data: Internal float64 array of shape (n_rows, n_cols).
    """

    def __init__(self, data: Sequence[Sequence[float]]) -> None:
        """
        Initialize the matrix from a nested sequence of numbers.

        Args:
            data: Row-major values, one row per indicator index.

        Raises:
            ValueError: If the data is not a 2-D numeric table.
        """
        try:
            arr = np.array(data, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Matrix data must be numeric: {e}") from e
        if arr.size == 0:
            arr = arr.reshape((0, 0))
        if arr.ndim != 2:
            raise ValueError(
                f"Matrix data must be 2-D, but {arr.ndim} dimensions were provided"
            )
        arr.setflags(write=False)
        self._data: np.ndarray = arr

    @property
    def shape(self) -> Tuple[int, int]:
        return (int(self._data.shape[0]), int(self._data.shape[1]))

    @property
    def n_rows(self) -> int:
        return self.shape[0]

    @property
    def n_cols(self) -> int:
        return self.shape[1]

    def get(self, row: int, col: int) -> float:
        """
        Return the value at (row, col), or 0.0 if absent or not finite.
        """
        r = int(row)
        c = int(col)
        if r < 0 or c < 0 or r >= self._data.shape[0] or c >= self._data.shape[1]:
            return 0.0
        v = float(self._data[r, c])
        if not np.isfinite(v):
            return 0.0
        return v

    def to_list(self) -> List[List[float]]:
        return [[float(v) for v in r] for r in self._data]

    def __repr__(self) -> str:
        return f"ResultMatrix(shape={self.shape})"


def matrix_value(matrix: MatrixLike, row: int, col: int) -> float:
    """
    Read a result from any matrix, treating absent and non-finite values as 0.0.
    """
    v = matrix.get(row, col)
    if v is None:
        return 0.0
    v = float(v)
    if not np.isfinite(v):
        return 0.0
    return v


@dataclass(frozen=True)
class Dataset:
    """
    The resident inputs of a heatmap: indicator catalog, sectors and results.
    """

    indicators: Sequence[Indicator]
    sectors: Sequence[Sector]
    matrix: ResultMatrix
