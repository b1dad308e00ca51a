"""
Deterministic benchmark datasets for ranking and scaling.

In this module, reproducible synthetic datasets are provided for smoke
benchmarking and for property-style tests over larger inputs. The datasets
are generated with deterministic RNG seeding so that results are stable
across runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from impactmap.core import Dataset, Indicator, IndicatorGroup, ResultMatrix, Sector
from impactmap.selection import DEFAULT_INDICATORS, INDICATOR_GROUPS


@dataclass(frozen=True)
class BenchmarkSpec:
    """
    Specification of a benchmark dataset.
    """

    name: str
    n_sectors: int
    seed: int
    # Fraction of cells set to exactly zero ("no signal").
    zero_fraction: float = 0.1


def _make_indicators(seed: int) -> List[Indicator]:
    rng = np.random.default_rng(int(seed))
    codes = list(DEFAULT_INDICATORS) + ["JOBS", "VADD"]
    # Catalog order is shuffled so that selection order is not an artefact of input order.
    order = rng.permutation(len(codes))
    out: List[Indicator] = []
    for idx, k in enumerate(order):
        code = codes[int(k)]
        if code in ("JOBS", "VADD"):
            group = IndicatorGroup.ECONOMIC_SOCIAL
        else:
            group = INDICATOR_GROUPS[int(rng.integers(0, len(INDICATOR_GROUPS) - 1))]
        out.append(Indicator(idx, code, f"Indicator {code}", "unit", group))
    return out


def make_benchmark_dataset(spec: BenchmarkSpec) -> Dataset:
    """
    Create a deterministic benchmark dataset according to a specification.
    """
    indicators = _make_indicators(int(spec.seed))
    rng = np.random.default_rng(int(spec.seed) + 1)
    n_sectors = int(spec.n_sectors)
    sectors = [Sector(s, f"Sector {s:04d}") for s in range(n_sectors)]
    values = rng.lognormal(mean=0.0, sigma=2.0, size=(len(indicators), n_sectors))
    zeros = rng.random(size=values.shape) < float(spec.zero_fraction)
    values[zeros] = 0.0
    return Dataset(indicators=indicators, sectors=sectors, matrix=ResultMatrix(values))


def benchmark_specs() -> Sequence[BenchmarkSpec]:
    """
    Benchmark specifications are returned.
    """
    return (
        BenchmarkSpec(name="H1_small_50", n_sectors=50, seed=21_001),
        BenchmarkSpec(name="H2_medium_400", n_sectors=400, seed=21_002),
    )


def benchmark_dataset_h1() -> Dataset:
    """
    Return the small benchmark dataset (18 indicators × 50 sectors).
    """
    return make_benchmark_dataset(benchmark_specs()[0])


def benchmark_dataset_h2() -> Dataset:
    """
    Return the medium benchmark dataset (18 indicators × 400 sectors).
    """
    return make_benchmark_dataset(benchmark_specs()[1])
