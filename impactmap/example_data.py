"""
Self-contained example data for the impact heatmap.

This module provides:
  - `example_dataset()`: a minimal dataset (3 indicators × 2 sectors) whose
    selection, ranking and shares can be checked by hand.
  - `demo_dataset()`: a demo dataset with the default indicator columns, two
    economic/social indicators outside the default allow-list, and a dozen
    sectors. Results are expanded deterministically from a compact profile
    (indicator scale × sector weight per group) at call time.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from impactmap.core import Dataset, Indicator, IndicatorGroup, ResultMatrix, Sector

G = IndicatorGroup


def example_dataset() -> Dataset:
    """
    Return the minimal hand-checkable dataset.

    Default-mode magnitudes are sqrt(10²+5²+1²) ≈ 11.22 for sector 0 and
    sqrt(30²+5²+2²) ≈ 30.43 for sector 1.
    """
    indicators = [
        Indicator(0, "GHG", "Greenhouse Gases", "kg CO2 eq", G.IMPACT_POTENTIAL),
        Indicator(1, "ACID", "Acid Rain", "kg SO2 eq", G.IMPACT_POTENTIAL),
        Indicator(2, "WATR", "Water Use", "kg", G.RESOURCE_USE),
    ]
    sectors = [
        Sector(0, "Oilseed farming", code="1111A0"),
        Sector(1, "Cement manufacturing", code="327310"),
    ]
    matrix = ResultMatrix(
        [
            [10.0, 30.0],
            [5.0, 5.0],
            [1.0, 2.0],
        ]
    )
    return Dataset(indicators=indicators, sectors=sectors, matrix=matrix)


# (code, name, unit, group, typical scale per USD of output)
_DEMO_INDICATORS: Tuple[Tuple[str, str, str, IndicatorGroup, float], ...] = (
    ("ACID", "Acid Rain", "kg SO2 eq", G.IMPACT_POTENTIAL, 2.1e-3),
    ("ETOX", "Freshwater Ecotoxicity", "CTUe", G.IMPACT_POTENTIAL, 4.5e0),
    ("EUTR", "Eutrophication", "kg N eq", G.IMPACT_POTENTIAL, 1.2e-3),
    ("GHG", "Greenhouse Gases", "kg CO2 eq", G.IMPACT_POTENTIAL, 6.8e-1),
    ("HRSP", "Human Health - Respiratory Effects", "kg PM2.5 eq", G.IMPACT_POTENTIAL, 3.3e-4),
    ("HTOX", "Human Health Toxicity", "CTUh", G.IMPACT_POTENTIAL, 2.4e-8),
    ("OZON", "Ozone Depletion", "kg CFC-11 eq", G.IMPACT_POTENTIAL, 5.0e-8),
    ("SMOG", "Smog Formation", "kg O3 eq", G.IMPACT_POTENTIAL, 3.1e-2),
    ("ENRG", "Energy Use", "MJ", G.RESOURCE_USE, 7.7e0),
    ("LAND", "Land Use", "m2*yr", G.RESOURCE_USE, 1.9e0),
    ("MNRL", "Minerals and Metals Use", "kg", G.RESOURCE_USE, 1.4e-1),
    ("WATR", "Water Use", "kg", G.RESOURCE_USE, 5.2e1),
    ("METL", "Metals Release", "kg", G.CHEMICAL_RELEASES, 3.7e-6),
    ("PEST", "Pesticides Release", "kg", G.CHEMICAL_RELEASES, 1.1e-5),
    ("CMSW", "Commercial Municipal Solid Waste", "kg", G.WASTE_GENERATED, 2.6e-2),
    ("CRHW", "Commercial RCRA Hazardous Waste", "kg", G.WASTE_GENERATED, 1.5e-3),
    ("JOBS", "Jobs Supported", "p", G.ECONOMIC_SOCIAL, 6.0e-6),
    ("VADD", "Value Added", "$", G.ECONOMIC_SOCIAL, 5.5e-1),
)

# (name, code, weight per group in INDICATOR_GROUPS order)
_DEMO_SECTORS: Tuple[Tuple[str, str, Tuple[float, ...]], ...] = (
    ("Oilseed farming", "1111A0", (2.5, 4.0, 6.0, 0.8, 1.0)),
    ("Grain farming", "1111B0", (2.8, 4.5, 5.5, 0.9, 1.0)),
    ("Beef cattle ranches", "1121A0", (6.0, 5.5, 1.2, 1.1, 0.9)),
    ("Coal mining", "212100", (3.5, 2.0, 1.5, 2.2, 0.8)),
    ("Electric power generation", "221100", (7.5, 3.0, 2.5, 1.8, 0.7)),
    ("Cement manufacturing", "327310", (5.0, 2.5, 1.4, 1.6, 0.9)),
    ("Iron and steel mills", "331110", (4.0, 2.2, 3.0, 2.5, 0.9)),
    ("Petroleum refineries", "324110", (4.5, 2.8, 2.0, 2.0, 0.6)),
    ("Truck transportation", "484000", (2.0, 1.2, 0.5, 0.7, 1.3)),
    ("Hospitals", "622000", (0.6, 0.5, 0.3, 1.9, 1.8)),
    ("Software publishers", "511200", (0.2, 0.2, 0.1, 0.2, 1.6)),
    ("Écoles et services éducatifs", "611100", (0.3, 0.3, 0.1, 0.4, 2.0)),
)

_GROUP_ORDER: Tuple[IndicatorGroup, ...] = tuple(IndicatorGroup)


def demo_dataset() -> Dataset:
    """
    Return the demo dataset.

    The result of indicator i for sector s is scale(i) × weight(s, group(i)),
    modulated by a small deterministic per-cell factor so that indicators of
    the same group do not rank sectors identically.
    """
    indicators: List[Indicator] = []
    for idx, (code, name, unit, group, _) in enumerate(_DEMO_INDICATORS):
        indicators.append(Indicator(idx, code, name, unit, group))

    sectors: List[Sector] = []
    for idx, (name, code, _) in enumerate(_DEMO_SECTORS):
        sectors.append(Sector(idx, name, id=f"{code}/US", code=code, location="US"))

    group_pos: Dict[IndicatorGroup, int] = {g: k for k, g in enumerate(_GROUP_ORDER)}
    values = np.zeros((len(indicators), len(sectors)), dtype=np.float64)
    for i, (_, _, _, group, scale) in enumerate(_DEMO_INDICATORS):
        for s, (_, _, weights) in enumerate(_DEMO_SECTORS):
            modulation = 1.0 + 0.25 * np.sin(1.7 * i + 0.9 * s)
            values[i, s] = scale * weights[group_pos[group]] * modulation

    return Dataset(indicators=indicators, sectors=sectors, matrix=ResultMatrix(values))
