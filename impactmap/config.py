"""
Configuration of the heatmap widget.

In this module, a frozen configuration dataclass is provided as a stable,
typed surface for the inputs the wider widget hands to the engine: the
allow-list of indicator codes, the maximum row count and the opacity floor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from impactmap.selection import DEFAULT_INDICATORS

DEFAULT_SECTOR_COUNT = 10

_KEY_ALIASES = {
    "indicator_codes": "indicator_codes",
    "indicatorCodes": "indicator_codes",
    "indicators": "indicator_codes",
    "sector_count": "sector_count",
    "sectorCount": "sector_count",
    "alpha_floor": "alpha_floor",
    "alphaFloor": "alpha_floor",
}


@dataclass(frozen=True)
class HeatmapConfig:
    """
    Configuration for a heatmap.
    """

    indicator_codes: Tuple[str, ...] = DEFAULT_INDICATORS
    sector_count: int = DEFAULT_SECTOR_COUNT
    alpha_floor: float = 0.1

    def validate(self) -> None:
        """
        Configuration validation is performed.
        """
        if int(self.sector_count) < 0:
            raise ValueError("sector_count must be non-negative")
        if not (0.0 <= float(self.alpha_floor) <= 1.0):
            raise ValueError("alpha_floor must be between 0 and 1")
        if len(set(self.indicator_codes)) != len(self.indicator_codes):
            raise ValueError("indicator_codes contains duplicate codes")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HeatmapConfig":
        """
        Build a validated configuration from a plain mapping.

        Keys may be given in snake_case or camelCase. A missing or zero sector
        count falls back to the default.

        Raises:
            ValueError: If a key is not recognised or a value is invalid.
        """
        kwargs: dict = {}
        for key, value in data.items():
            if key not in _KEY_ALIASES:
                raise ValueError(f"Unknown configuration key: {key!r}")
            kwargs[_KEY_ALIASES[key]] = value

        if "indicator_codes" in kwargs:
            codes = kwargs["indicator_codes"]
            if isinstance(codes, str):
                raise ValueError("indicator_codes must be a list of codes")
            kwargs["indicator_codes"] = tuple(str(c) for c in codes)
        if not kwargs.get("sector_count"):
            kwargs["sector_count"] = DEFAULT_SECTOR_COUNT
        kwargs["sector_count"] = int(kwargs["sector_count"])
        if "alpha_floor" in kwargs:
            kwargs["alpha_floor"] = float(kwargs["alpha_floor"])

        config = cls(**kwargs)
        config.validate()
        return config
