"""
Engine configuration.

Defaults reproduce the permissive behavior: 1000-step resampling, zero rate
outside the node span, no validation of curve definitions. `from_env` lets a
deployment override them without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

DEFAULT_RESOLUTION = 1000


class Extrapolation(str, Enum):
    """What `interpolate_at` returns for a query outside the node span."""

    ZERO = "zero"
    NEAREST_SLOPE = "nearest_slope"


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EngineConfig:
    resolution: int = DEFAULT_RESOLUTION
    extrapolation: Extrapolation = Extrapolation.ZERO
    strict: bool = False

    def __post_init__(self) -> None:
        if self.resolution < 1:
            raise ValueError("resolution must be >= 1")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build config from RATECURVES_* environment variables."""
        resolution = int(os.environ.get("RATECURVES_RESOLUTION", DEFAULT_RESOLUTION))
        extrapolation = Extrapolation(
            os.environ.get("RATECURVES_EXTRAPOLATION", Extrapolation.ZERO.value)
        )
        strict = _env_flag(os.environ.get("RATECURVES_STRICT", "false"))
        return cls(resolution=resolution, extrapolation=extrapolation, strict=strict)
