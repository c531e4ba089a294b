"""Hourly UV forecast models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HourlyForecastPoint:
    timestamp: datetime  # tz-aware
    uv_index: float


@dataclass(frozen=True)
class Forecast:
    points: tuple[HourlyForecastPoint, ...] = field(default_factory=tuple)
    timezone: str = "UTC"
