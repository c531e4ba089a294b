"""Dose calculation inputs, intermediate windows and results."""

from dataclasses import dataclass, field
from datetime import datetime

from sunburn.models.forecast import HourlyForecastPoint
from sunburn.models.profile import SkinType, SPFLevel, SweatLevel


@dataclass(frozen=True)
class CalculationInput:
    forecast: tuple[HourlyForecastPoint, ...]
    current_time: datetime
    skin_type: SkinType
    spf_level: SPFLevel = SPFLevel.NONE
    sweat_level: SweatLevel = SweatLevel.LOW
    timezone: str = "UTC"
    place_name: str = ""


@dataclass(frozen=True)
class SliceWindow:
    start: datetime
    end: datetime
    uvi_start: float
    uvi_end: float


@dataclass(frozen=True)
class CalculationPoint:
    timestamp: datetime
    uv_index: float  # midpoint UV of the clipped window
    damage_added_percent: float
    cumulative_damage_before: float

    @property
    def cumulative_damage_after(self) -> float:
        return self.cumulative_damage_before + self.damage_added_percent


@dataclass(frozen=True)
class CalculationResult:
    start_time: datetime | None
    burn_time: datetime | None
    points: list[CalculationPoint]
    resolution_used: int  # slices per hour
    advice: list[str] = field(default_factory=list)
    truncated: bool = False  # stopped by the point cap

    @property
    def final_damage(self) -> float:
        if not self.points:
            return 0.0
        return self.points[-1].cumulative_damage_after

    def minutes_until_burn(self, since: datetime) -> float | None:
        if self.burn_time is None:
            return None
        return (self.burn_time - since).total_seconds() / 60
