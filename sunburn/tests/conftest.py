"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from sunburn.config.schema import SunburnConfig
from sunburn.models.calculation import CalculationInput
from sunburn.models.forecast import HourlyForecastPoint
from sunburn.models.profile import SkinType, SPFLevel, SweatLevel

START = datetime(2026, 6, 15, 9, 0, 0, tzinfo=UTC)


def _hourly(uv_values: list[float], start: datetime = START) -> tuple[HourlyForecastPoint, ...]:
    return tuple(
        HourlyForecastPoint(timestamp=start + timedelta(hours=i), uv_index=uv)
        for i, uv in enumerate(uv_values)
    )


@pytest.fixture
def start() -> datetime:
    return START


@pytest.fixture
def default_config() -> SunburnConfig:
    return SunburnConfig()


@pytest.fixture
def make_input() -> Callable[..., CalculationInput]:
    """Factory for CalculationInput anchored at START unless told otherwise."""

    def _make(
        uv_values: list[float],
        skin_type: SkinType = SkinType.II,
        spf_level: SPFLevel = SPFLevel.NONE,
        sweat_level: SweatLevel = SweatLevel.LOW,
        current_time: datetime = START,
        start: datetime = START,
        timezone: str = "UTC",
    ) -> CalculationInput:
        return CalculationInput(
            forecast=_hourly(uv_values, start),
            current_time=current_time,
            skin_type=skin_type,
            spf_level=spf_level,
            sweat_level=sweat_level,
            timezone=timezone,
        )

    return _make


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "dose": {"damage_rate_per_minute": 150.0},
        "calculation": {"max_points": 26},
        "profile": {"skin_type": "III", "spf_level": "SPF_30"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def open_meteo_path(tmp_path: Path) -> Path:
    """Write an Open-Meteo style forecast (UTC, UV 8 for five hours)."""
    data = {
        "timezone": "UTC",
        "utc_offset_seconds": 0,
        "hourly": {
            "time": [f"2026-06-15T{h:02d}:00" for h in range(9, 14)],
            "uv_index": [8.0] * 5,
        },
    }
    path = tmp_path / "forecast.json"
    path.write_text(json.dumps(data))
    return path
