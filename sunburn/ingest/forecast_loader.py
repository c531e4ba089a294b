"""Forecast loader: turns stored hourly UV payloads into forecast models.

Accepts the Open-Meteo hourly layout::

    {"timezone": "Europe/Lisbon", "utc_offset_seconds": 3600,
     "hourly": {"time": ["2026-06-15T09:00", ...], "uv_index": [4.1, ...]}}

or a plain list of ``{"timestamp": ..., "uv_index": ...}`` records.
"""

import json
import logging
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from pathlib import Path
from typing import Any

import yaml

from sunburn.models.common import get_zone, parse_timestamp
from sunburn.models.forecast import Forecast, HourlyForecastPoint

logger = logging.getLogger(__name__)


class ForecastParseError(ValueError):
    pass


def load_forecast(path: str | Path) -> Forecast:
    """Read a JSON or YAML forecast file."""
    path = Path(path)
    with open(path) as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ForecastParseError(f"Invalid YAML in {path}: {e}") from e
        else:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ForecastParseError(f"Invalid JSON in {path}: {e}") from e
    forecast = parse_forecast(raw)
    logger.info("Loaded %d hourly points from %s", len(forecast.points), path)
    return forecast


def parse_forecast(raw: Any) -> Forecast:
    if isinstance(raw, list):
        return _parse_records(raw, "UTC")
    if not isinstance(raw, dict):
        raise ForecastParseError("Forecast payload must be a mapping or a list")

    zone = raw.get("timezone") or "UTC"
    if "hourly" in raw:
        return _parse_open_meteo(raw, zone)
    if "points" in raw:
        return _parse_records(raw["points"], zone)
    raise ForecastParseError("Forecast payload has no 'hourly' or 'points' section")


def _parse_open_meteo(raw: dict, zone: str) -> Forecast:
    hourly = raw["hourly"] or {}
    if not isinstance(hourly, dict):
        raise ForecastParseError("hourly section must be a mapping")
    times = hourly.get("time")
    uvs = hourly.get("uv_index")
    if times is None or uvs is None:
        raise ForecastParseError("Open-Meteo payload missing hourly.time or hourly.uv_index")
    if len(times) != len(uvs):
        raise ForecastParseError(
            f"hourly.time has {len(times)} entries but hourly.uv_index has {len(uvs)}"
        )

    # Naive local times; fixed offset only when the zone id is unknown
    offset = timedelta(seconds=int(raw.get("utc_offset_seconds") or 0))
    try:
        tz: tzinfo = get_zone(zone)
    except ValueError:
        tz = timezone(offset)
    points = []
    for t, uv in zip(times, uvs):
        points.append(
            HourlyForecastPoint(
                timestamp=_to_utc(t, tz),
                uv_index=_to_uv(uv),
            )
        )
    return _build(points, zone)


def _parse_records(records: list, zone: str) -> Forecast:
    points = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict) or "timestamp" not in rec:
            raise ForecastParseError(f"Record {i} has no timestamp")
        points.append(
            HourlyForecastPoint(
                timestamp=_to_utc(rec["timestamp"], UTC),
                uv_index=_to_uv(rec.get("uv_index")),
            )
        )
    return _build(points, zone)


def _build(points: list[HourlyForecastPoint], zone: str) -> Forecast:
    points.sort(key=lambda p: p.timestamp)
    return Forecast(points=tuple(points), timezone=zone)


def _to_utc(value: Any, tz: tzinfo) -> datetime:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise ForecastParseError(f"Bad timestamp: {value!r}") from e
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=tz).astimezone(UTC)
        return value.astimezone(UTC)
    try:
        return parse_timestamp(value)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise ForecastParseError(f"Bad timestamp: {value!r}") from e


def _to_uv(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        uv = float(value)
    except (TypeError, ValueError) as e:
        raise ForecastParseError(f"Bad UV index: {value!r}") from e
    if uv != uv or uv < 0:  # NaN or negative
        return 0.0
    return uv
