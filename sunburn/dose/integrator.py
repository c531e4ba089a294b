"""Single-resolution dose integrator.

Walks the sliced forecast from ``current_time`` forward, accumulating
erythemal damage until the burn threshold is crossed or a stopping rule
fires.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from sunburn.config.defaults import SKIN_TYPES, SPF_LEVELS, SWEAT_LEVELS
from sunburn.config.schema import SunburnConfig
from sunburn.dose.advice import generate_advice
from sunburn.dose.damage import (
    effective_irradiance,
    med_for_coefficient,
    slice_damage_percent,
)
from sunburn.dose.protection import effective_spf
from sunburn.dose.slicer import iter_slices
from sunburn.models.calculation import (
    CalculationInput,
    CalculationPoint,
    CalculationResult,
)
from sunburn.models.common import local_hour as zone_local_hour

logger = logging.getLogger(__name__)

LocalHourFn = Callable[[datetime, str], int]


def integrate(
    calc_input: CalculationInput,
    slices_per_hour: int,
    config: SunburnConfig,
    local_hour: LocalHourFn = zone_local_hour,
) -> CalculationResult:
    """Integrate damage over the forecast at one resolution.

    Args:
        calc_input: Forecast, user profile and the instant anchoring "now".
        slices_per_hour: Resolution of the time slicing.
        config: Dose calibration and stopping rules.
        local_hour: Maps (instant, zone id) to the local hour of day.

    Returns:
        CalculationResult with at most ``config.calculation.max_points`` points.
    """
    dose = config.dose
    calc = config.calculation
    threshold = dose.damage_threshold

    med = med_for_coefficient(SKIN_TYPES[calc_input.skin_type].coefficient, dose)
    base_spf = SPF_LEVELS[calc_input.spf_level].coefficient
    sweat = SWEAT_LEVELS[calc_input.sweat_level]
    now = calc_input.current_time

    points: list[CalculationPoint] = []
    total_damage = 0.0
    point_count = 0
    burn_time: datetime | None = None
    truncated = False

    for w in iter_slices(calc_input.forecast, slices_per_hour):
        if w.end <= now:
            continue
        if point_count >= calc.max_points:
            # windows remain beyond the cap
            truncated = True
            logger.debug(
                "Point cap %d reached at %d/h (%.1f%%)",
                calc.max_points, slices_per_hour, total_damage,
            )
            break

        eff_start_time = max(w.start, now)
        minutes = (w.end - eff_start_time).total_seconds() / 60
        if minutes <= 0:
            continue

        span = w.end - w.start
        a = (eff_start_time - w.start) / span if span else 0.0
        uvi_start = w.uvi_start * (1 - a) + w.uvi_end * a
        uvi_end = w.uvi_end

        spf_start = effective_spf(
            base_spf, sweat, (eff_start_time - now).total_seconds() / 3600
        )
        spf_end = effective_spf(base_spf, sweat, (w.end - now).total_seconds() / 3600)

        damage = slice_damage_percent(
            effective_irradiance(uvi_start, spf_start, dose),
            effective_irradiance(uvi_end, spf_end, dose),
            minutes,
            med,
            dose.damage_rate_per_minute,
        )

        if burn_time is None and total_damage + damage >= threshold:
            rate_per_min = damage / minutes
            minutes_needed = (threshold - total_damage) / rate_per_min
            damage = threshold - total_damage
            burn_time = eff_start_time + timedelta(minutes=minutes_needed)

        points.append(
            CalculationPoint(
                timestamp=eff_start_time,
                uv_index=0.5 * (uvi_start + uvi_end),
                damage_added_percent=damage,
                cumulative_damage_before=total_damage,
            )
        )
        total_damage += damage
        point_count += 1

        if burn_time is not None:
            logger.debug(
                "Threshold crossed at %s after %d points (%d/h)",
                burn_time.isoformat(), point_count, slices_per_hour,
            )
            break
        if (
            point_count > calc.min_points_for_evening_stop
            and local_hour(eff_start_time, calc_input.timezone) >= calc.evening_cutoff_hour
        ):
            logger.debug(
                "Evening cutoff reached at %s (%d points, %.1f%%)",
                eff_start_time.isoformat(), point_count, total_damage,
            )
            break

    return CalculationResult(
        start_time=points[0].timestamp if points else None,
        burn_time=burn_time,
        points=points,
        resolution_used=slices_per_hour,
        advice=generate_advice(calc_input.spf_level, points, dose.safety_threshold),
        truncated=truncated,
    )
