"""Erythemal damage model: effective irradiance to percent of burn budget.

UVI = 40 * E_ery (W/m^2), so the erythemal dose per minute is 1.5 * UVI J/m^2.
As a percentage of the minimal erythemal dose (MED) that is 150 * UVI / MED
per minute, the default ``damage_rate_per_minute``.
"""

from sunburn.config.schema import DoseConfig

MIN_SPF = 1.0
MIN_MED = 1e-6


def low_uv_weight(uvi: float, low: float = 1.0, high: float = 3.0) -> float:
    """Cubic smoothstep weight: 0 at or below ``low``, 1 at or above ``high``."""
    if uvi <= low:
        return 0.0
    if uvi >= high:
        return 1.0
    t = (uvi - low) / (high - low)
    return t * t * (3.0 - 2.0 * t)


def effective_irradiance(uvi: float, spf: float, config: DoseConfig) -> float:
    """UV reaching the skin: UVI divided by SPF, down-weighted at low UV."""
    uvi = max(0.0, uvi)
    eff = uvi / max(spf, MIN_SPF)
    if config.low_uv_ramp_enabled:
        eff *= low_uv_weight(uvi, config.low_uv_ramp_low, config.low_uv_ramp_high)
    return eff


def med_for_coefficient(coefficient: float, config: DoseConfig) -> float:
    """Minimal erythemal dose in J/m^2 for a skin type coefficient."""
    return max(config.med_per_coefficient * coefficient, MIN_MED)


def slice_damage_percent(
    eff_start: float,
    eff_end: float,
    minutes: float,
    med: float,
    damage_rate: float,
) -> float:
    """Percent of the burn budget consumed over one slice.

    Args:
        eff_start: Effective irradiance at the slice start.
        eff_end: Effective irradiance at the slice end.
        minutes: Slice duration in minutes.
        med: Skin type dose threshold in J/m^2.
        damage_rate: Calibrated damage rate per minute per unit UVI.

    Returns:
        Damage percent, never negative.
    """
    if minutes <= 0:
        return 0.0
    eff_avg = 0.5 * (max(0.0, eff_start) + max(0.0, eff_end))
    return damage_rate * eff_avg * minutes / max(med, MIN_MED)
