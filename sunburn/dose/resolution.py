"""Pick the time resolution that keeps output bounded and covers the horizon."""

import logging

from sunburn.config.schema import SunburnConfig
from sunburn.dose.integrator import LocalHourFn, integrate
from sunburn.models.calculation import CalculationInput, CalculationResult
from sunburn.models.common import local_hour as zone_local_hour

logger = logging.getLogger(__name__)


def find_optimal_resolution(
    calc_input: CalculationInput,
    config: SunburnConfig | None = None,
    local_hour: LocalHourFn = zone_local_hour,
) -> CalculationResult:
    """Run the integrator at each candidate resolution and choose one result.

    Preference order: the coarsest run that stayed under the point cap and
    found a burn time, then the coarsest run that stayed under the cap, then
    the coarsest run overall.
    """
    if config is None:
        config = SunburnConfig()

    # slice_options is validated ascending: coarsest first
    results: list[CalculationResult] = []
    for slices_per_hour in config.calculation.slice_options:
        result = integrate(calc_input, slices_per_hour, config, local_hour)
        logger.debug(
            "Resolution %d/h: %d points, burn=%s, truncated=%s",
            slices_per_hour, len(result.points),
            result.burn_time is not None, result.truncated,
        )
        results.append(result)

    within_cap = [r for r in results if not r.truncated]
    with_burn = [r for r in within_cap if r.burn_time is not None]

    if with_burn:
        chosen = with_burn[0]
    elif within_cap:
        chosen = within_cap[0]
    else:
        chosen = results[0]

    logger.info(
        "Selected %d slices/h (%d points, burn %s)",
        chosen.resolution_used, len(chosen.points),
        chosen.burn_time.isoformat() if chosen.burn_time else "none",
    )
    return chosen
