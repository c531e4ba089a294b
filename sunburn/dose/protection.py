"""Sunscreen protection decay driven by sweating."""

from sunburn.models.profile import SweatProfile

NO_PROTECTION = 1.0


def effective_spf(base_spf: float, sweat: SweatProfile, hours_elapsed: float) -> float:
    """Effective SPF ``hours_elapsed`` hours after application.

    Decay starts after ``sweat.start_hours`` and falls linearly to 1 over
    ``sweat.duration_hours``. A profile with no decay span, or no sunscreen,
    keeps the base value.
    """
    base_spf = max(base_spf, NO_PROTECTION)
    if base_spf == NO_PROTECTION or sweat.duration_hours <= 0:
        return base_spf
    if hours_elapsed <= sweat.start_hours:
        return base_spf
    if hours_elapsed >= sweat.start_hours + sweat.duration_hours:
        return NO_PROTECTION
    progress = (hours_elapsed - sweat.start_hours) / sweat.duration_hours
    return max(NO_PROTECTION, base_spf - (base_spf - NO_PROTECTION) * progress)
