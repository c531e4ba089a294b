"""Guidance strings derived from the final damage level and sunscreen choice."""

from sunburn.models.calculation import CalculationPoint
from sunburn.models.profile import SPFLevel

REAPPLY = "Reapply sunscreen every 2 hours, after swimming, or excessive sweating"
ALL_CLEAR = "With these precautions you can spend the rest of the day out in the sun, enjoy!"
TRY_SUNSCREEN = "You should try again with sunscreen"
LIMIT_TIME = "Limit your time in the sun today"
STRONGER_SUNSCREEN = "Try using a stronger sunscreen or limit your time in the sun today"


def generate_advice(
    spf_level: SPFLevel,
    points: list[CalculationPoint],
    safety_threshold: float,
) -> list[str]:
    advice: list[str] = []
    wearing_sunscreen = spf_level != SPFLevel.NONE

    if wearing_sunscreen:
        advice.append(REAPPLY)

    if not points:
        return advice

    final_damage = points[-1].cumulative_damage_after
    if final_damage < safety_threshold:
        if wearing_sunscreen:
            advice.append(ALL_CLEAR)
    elif not wearing_sunscreen:
        advice.append(TRY_SUNSCREEN)
    elif spf_level == SPFLevel.SPF_50_PLUS:
        advice.append(LIMIT_TIME)
    else:
        advice.append(STRONGER_SUNSCREEN)

    return advice
