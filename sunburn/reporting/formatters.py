"""Output formatters for calculation results."""

import json
from datetime import datetime

from sunburn.models.calculation import CalculationInput, CalculationResult
from sunburn.models.common import local_time


def _clock(instant: datetime, zone: str) -> str:
    return local_time(instant, zone).strftime("%H:%M")


def _burn_line(result: CalculationResult, calc_input: CalculationInput) -> str:
    minutes = result.minutes_until_burn(calc_input.current_time)
    if minutes is None:
        return f"No burn expected (damage reaches {result.final_damage:.1f}%)"
    return (
        f"Burn at {_clock(result.burn_time, calc_input.timezone)} "
        f"({minutes:.0f} min from now)"
    )


def format_result_text(result: CalculationResult, calc_input: CalculationInput) -> str:
    """Plain text summary for terminals and logs."""
    where = f" | {calc_input.place_name}" if calc_input.place_name else ""
    lines = [
        f"=== Sunburn Estimate{where} ===",
        f"Skin {calc_input.skin_type} | {calc_input.spf_level} | "
        f"sweat {calc_input.sweat_level}",
        _burn_line(result, calc_input),
        f"Resolution: {60 / result.resolution_used:g} min slices, "
        f"{len(result.points)} points",
    ]
    for p in result.points:
        lines.append(
            f"  {_clock(p.timestamp, calc_input.timezone)}  UV {p.uv_index:4.1f}  "
            f"+{p.damage_added_percent:5.1f}%  = {p.cumulative_damage_after:5.1f}%"
        )
    for a in result.advice:
        lines.append(f"* {a}")
    return "\n".join(lines)


def format_result_json(result: CalculationResult, calc_input: CalculationInput) -> str:
    """JSON document for programmatic consumption."""
    data = {
        "skin_type": str(calc_input.skin_type),
        "spf_level": str(calc_input.spf_level),
        "sweat_level": str(calc_input.sweat_level),
        "timezone": calc_input.timezone,
        "current_time": calc_input.current_time.isoformat(),
        "start_time": result.start_time.isoformat() if result.start_time else None,
        "burn_time": result.burn_time.isoformat() if result.burn_time else None,
        "minutes_until_burn": result.minutes_until_burn(calc_input.current_time),
        "final_damage": result.final_damage,
        "resolution_used": result.resolution_used,
        "truncated": result.truncated,
        "points": [
            {
                "timestamp": p.timestamp.isoformat(),
                "uv_index": p.uv_index,
                "damage_added_percent": p.damage_added_percent,
                "cumulative_damage_before": p.cumulative_damage_before,
            }
            for p in result.points
        ],
        "advice": result.advice,
    }
    return json.dumps(data, indent=2)


def format_result_chat(result: CalculationResult, calc_input: CalculationInput) -> str:
    """Chat-friendly markdown summary."""
    lines = [
        f"**Sunburn Estimate** (skin {calc_input.skin_type}, {calc_input.spf_level})",
        f"- {_burn_line(result, calc_input)}",
    ]
    for a in result.advice:
        lines.append(f"- {a}")
    return "\n".join(lines)
