"""CLI entry point for the sunburn time estimator."""

import argparse
import logging

import yaml

from sunburn.config.defaults import SKIN_TYPES, SPF_LEVELS, SWEAT_LEVELS
from sunburn.config.loader import (
    config_hash,
    get_config_value,
    load_config,
    set_config_value,
)
from sunburn.config.schema import SunburnConfig
from sunburn.dose.damage import med_for_coefficient
from sunburn.dose.resolution import find_optimal_resolution
from sunburn.ingest.forecast_loader import ForecastParseError, load_forecast
from sunburn.models.calculation import CalculationInput
from sunburn.models.common import get_zone, parse_timestamp, utc_now
from sunburn.models.profile import SkinType, SPFLevel, SweatLevel
from sunburn.reporting.formatters import (
    format_result_chat,
    format_result_json,
    format_result_text,
)

DEFAULT_CONFIG = "sunburn.yaml"

FORMATTERS = {
    "text": format_result_text,
    "json": format_result_json,
    "chat": format_result_chat,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sunburn",
        description="Estimate time until sunburn from an hourly UV forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # estimate
    est_p = sub.add_parser("estimate", help="Estimate burn time for a forecast")
    est_p.add_argument("--forecast", required=True, help="Forecast JSON/YAML path")
    est_p.add_argument("--skin-type", choices=[s.value for s in SkinType])
    est_p.add_argument("--spf", choices=[s.value for s in SPFLevel])
    est_p.add_argument("--sweat", choices=[s.value for s in SweatLevel])
    est_p.add_argument("--now", help="ISO timestamp anchoring the estimate")
    est_p.add_argument("--timezone", help="IANA zone for local times")
    est_p.add_argument("--place", default="", help="Place name for the report")
    est_p.add_argument(
        "--format", choices=sorted(FORMATTERS), default="text", help="Output format"
    )

    # profiles
    sub.add_parser("profiles", help="List skin, sunscreen and sweat profiles")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    if args.command == "estimate":
        return _cmd_estimate(config, args)
    elif args.command == "profiles":
        return _cmd_profiles(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_estimate(config: SunburnConfig, args) -> int:
    profile = config.profile
    try:
        forecast = load_forecast(args.forecast)
        now = parse_timestamp(args.now) if args.now else utc_now()
        zone = args.timezone or (
            forecast.timezone if forecast.timezone != "UTC" else profile.timezone
        )
        get_zone(zone)
    except (OSError, ForecastParseError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    calc_input = CalculationInput(
        forecast=forecast.points,
        current_time=now,
        skin_type=SkinType(args.skin_type) if args.skin_type else profile.skin_type,
        spf_level=SPFLevel(args.spf) if args.spf else profile.spf_level,
        sweat_level=SweatLevel(args.sweat) if args.sweat else profile.sweat_level,
        timezone=zone,
        place_name=args.place,
    )
    if len(calc_input.forecast) < 2:
        print("Error: forecast needs at least 2 hourly points")
        return 1

    result = find_optimal_resolution(calc_input, config)
    print(FORMATTERS[args.format](result, calc_input))
    return 0


def _cmd_profiles(config: SunburnConfig) -> int:
    print("Skin types:")
    for skin, p in SKIN_TYPES.items():
        med = med_for_coefficient(p.coefficient, config.dose)
        print(f"  {skin:<4} {p.subtitle:<11} MED {med:6.0f} J/m^2  {p.description}")
    print("Sunscreen:")
    for spf, p in SPF_LEVELS.items():
        print(f"  {spf:<12} {p.label:<8} x{p.coefficient:g}")
    print("Sweat:")
    for sweat, p in SWEAT_LEVELS.items():
        if p.duration_hours <= 0:
            print(f"  {sweat:<7} {p.label:<8} no decay")
        else:
            print(
                f"  {sweat:<7} {p.label:<8} decay from {p.start_hours:g}h "
                f"over {p.duration_hours:g}h"
            )
    return 0


def _cmd_config(config: SunburnConfig, args) -> int:
    if args.config_command == "show":
        print(f"# hash {config_hash(config)}")
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
