"""CLI entry point for the forecast pipeline."""

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from weatherview.config.defaults import DEFAULT_LOCATIONS
from weatherview.config.loader import get_config_value, load_config, resolve_api_key
from weatherview.config.schema import AppConfig, ForecastConfig, HorizonPolicy
from weatherview.errors import MissingApiKeyError
from weatherview.models.forecast import Location
from weatherview.pipeline.forecast_pipeline import ForecastPipeline, ForecastState
from weatherview.reporting.formatters import format_forecast_json, format_forecast_text

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherview",
        description="Hourly and daily forecasts from OpenWeatherMap",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Show forecast for a location")
    fc_p.add_argument("name", nargs="?", help="Place name, e.g. 'Los Angeles'")
    fc_p.add_argument("region", nargs="?", help="Region code, e.g. US")
    fc_p.add_argument(
        "--all", action="store_true", help="All configured locations"
    )
    fc_p.add_argument("--json", action="store_true", help="JSON output")
    fc_p.add_argument(
        "--policy",
        choices=[p.value for p in HorizonPolicy],
        help="Hourly window policy",
    )
    fc_p.add_argument("--hours", type=int, help="Hourly window length")

    # locations
    sub.add_parser("locations", help="List configured locations")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. forecast.horizon_hours")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "locations":
        return _cmd_locations(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _load(path: str) -> AppConfig:
    if Path(path).exists():
        return load_config(path)
    return AppConfig(locations=DEFAULT_LOCATIONS)


def _cmd_forecast(config: AppConfig, args) -> int:
    overrides = {}
    if args.policy:
        overrides["horizon_policy"] = args.policy
    if args.hours is not None:
        overrides["horizon_hours"] = args.hours
    if overrides:
        try:
            forecast = ForecastConfig.model_validate(
                {**config.forecast.model_dump(), **overrides}
            )
        except ValidationError as e:
            print(f"Error: {e}")
            return 1
        config = config.model_copy(update={"forecast": forecast})

    if args.all:
        locations = [
            Location(loc.name, loc.region_code)
            for loc in config.locations
            if loc.enabled
        ]
    elif args.name:
        locations = [Location(args.name, args.region or "")]
    else:
        print("Error: give NAME REGION or --all")
        return 1

    try:
        api_key = resolve_api_key(config)
    except MissingApiKeyError as e:
        print(f"Error: {e}")
        return 2

    pipeline = ForecastPipeline.from_config(config, api_key)
    states = pipeline.fetch_many(locations)

    failed = 0
    for location, state in zip(locations, states):
        failed += not _print_state(location, state, args.json)
    return 0 if not failed else 1


def _print_state(location: Location, state: ForecastState, as_json: bool) -> bool:
    if state.ok:
        assert state.data is not None
        if as_json:
            print(format_forecast_json(state.data))
        else:
            print(format_forecast_text(state.data))
        return True

    assert state.error is not None
    if as_json:
        print(json.dumps({"error": state.error.to_dict()}))
    else:
        code = f" (HTTP {state.error.code})" if state.error.code else ""
        print(f"Error for {location.name}, {location.region_code}: {state.error.message}{code}")
    return False


def _cmd_locations(config: AppConfig) -> int:
    for loc in config.locations:
        flag = "" if loc.enabled else " (disabled)"
        print(f"{loc.name}, {loc.region_code}{flag}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        # never echo the credential
        print(config.model_dump_json(indent=2, exclude={"api": {"api_key"}}))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, AttributeError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(value)
        return 0
    else:
        print("Use: config show | config get key")
        return 1
