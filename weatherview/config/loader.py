"""YAML config loader and credential resolution."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherview.config.defaults import DEFAULT_LOCATIONS
from weatherview.config.schema import AppConfig
from weatherview.errors import MissingApiKeyError

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path) -> AppConfig:
    """Load and validate config from a YAML file.

    If no locations are specified in the YAML, injects DEFAULT_LOCATIONS.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    return AppConfig(**raw)


def resolve_api_key(
    config: AppConfig, environ: Mapping[str, str] | None = None
) -> str:
    """Return the configured API key, preferring the config file over the env.

    Raises MissingApiKeyError when neither is set.
    """
    if environ is None:
        environ = os.environ
    key = config.api.api_key or environ.get(API_KEY_ENV, "")
    if not key.strip():
        raise MissingApiKeyError(
            f"OpenWeatherMap API key is required. Set {API_KEY_ENV} "
            "or api.api_key in the config file."
        )
    return key.strip()


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.horizon_hours'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
