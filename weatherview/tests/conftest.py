"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from weatherview.config.defaults import DEFAULT_LOCATIONS
from weatherview.config.schema import AppConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# 2024-01-15 12:00 UTC, the first sample in forecast_los_angeles.json
FIRST_SAMPLE_UTC = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
LA_OFFSET = -28800


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "forecast_los_angeles.json") as f:
        return json.load(f)


@pytest.fixture
def geocoding_payload() -> list[dict]:
    with open(FIXTURE_DIR / "geocoding_los_angeles.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"api_key": "yaml-key", "base_url": "https://test-owm.example.com/data/2.5",
                "geo_base_url": "https://test-owm.example.com/geo/1.0"},
        "forecast": {"horizon_policy": "rest-of-day", "horizon_hours": 6},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
