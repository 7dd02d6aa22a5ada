"""Tests for config loading, credential resolution, and dotted lookup."""

from pathlib import Path

import pytest
import yaml

from weatherview.config.defaults import DEFAULT_LOCATIONS
from weatherview.config.loader import (
    API_KEY_ENV,
    get_config_value,
    load_config,
    resolve_api_key,
)
from weatherview.config.schema import AppConfig, ApiConfig, HorizonPolicy
from weatherview.errors import MissingApiKeyError


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.forecast.horizon_policy == HorizonPolicy.REST_OF_DAY
        assert config.forecast.horizon_hours == 6

    def test_default_locations_injected(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert len(config.locations) == len(DEFAULT_LOCATIONS)
        assert config.locations[0].name == "Rio de Janeiro"

    def test_explicit_locations_not_overridden(self, tmp_path: Path):
        data = {"locations": [{"name": "Oslo", "region_code": "NO"}]}
        path = tmp_path / "custom.yaml"
        with open(path, "w") as f:
            yaml.dump(data, f)
        config = load_config(path)
        assert len(config.locations) == 1
        assert config.locations[0].region_code == "NO"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.forecast.horizon_policy == HorizonPolicy.NEXT_HOURS
        assert len(config.locations) == len(DEFAULT_LOCATIONS)

    def test_shipped_default_config(self):
        path = Path(__file__).parents[3] / "configs" / "default.yaml"
        config = load_config(path)
        assert [loc.region_code for loc in config.locations] == ["BR", "CN", "US"]


class TestResolveApiKey:
    def test_from_env(self):
        assert resolve_api_key(AppConfig(), {API_KEY_ENV: "env-key"}) == "env-key"

    def test_config_wins_over_env(self):
        config = AppConfig(api=ApiConfig(api_key="file-key"))
        assert resolve_api_key(config, {API_KEY_ENV: "env-key"}) == "file-key"

    def test_missing_is_fatal(self):
        with pytest.raises(MissingApiKeyError, match=API_KEY_ENV):
            resolve_api_key(AppConfig(), {})

    def test_blank_is_fatal(self):
        with pytest.raises(MissingApiKeyError):
            resolve_api_key(AppConfig(), {API_KEY_ENV: "   "})


class TestGetConfigValue:
    def test_dotted_key(self, default_config: AppConfig):
        assert get_config_value(default_config, "forecast.horizon_hours") == 12

    def test_list_index(self, default_config: AppConfig):
        assert get_config_value(default_config, "locations.1.name") == "Beijing"

    def test_invalid_key(self, default_config: AppConfig):
        with pytest.raises((KeyError, AttributeError)):
            get_config_value(default_config, "nonexistent.key")
