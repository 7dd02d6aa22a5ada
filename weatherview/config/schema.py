"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class HorizonPolicy(StrEnum):
    NEXT_HOURS = "next-hours"
    REST_OF_DAY = "rest-of-day"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = Field(min_length=1)
    region_code: str = Field(min_length=1)
    enabled: bool = True


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""  # falls back to OPENWEATHER_API_KEY
    base_url: str = "https://api.openweathermap.org/data/2.5"
    geo_base_url: str = "https://api.openweathermap.org/geo/1.0"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    geocode_limit: int = Field(default=5, ge=1, le=5)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    horizon_policy: HorizonPolicy = HorizonPolicy.NEXT_HOURS
    horizon_hours: int = Field(default=12, ge=1, le=120)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # None keeps the cache unbounded; set for LRU eviction
    max_entries: int | None = Field(default=None, ge=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    forecast: ForecastConfig = ForecastConfig()
    cache: CacheConfig = CacheConfig()
    locations: list[LocationConfig] = []
