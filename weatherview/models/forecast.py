"""Forecast data models: locations, canonical samples, and derived views."""

from dataclasses import dataclass, field
from datetime import date, datetime

from weatherview.models.common import LocationKey


@dataclass(frozen=True)
class Location:
    name: str
    region_code: str

    @property
    def key(self) -> LocationKey:
        """Cache identity: name and region joined verbatim."""
        return f"{self.name},{self.region_code}"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class GeocodingCandidate:
    name: str
    latitude: float
    longitude: float
    region_code: str
    state: str | None = None
    local_names: dict[str, str] = field(default_factory=dict)

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


@dataclass(frozen=True)
class Condition:
    category: str  # e.g. "Clear", "Clouds", "Rain"
    description: str
    icon_id: str


@dataclass(frozen=True)
class ForecastSample:
    instant: datetime  # aware, location-local offset
    temperature: int
    feels_like: int
    humidity: int
    pressure: int
    wind_speed: float
    wind_direction: int
    visibility: int
    precipitation_probability: int
    condition: Condition


@dataclass(frozen=True)
class RawForecast:
    samples: list[dict]
    timezone_offset: int  # seconds east of UTC
    city_name: str = ""


@dataclass(frozen=True)
class DailySummary:
    date: date
    temperature_min: int
    temperature_max: int
    humidity: int
    pressure: int
    wind_speed: float
    precipitation_probability: int
    condition: Condition
    samples: list[ForecastSample]

    @property
    def day_name(self) -> str:
        return self.date.strftime("%A")


@dataclass(frozen=True)
class CombinedForecast:
    location: Location
    hourly: list[ForecastSample]
    daily: list[DailySummary]
    timezone_offset: int
    fetched_at: datetime
