"""Forecast pipeline: resolve, fetch, transform, and cache per location."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime

from weatherview.cache.forecast_cache import ForecastCache
from weatherview.config.schema import AppConfig, HorizonPolicy
from weatherview.errors import FailureEnvelope, ForecastError, UnknownError, ValidationFailedError
from weatherview.ingest.forecast_fetcher import fetch_raw_forecast
from weatherview.ingest.location_resolver import resolve_location
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.models.common import utc_now
from weatherview.models.forecast import CombinedForecast, Location
from weatherview.transform.daily import aggregate_daily
from weatherview.transform.horizon import DEFAULT_HORIZON_HOURS, select_horizon
from weatherview.transform.interpolation import interpolate_hourly
from weatherview.transform.normalizer import normalize_samples

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastState:
    """Outcome of one fetch: data or a failure envelope, never both."""

    data: CombinedForecast | None = None
    error: FailureEnvelope | None = None
    last_updated: datetime | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


def validate_location(location: Location | None) -> Location:
    if location is None or not location.name.strip() or not location.region_code.strip():
        raise ValidationFailedError("Valid city with name and country is required")
    return location


class ForecastPipeline:
    def __init__(
        self,
        client: OpenWeatherClient,
        cache: ForecastCache | None = None,
        horizon_policy: HorizonPolicy = HorizonPolicy.NEXT_HOURS,
        horizon_hours: int = DEFAULT_HORIZON_HOURS,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client
        self.cache = cache if cache is not None else ForecastCache()
        self.horizon_policy = horizon_policy
        self.horizon_hours = horizon_hours
        self.clock = clock

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        api_key: str,
        cache: ForecastCache | None = None,
    ) -> "ForecastPipeline":
        client = OpenWeatherClient(
            api_key,
            base_url=config.api.base_url,
            geo_base_url=config.api.geo_base_url,
            timeout=config.api.timeout_seconds,
            geocode_limit=config.api.geocode_limit,
        )
        if cache is None:
            cache = ForecastCache(max_entries=config.cache.max_entries)
        return cls(
            client,
            cache,
            horizon_policy=config.forecast.horizon_policy,
            horizon_hours=config.forecast.horizon_hours,
        )

    def get_forecast(self, location: Location, now: datetime | None = None) -> CombinedForecast:
        """Return a cached or freshly built forecast.

        Raises only ForecastError subclasses; anything else is wrapped in
        UnknownError.
        """
        result, _ = self.lookup_or_build(location, now)
        return result

    def fetch(self, location: Location, now: datetime | None = None) -> ForecastState:
        """Like get_forecast, but failures come back as a ForecastState."""
        try:
            result, from_cache = self.lookup_or_build(location, now)
        except ForecastError as e:
            logger.error("Failed to fetch weather data for %s: %s", _label(location), e)
            return ForecastState(error=e.to_envelope())
        return ForecastState(
            data=result, last_updated=result.fetched_at, from_cache=from_cache
        )

    def invalidate(self, location: Location) -> None:
        if location is not None:
            self.cache.invalidate(location.key)

    def refresh(self, location: Location, now: datetime | None = None) -> ForecastState:
        """Drop the cached entry for the location and fetch again."""
        self.invalidate(location)
        return self.fetch(location, now)

    def fetch_many(
        self,
        locations: list[Location],
        now: datetime | None = None,
        max_workers: int = 4,
    ) -> list[ForecastState]:
        """Fetch several locations in parallel; states keep the input order."""
        if not locations:
            return []
        workers = max(1, min(max_workers, len(locations)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda loc: self.fetch(loc, now), locations))

    def clear_cache(self) -> None:
        self.cache.clear()

    def build(self, location: Location, now: datetime) -> CombinedForecast:
        """Run the full uncached pipeline for a validated location."""
        coords = resolve_location(self.client, location.name, location.region_code)
        raw = fetch_raw_forecast(self.client, coords)

        samples = normalize_samples(raw.samples, raw.timezone_offset)
        series = interpolate_hourly(samples)
        hourly = select_horizon(
            series,
            raw.timezone_offset,
            now,
            policy=self.horizon_policy,
            hours=self.horizon_hours,
        )
        daily = aggregate_daily(series)

        logger.info(
            "Built forecast for %s: %d samples -> %d hourly, %d in window, %d days",
            location.key, len(samples), len(series), len(hourly), len(daily),
        )
        return CombinedForecast(
            location=location,
            hourly=hourly,
            daily=daily,
            timezone_offset=raw.timezone_offset,
            fetched_at=now,
        )

    def lookup_or_build(
        self, location: Location, now: datetime | None
    ) -> tuple[CombinedForecast, bool]:
        """Return (forecast, served_from_cache)."""
        try:
            location = validate_location(location)
            if now is None:
                now = self.clock()

            cached = self.cache.lookup(location.key, now)
            if cached is not None:
                return cached, True

            result = self.build(location, now)
            self.cache.store(location.key, result, now)
            return result, False
        except ForecastError:
            raise
        except Exception as e:
            raise UnknownError.wrap(e) from e


def _label(location: Location | None) -> str:
    return location.key if location is not None else "<none>"
