"""Raw forecast fetcher: one upstream call per coordinate pair."""

import logging

from weatherview.errors import ParseFailedError
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.models.forecast import Coordinates, RawForecast

logger = logging.getLogger(__name__)


def fetch_raw_forecast(client: OpenWeatherClient, coords: Coordinates) -> RawForecast:
    """Fetch 3-hour samples and the location's UTC offset for coordinates."""
    raw = client.get_forecast(coords.latitude, coords.longitude)
    forecast = _extract_raw_forecast(raw)
    logger.info(
        "Fetched %d samples for (%.4f, %.4f) tz_offset=%ds",
        len(forecast.samples), coords.latitude, coords.longitude,
        forecast.timezone_offset,
    )
    return forecast


def _extract_raw_forecast(raw: dict) -> RawForecast:
    samples = raw.get("list")
    city = raw.get("city")
    if not isinstance(samples, list):
        raise ParseFailedError("Forecast response is missing the sample list")
    if not isinstance(city, dict) or "timezone" not in city:
        raise ParseFailedError("Forecast response is missing the timezone offset")

    try:
        offset = int(city["timezone"])
    except (TypeError, ValueError) as e:
        raise ParseFailedError(f"Invalid timezone offset: {city['timezone']!r}") from e

    # cnt is informational; the list is authoritative
    if raw.get("cnt") is not None and raw.get("cnt") != len(samples):
        logger.warning(
            "Forecast cnt=%s does not match %d samples", raw.get("cnt"), len(samples)
        )

    return RawForecast(samples=samples, timezone_offset=offset, city_name=city.get("name", ""))
