"""OpenWeatherMap API client for geocoding and 5-day/3-hour forecasts."""

import logging

import httpx

from weatherview.errors import MissingApiKeyError, ParseFailedError, RequestFailedError

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_GEO_URL = "https://api.openweathermap.org/geo/1.0"


class OpenWeatherClient:
    """Thin transport: one GET per call, no retries.

    Non-success responses become RequestFailedError carrying the status code;
    transport failures become RequestFailedError without one.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        geo_base_url: str = OPENWEATHER_GEO_URL,
        timeout: float = 10.0,
        geocode_limit: int = 5,
    ):
        if not api_key:
            raise MissingApiKeyError("OpenWeatherMap API key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.geo_base_url = geo_base_url.rstrip("/")
        self.timeout = timeout
        self.geocode_limit = geocode_limit

    def geocode(self, query: str) -> list[dict]:
        """Look up candidate places for a free-text `name[,region]` query."""
        url = f"{self.geo_base_url}/direct"
        params = {"q": query, "limit": self.geocode_limit, "appid": self.api_key}
        data = self._get(url, params, "geocode")
        if not isinstance(data, list):
            raise ParseFailedError("Failed to parse API response: expected a list of locations")
        return data

    def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch the 3-hour-interval forecast for coordinates, metric units."""
        url = f"{self.base_url}/forecast"
        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self.api_key,
            "units": "metric",
        }
        data = self._get(url, params, "forecast")
        if not isinstance(data, dict):
            raise ParseFailedError("Failed to parse API response: expected an object")
        return data

    def _get(self, url: str, params: dict, label: str):
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("OpenWeather %s returned %d", label, status)
            raise RequestFailedError(
                f"API request failed: {status} {e.response.reason_phrase} - "
                f"{e.response.text[:200]}",
                code=status,
            ) from e
        except httpx.RequestError as e:
            logger.warning("OpenWeather %s request error: %s", label, e)
            raise RequestFailedError(f"Failed to {label}: {e}") from e

        logger.info("OpenWeather %s ok (%d bytes)", label, len(resp.content))
        try:
            return resp.json()
        except ValueError as e:
            raise ParseFailedError(f"Failed to parse API response: {e}") from e
