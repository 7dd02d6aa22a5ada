"""Location resolver: place name + region code to coordinates."""

import logging

from weatherview.errors import NotFoundError, ParseFailedError
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.models.forecast import Coordinates, GeocodingCandidate

logger = logging.getLogger(__name__)


def build_query(name: str, region_code: str | None = None) -> str:
    return f"{name},{region_code}" if region_code else name


def geocode_candidates(
    client: OpenWeatherClient, name: str, region_code: str | None = None
) -> list[GeocodingCandidate]:
    """Return all candidates in the provider's relevance order."""
    raw = client.geocode(build_query(name, region_code))
    return [_parse_candidate(item) for item in raw]


def resolve_location(
    client: OpenWeatherClient, name: str, region_code: str | None = None
) -> Coordinates:
    """Resolve to the first candidate's coordinates.

    Raises NotFoundError when the provider returns no candidates.
    """
    candidates = geocode_candidates(client, name, region_code)
    if not candidates:
        raise NotFoundError(name, region_code)

    first = candidates[0]
    if len(candidates) > 1:
        logger.debug(
            "Geocoding %r returned %d candidates, using %s (%s)",
            build_query(name, region_code), len(candidates),
            first.name, first.region_code,
        )
    return first.coordinates


def _parse_candidate(item: dict) -> GeocodingCandidate:
    try:
        return GeocodingCandidate(
            name=item.get("name", ""),
            latitude=float(item["lat"]),
            longitude=float(item["lon"]),
            region_code=item.get("country", ""),
            state=item.get("state"),
            local_names=item.get("local_names") or {},
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ParseFailedError(f"Malformed geocoding candidate: {e}") from e
