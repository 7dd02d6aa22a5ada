"""Tests for location resolution with a mocked client."""

from unittest.mock import MagicMock

import pytest

from weatherview.errors import NotFoundError, ParseFailedError
from weatherview.ingest.location_resolver import (
    build_query,
    geocode_candidates,
    resolve_location,
)
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.models.forecast import Coordinates


def _client(payload) -> MagicMock:
    client = MagicMock(spec=OpenWeatherClient)
    client.geocode.return_value = payload
    return client


class TestBuildQuery:
    def test_with_region(self):
        assert build_query("Los Angeles", "US") == "Los Angeles,US"

    def test_without_region(self):
        assert build_query("Los Angeles") == "Los Angeles"
        assert build_query("Los Angeles", "") == "Los Angeles"


class TestResolveLocation:
    def test_first_candidate_wins(self, geocoding_payload: list[dict]):
        client = _client(geocoding_payload)
        coords = resolve_location(client, "Los Angeles", "US")
        assert coords == Coordinates(latitude=34.0522, longitude=-118.2437)
        client.geocode.assert_called_once_with("Los Angeles,US")

    def test_empty_result_not_found(self):
        client = _client([])
        with pytest.raises(NotFoundError) as exc_info:
            resolve_location(client, "Atlantis", "XX")
        err = exc_info.value
        assert err.name == "Atlantis"
        assert err.region_code == "XX"
        assert err.code is None
        assert "Atlantis, XX" in err.message

    def test_malformed_candidate(self):
        client = _client([{"name": "Nowhere"}])
        with pytest.raises(ParseFailedError):
            resolve_location(client, "Nowhere", "US")


class TestGeocodeCandidates:
    def test_parses_all(self, geocoding_payload: list[dict]):
        candidates = geocode_candidates(_client(geocoding_payload), "Los Angeles", "US")
        assert len(candidates) == 2
        assert candidates[0].state == "California"
        assert candidates[0].local_names["es"] == "Los Ángeles"
        assert candidates[1].local_names == {}
