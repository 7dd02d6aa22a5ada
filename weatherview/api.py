"""Forecast HTTP API: FastAPI app serving combined forecasts as JSON."""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weatherview.config.defaults import DEFAULT_LOCATIONS
from weatherview.config.loader import load_config, resolve_api_key
from weatherview.config.schema import AppConfig
from weatherview.errors import ForecastError
from weatherview.models.forecast import Location
from weatherview.pipeline.forecast_pipeline import ForecastPipeline
from weatherview.reporting.formatters import forecast_to_dict

logger = logging.getLogger(__name__)

CONFIG_ENV = "WEATHERVIEW_CONFIG"

# Upstream failures keep their own status in the envelope body
STATUS_BY_KIND = {
    "validation_failed": 400,
    "not_found": 404,
    "request_failed": 502,
    "parse_failed": 502,
    "unknown": 500,
}


def create_app(pipeline: ForecastPipeline, config: AppConfig | None = None) -> FastAPI:
    config = config or AppConfig(locations=DEFAULT_LOCATIONS)

    app = FastAPI(title="weatherview", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/locations")
    def get_locations():
        return [
            {"name": loc.name, "region_code": loc.region_code, "key": f"{loc.name},{loc.region_code}"}
            for loc in config.locations
            if loc.enabled
        ]

    @app.get("/api/forecast")
    def get_forecast(name: str = "", region: str = ""):
        """Hourly window and daily summaries for one location."""
        location = Location(name, region)
        return _respond(pipeline, location)

    # ── Controls ────────────────────────────────────────────────────

    @app.post("/api/forecast/refresh")
    def refresh_forecast(name: str = "", region: str = ""):
        location = Location(name, region)
        pipeline.invalidate(location)
        return _respond(pipeline, location)

    @app.delete("/api/cache")
    def clear_cache():
        pipeline.clear_cache()
        return {"status": "cleared"}

    return app


def build_app() -> FastAPI:
    """App factory for `uvicorn --factory weatherview.api:build_app`.

    Fails at startup when no API key is configured.
    """
    path = os.environ.get(CONFIG_ENV)
    config = load_config(path) if path else AppConfig(locations=DEFAULT_LOCATIONS)
    pipeline = ForecastPipeline.from_config(config, resolve_api_key(config))
    return create_app(pipeline, config)


def _respond(pipeline: ForecastPipeline, location: Location):
    try:
        result, from_cache = pipeline.lookup_or_build(location, None)
    except ForecastError as e:
        logger.error("Forecast request for %s failed: %s", location.key, e)
        return JSONResponse(
            status_code=STATUS_BY_KIND.get(e.kind, 500),
            content={"error": e.to_envelope().to_dict()},
        )

    body = forecast_to_dict(result)
    body["from_cache"] = from_cache
    return body


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(build_app(), host="0.0.0.0", port=8777)
