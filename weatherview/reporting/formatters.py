"""Output formatters for combined forecasts."""

import json
from typing import Any

from weatherview.models.forecast import (
    CombinedForecast,
    Condition,
    DailySummary,
    ForecastSample,
)


def format_forecast_text(f: CombinedForecast) -> str:
    """Plain text rendering for the terminal."""
    lines = [
        f"=== {f.location.name}, {f.location.region_code} "
        f"| fetched {f.fetched_at.isoformat(timespec='minutes')} ===",
        "Hourly:",
    ]
    if not f.hourly:
        lines.append("  (no samples in window)")
    for s in f.hourly:
        lines.append(
            f"  {s.instant:%a %H:%M}  {s.temperature:>4}°C  "
            f"{s.precipitation_probability:>3}%  {s.condition.category}"
        )
    lines.append("Daily:")
    for d in f.daily:
        lines.append(
            f"  {d.day_name:<9} {d.date.isoformat()}  "
            f"{d.temperature_min:>4}/{d.temperature_max:<4}°C  "
            f"{d.precipitation_probability:>3}%  {d.condition.category}"
        )
    return "\n".join(lines)


def format_forecast_json(f: CombinedForecast) -> str:
    """JSON rendering for programmatic consumption."""
    return json.dumps(forecast_to_dict(f), indent=2)


def forecast_to_dict(f: CombinedForecast) -> dict[str, Any]:
    return {
        "location": {"name": f.location.name, "region_code": f.location.region_code},
        "timezone_offset": f.timezone_offset,
        "fetched_at": f.fetched_at.isoformat(),
        "hourly": [sample_to_dict(s) for s in f.hourly],
        "daily": [daily_to_dict(d) for d in f.daily],
    }


def sample_to_dict(s: ForecastSample) -> dict[str, Any]:
    return {
        "time": s.instant.isoformat(),
        "temperature": s.temperature,
        "feels_like": s.feels_like,
        "humidity": s.humidity,
        "pressure": s.pressure,
        "wind_speed": s.wind_speed,
        "wind_direction": s.wind_direction,
        "visibility": s.visibility,
        "precipitation_probability": s.precipitation_probability,
        "condition": _condition_to_dict(s.condition),
    }


def daily_to_dict(d: DailySummary) -> dict[str, Any]:
    return {
        "date": d.date.isoformat(),
        "day_name": d.day_name,
        "temperature_min": d.temperature_min,
        "temperature_max": d.temperature_max,
        "humidity": d.humidity,
        "pressure": d.pressure,
        "wind_speed": d.wind_speed,
        "precipitation_probability": d.precipitation_probability,
        "condition": _condition_to_dict(d.condition),
        "hourly": [sample_to_dict(s) for s in d.samples],
    }


def _condition_to_dict(c: Condition) -> dict[str, str]:
    return {"category": c.category, "description": c.description, "icon": c.icon_id}
