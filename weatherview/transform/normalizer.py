"""Sample normalizer: raw OpenWeatherMap list item to ForecastSample."""

from datetime import datetime

from weatherview.errors import ParseFailedError
from weatherview.models.common import offset_tz
from weatherview.models.forecast import Condition, ForecastSample
from weatherview.transform.numeric import clamp, normalize_degrees, round_half_up

# Upstream omits visibility when it is at its 10 km cap
DEFAULT_VISIBILITY_M = 10_000


def normalize_sample(raw: dict, timezone_offset: int) -> ForecastSample:
    """Convert one raw sample into a canonical, location-local record.

    Only the first entry of the raw condition list is used.
    """
    try:
        main = raw["main"]
        wind = raw["wind"]
        weather = raw["weather"][0]
        instant = datetime.fromtimestamp(int(raw["dt"]), tz=offset_tz(timezone_offset))

        return ForecastSample(
            instant=instant,
            temperature=round_half_up(main["temp"]),
            feels_like=round_half_up(main["feels_like"]),
            humidity=clamp(int(main["humidity"])),
            pressure=int(main["pressure"]),
            wind_speed=float(wind["speed"]),
            wind_direction=int(normalize_degrees(int(wind["deg"]))),
            visibility=int(raw.get("visibility", DEFAULT_VISIBILITY_M)),
            precipitation_probability=clamp(round_half_up(float(raw.get("pop", 0.0)) * 100)),
            condition=Condition(
                category=weather["main"],
                description=weather.get("description", ""),
                icon_id=weather.get("icon", ""),
            ),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ParseFailedError(f"Malformed forecast sample: {e!r}") from e


def normalize_samples(raw_samples: list[dict], timezone_offset: int) -> list[ForecastSample]:
    return [normalize_sample(item, timezone_offset) for item in raw_samples]
