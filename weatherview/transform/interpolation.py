"""Temporal interpolator: fill 3-hour gaps with synthesized hourly samples."""

import math
from datetime import datetime, timedelta

from weatherview.models.forecast import ForecastSample
from weatherview.transform.numeric import (
    clamp,
    interpolate_direction,
    lerp,
    round_half_up,
    round_tenth,
)

ONE_HOUR = timedelta(hours=1)


def interpolate_sample(
    start: ForecastSample, end: ForecastSample, factor: float, instant: datetime
) -> ForecastSample:
    """Blend two samples at `factor` in (0, 1); condition is nearest-neighbour."""

    def blend(a: float, b: float) -> int:
        return round_half_up(lerp(a, b, factor))

    direction = round_half_up(
        interpolate_direction(start.wind_direction, end.wind_direction, factor)
    ) % 360

    return ForecastSample(
        instant=instant,
        temperature=blend(start.temperature, end.temperature),
        feels_like=blend(start.feels_like, end.feels_like),
        humidity=clamp(blend(start.humidity, end.humidity)),
        pressure=blend(start.pressure, end.pressure),
        wind_speed=round_tenth(lerp(start.wind_speed, end.wind_speed, factor)),
        wind_direction=direction,
        visibility=blend(start.visibility, end.visibility),
        precipitation_probability=clamp(
            blend(start.precipitation_probability, end.precipitation_probability)
        ),
        condition=start.condition if factor < 0.5 else end.condition,
    )


def interpolate_hourly(samples: list[ForecastSample]) -> list[ForecastSample]:
    """Densify a sample series to one record per hour.

    For each consecutive pair more than an hour apart, floor(hours) - 1 records
    are synthesized at whole-hour offsets from the earlier sample. Original
    samples pass through unchanged.
    """
    if len(samples) < 2:
        return list(samples)

    result: list[ForecastSample] = []
    for current, nxt in zip(samples, samples[1:]):
        result.append(current)

        span = nxt.instant - current.instant
        hours = span / ONE_HOUR
        if hours <= 1:
            continue

        for h in range(1, math.floor(hours)):
            target = current.instant + h * ONE_HOUR
            factor = (target - current.instant) / span
            result.append(interpolate_sample(current, nxt, factor, target))

    result.append(samples[-1])
    return result
