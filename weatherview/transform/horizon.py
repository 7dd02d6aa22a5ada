"""Horizon selector: slice the dense series to the near-term display window."""

from datetime import datetime, timedelta

from weatherview.config.schema import HorizonPolicy
from weatherview.models.common import offset_tz
from weatherview.models.forecast import ForecastSample

DEFAULT_HORIZON_HOURS = 12


def select_horizon(
    series: list[ForecastSample],
    timezone_offset: int,
    now: datetime,
    policy: HorizonPolicy = HorizonPolicy.NEXT_HOURS,
    hours: int = DEFAULT_HORIZON_HOURS,
) -> list[ForecastSample]:
    """Return samples inside the window starting at `now`, both ends inclusive.

    NEXT_HOURS keeps [now, now + hours]; REST_OF_DAY keeps samples from now
    until the end of the location-local calendar day.
    """
    local_now = now.astimezone(offset_tz(timezone_offset))

    if policy == HorizonPolicy.REST_OF_DAY:
        today = local_now.date()
        return [
            s for s in series
            if s.instant >= local_now and s.instant.astimezone(local_now.tzinfo).date() == today
        ]

    end = local_now + timedelta(hours=hours)
    return [s for s in series if local_now <= s.instant <= end]
