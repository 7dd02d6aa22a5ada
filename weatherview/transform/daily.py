"""Day aggregator: reduce the hourly series to one summary per local date."""

from collections import Counter
from datetime import date

from weatherview.models.forecast import Condition, DailySummary, ForecastSample
from weatherview.transform.numeric import round_half_up, round_tenth


def group_by_day(series: list[ForecastSample]) -> dict[date, list[ForecastSample]]:
    """Bucket samples by the local calendar date of their instant."""
    groups: dict[date, list[ForecastSample]] = {}
    for sample in series:
        groups.setdefault(sample.instant.date(), []).append(sample)
    return groups


def most_common_condition(samples: list[ForecastSample]) -> Condition:
    """Mode of condition categories; ties go to the category seen first."""
    counts = Counter(s.condition.category for s in samples)
    # Counter keeps first-seen order and max() returns the first maximum
    category = max(counts, key=counts.__getitem__)
    return next(s.condition for s in samples if s.condition.category == category)


def summarize_day(day: date, samples: list[ForecastSample]) -> DailySummary:
    temperatures = [s.temperature for s in samples]
    n = len(samples)
    return DailySummary(
        date=day,
        temperature_min=min(temperatures),
        temperature_max=max(temperatures),
        humidity=round_half_up(sum(s.humidity for s in samples) / n),
        pressure=round_half_up(sum(s.pressure for s in samples) / n),
        wind_speed=round_tenth(sum(s.wind_speed for s in samples) / n),
        precipitation_probability=max(s.precipitation_probability for s in samples),
        condition=most_common_condition(samples),
        samples=samples,
    )


def aggregate_daily(series: list[ForecastSample]) -> list[DailySummary]:
    """Summaries ordered by ascending date, whatever the input order."""
    groups = group_by_day(series)
    return [summarize_day(day, groups[day]) for day in sorted(groups)]
