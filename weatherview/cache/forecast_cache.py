"""Time-boxed in-memory cache of combined forecasts keyed by location."""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timedelta

from weatherview.models.common import LocationKey
from weatherview.models.forecast import CombinedForecast

logger = logging.getLogger(__name__)

FRESHNESS_WINDOW = timedelta(minutes=10)


@dataclass(frozen=True)
class CacheEntry:
    result: CombinedForecast
    fetched_at: datetime


class ForecastCache:
    """Location-keyed cache with lazy staleness checks.

    Stale entries are ignored on lookup and only replaced by the next store.
    With `max_entries` set, the least recently used entry is evicted once the
    bound is exceeded. Safe to share between threads.
    """

    def __init__(
        self,
        freshness: timedelta = FRESHNESS_WINDOW,
        max_entries: int | None = None,
    ):
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.freshness = freshness
        self.max_entries = max_entries
        self._entries: OrderedDict[LocationKey, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def lookup(self, key: LocationKey, now: datetime) -> CombinedForecast | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("Cache miss for %s", key)
                return None

            age = now - entry.fetched_at
            if age < timedelta(0) or age >= self.freshness:
                logger.debug("Cache entry for %s ignored (age=%s)", key, age)
                return None

            self._entries.move_to_end(key)
            logger.debug("Cache hit for %s (age=%s)", key, age)
            return entry.result

    def store(self, key: LocationKey, result: CombinedForecast, now: datetime) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(result=result, fetched_at=now)
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug("Evicted %s from forecast cache", evicted)

    def invalidate(self, key: LocationKey) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
