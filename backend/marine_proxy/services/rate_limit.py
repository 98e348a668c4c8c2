"""In-memory fixed-window rate limiter keyed by client address."""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Protocol


@dataclass
class RateConfig:
    window_seconds: int
    max_requests: int


@dataclass
class RateLimitEntry:
    count: int
    window_reset_at: float


class RateLimitStore(Protocol):
    """Backing storage for per-key counters."""

    def get(self, key: str) -> RateLimitEntry | None: ...

    def increment(self, key: str) -> RateLimitEntry: ...

    def reset(self, key: str, window_reset_at: float) -> RateLimitEntry: ...


class InMemoryRateLimitStore:
    """Process-local store; entries are never evicted."""

    def __init__(self) -> None:
        self._entries: dict[str, RateLimitEntry] = {}

    def get(self, key: str) -> RateLimitEntry | None:
        return self._entries.get(key)

    def increment(self, key: str) -> RateLimitEntry:
        entry = self._entries[key]
        entry.count += 1
        return entry

    def reset(self, key: str, window_reset_at: float) -> RateLimitEntry:
        entry = RateLimitEntry(count=1, window_reset_at=window_reset_at)
        self._entries[key] = entry
        return entry

    def __len__(self) -> int:
        return len(self._entries)


class RateLimiter:
    """Fixed-window counter.

    Windows start on a key's first request and are not aligned, so a client
    can get up to twice ``max_requests`` through across a window boundary.
    """

    def __init__(
        self,
        config: RateConfig,
        *,
        store: RateLimitStore | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._store: RateLimitStore = store if store is not None else InMemoryRateLimitStore()
        self._clock = clock
        self._lock = threading.Lock()

    def admit(self, key: str) -> bool:
        window = float(max(1, self._config.window_seconds))
        max_req = max(1, self._config.max_requests)
        with self._lock:
            now = self._clock()
            entry = self._store.get(key)
            if entry is None or now > entry.window_reset_at:
                # new window
                self._store.reset(key, now + window)
                return True
            if entry.count >= max_req:
                # deny without counting
                return False
            self._store.increment(key)
            return True

