"""Tests for the fixed-window rate limiter."""
from __future__ import annotations

import threading

from marine_proxy.services.rate_limit import (
    InMemoryRateLimitStore,
    RateConfig,
    RateLimiter,
)


class _FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _limiter(clock: _FakeClock, store: InMemoryRateLimitStore | None = None) -> RateLimiter:
    return RateLimiter(
        RateConfig(window_seconds=3600, max_requests=60), store=store, clock=clock
    )


def test_first_sixty_requests_admitted_then_rejected() -> None:
    limiter = _limiter(_FakeClock())

    assert all(limiter.admit("203.0.113.5") for _ in range(60))
    assert not any(limiter.admit("203.0.113.5") for _ in range(10))


def test_rejections_do_not_increment_count() -> None:
    store = InMemoryRateLimitStore()
    limiter = _limiter(_FakeClock(), store)

    for _ in range(75):
        limiter.admit("203.0.113.5")

    assert store.get("203.0.113.5").count == 60


def test_window_resets_only_after_it_elapses() -> None:
    clock = _FakeClock()
    store = InMemoryRateLimitStore()
    limiter = _limiter(clock, store)
    for _ in range(60):
        limiter.admit("203.0.113.5")

    clock.advance(3600)
    # still inside the window at exactly the reset instant
    assert not limiter.admit("203.0.113.5")

    clock.advance(0.001)
    assert limiter.admit("203.0.113.5")
    assert store.get("203.0.113.5").count == 1
    assert store.get("203.0.113.5").window_reset_at == clock.now + 3600


def test_keys_are_independent() -> None:
    store = InMemoryRateLimitStore()
    limiter = _limiter(_FakeClock(), store)
    for _ in range(60):
        limiter.admit("198.51.100.1")

    assert not limiter.admit("198.51.100.1")
    assert limiter.admit("198.51.100.2")
    assert store.get("198.51.100.1").count == 60
    assert store.get("198.51.100.2").count == 1
    assert store.get("198.51.100.3") is None


def test_store_entries_track_window() -> None:
    clock = _FakeClock(now=50.0)
    store = InMemoryRateLimitStore()
    limiter = _limiter(clock, store)

    limiter.admit("a")
    limiter.admit("a")
    limiter.admit("b")

    entry = store.get("a")
    assert entry.count == 2
    assert entry.window_reset_at == 50.0 + 3600
    assert len(store) == 2


def test_boundary_burst_is_allowed() -> None:
    clock = _FakeClock()
    limiter = _limiter(clock)
    assert limiter.admit("burst")

    clock.advance(3599)
    late_burst = sum(limiter.admit("burst") for _ in range(60))
    clock.advance(2)
    early_burst = sum(limiter.admit("burst") for _ in range(60))

    # two seconds apart, nearly twice the budget gets through
    assert late_burst == 59
    assert early_burst == 60


def test_concurrent_admits_do_not_lose_increments() -> None:
    store = InMemoryRateLimitStore()
    limiter = RateLimiter(RateConfig(window_seconds=3600, max_requests=1000), store=store)
    admitted: list[bool] = []

    def worker() -> None:
        for _ in range(100):
            admitted.append(limiter.admit("shared"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert all(admitted)
    assert store.get("shared").count == 800
