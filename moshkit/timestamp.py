"""A cached monotonic millisecond clock, refreshed on demand."""

from __future__ import annotations

import time

_millis_cache: int | None = None


def freeze_timestamp() -> None:
    """Sample the monotonic clock and cache the value in milliseconds."""
    global _millis_cache
    _millis_cache = time.monotonic_ns() // 1_000_000


def frozen_timestamp() -> int:
    """Return the cached milliseconds, sampling the clock on first use."""
    if _millis_cache is None:
        freeze_timestamp()
    assert _millis_cache is not None
    return _millis_cache