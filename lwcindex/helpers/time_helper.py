"""Time utility helpers."""

import time


def monotonic_ms() -> int:
    """Monotonic clock in milliseconds, for measuring durations."""
    return time.monotonic_ns() // 1_000_000


def elapsed_ms(start_ms: int) -> int:
    """Milliseconds elapsed since a monotonic_ms() reading."""
    return monotonic_ms() - start_ms
