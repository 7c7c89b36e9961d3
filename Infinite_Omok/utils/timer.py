"""Clock helpers for deferred computer moves."""

import time


def now_ms():
    """Monotonic milliseconds; only differences are meaningful."""
    return time.monotonic() * 1000.0


def due(at_ms, now=None):
    if at_ms is None:
        return False
    return (now_ms() if now is None else now) >= at_ms
