"""Low-overhead latency diagnostics helpers."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from contextlib import contextmanager
from typing import Any

_TRUTHY = {"1", "true", "yes", "on"}


def diagnostics_enabled() -> bool:
    """Return whether latency diagnostics are enabled for this process."""
    raw = os.environ.get("HUMANIZER_LATENCY_DIAGNOSTICS", "")
    return raw.strip().lower() in _TRUTHY


@contextmanager
def timed_block(
    logger: logging.Logger,
    *,
    event: str,
    fields: dict[str, Any] | None = None,
    sink: Callable[[float], None] | None = None,
):
    """Context manager that logs elapsed duration for an operation.

    The line is only emitted when HUMANIZER_LATENCY_DIAGNOSTICS is set;
    ``sink`` always receives the elapsed seconds.
    """
    started = time.monotonic()
    try:
        yield
    finally:
        elapsed = time.monotonic() - started
        if sink is not None:
            sink(elapsed)
        if diagnostics_enabled():
            payload = ""
            if fields:
                payload = " " + " ".join(f"{key}={value}" for key, value in fields.items())
            logger.info("latency event=%s duration_ms=%.2f%s", event, elapsed * 1000.0, payload)
