"""Domain service: Invoice Number Generation.

Numbers look like ``INV-1760841600123-9F2C1A``: epoch milliseconds followed
by a random suffix. Within one process the millisecond part is strictly
increasing, so two calls in the same clock tick still differ; the suffix
keeps separate processes apart.
"""

from __future__ import annotations

import secrets
import threading
import time
from typing import Callable


class InvoiceNumberGenerator:

    def __init__(
        self,
        clock_ms: Callable[[], int] | None = None,
        prefix: str = "INV",
    ) -> None:
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._prefix = prefix
        self._lock = threading.Lock()
        self._last_ms = 0

    def next_number(self) -> str:
        with self._lock:
            now = self._clock_ms()
            if now <= self._last_ms:
                now = self._last_ms + 1
            self._last_ms = now
        suffix = secrets.token_hex(3).upper()
        return f"{self._prefix}-{now}-{suffix}"
