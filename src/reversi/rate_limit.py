from __future__ import annotations

import threading
import time
from typing import Callable


class _Window:
    def __init__(self, reset_at: float) -> None:
        self.count = 0
        self.reset_at = reset_at


class RateLimiter:
    """
    Fixed window rate limiter, counting requests per identifier (usually a player id).

    Every limiter keeps its own windows, so separate servers or tests never share counts.
    """

    def __init__(
        self,
        max_requests: int = 60,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError(f"max_requests must be positive, got {max_requests}")

        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be positive, got {window_seconds}")

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def _get_window(self, identifier: str) -> _Window:
        now = self.clock()
        window = self._windows.get(identifier)

        if window is not None and now < window.reset_at:
            return window

        # Drop every expired window, otherwise each identifier ever seen stays in memory.
        expired = [key for key, old in self._windows.items() if now >= old.reset_at]
        for key in expired:
            del self._windows[key]

        window = _Window(now + self.window_seconds)
        self._windows[identifier] = window
        return window

    def check(self, identifier: str) -> bool:
        """
        Returns True and counts the request if it fits in the current window.
        """
        with self._lock:
            window = self._get_window(identifier)

            if window.count >= self.max_requests:
                return False

            window.count += 1
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()
