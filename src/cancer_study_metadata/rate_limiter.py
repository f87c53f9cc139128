"""Thread-safe token bucket shared by the HTTP worksheet sources."""

import threading
import time


class RateLimiter:
    def __init__(self, requests_per_second: float, poll_interval: float = 0.05):
        if requests_per_second <= 0:
            raise ValueError("requests_per_second must be positive")
        self.rate = requests_per_second
        self.capacity = max(1.0, requests_per_second)
        self.tokens = self.capacity
        self._poll_interval = poll_interval
        self._last_refill = time.monotonic()
        self._lock = threading.Lock()

    def acquire(self) -> None:
        """Block until a token is available."""
        while not self.try_acquire():
            time.sleep(self._poll_interval)

    def try_acquire(self) -> bool:
        with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_refill
            self.tokens = min(self.capacity, self.tokens + elapsed * self.rate)
            self._last_refill = now
            if self.tokens >= 1.0:
                self.tokens -= 1.0
                return True
            return False
