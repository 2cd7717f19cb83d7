# pos_backend/rate_limit.py
import time
import threading
from collections import deque


class SlidingWindowLimiter:
    """Bounds the number of hits per key within a sliding time window.

    Only accepted hits are recorded. A rejected client is let back in as soon
    as its oldest accepted attempt ages out of the window.
    """

    def __init__(self, limit, window, clock=time.monotonic):
        self.limit = limit
        self.window = window
        self.clock = clock
        self._hits = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def _prune(self, hits, now):
        while hits and hits[0] <= now - self.window:
            hits.popleft()

    def hit(self, key):
        """Record an attempt for ``key``.

        Returns ``(allowed, retry_after)`` where ``retry_after`` is the number
        of seconds until the next attempt would be accepted (0 when allowed).
        """
        now = self.clock()
        with self._lock:
            hits = self._hits.get(key)
            if hits is not None:
                self._prune(hits, now)
            if hits and len(hits) >= self.limit:
                retry_after = hits[0] + self.window - now
                return False, max(retry_after, 0)
            if now - self._last_sweep >= self.window:
                self._sweep(now)
            self._hits.setdefault(key, deque()).append(now)
            return True, 0

    def _sweep(self, now):
        # Forget every client whose attempts have all aged out
        self._last_sweep = now
        for key in [k for k, hits in self._hits.items() if not hits or hits[-1] <= now - self.window]:
            del self._hits[key]

    def remaining(self, key):
        now = self.clock()
        with self._lock:
            hits = self._hits.get(key)
            if hits is None:
                return self.limit
            self._prune(hits, now)
            if not hits:
                del self._hits[key]
                return self.limit
            return max(self.limit - len(hits), 0)

    def tracked_keys(self):
        with self._lock:
            return len(self._hits)

    def reset(self, key=None):
        with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)
