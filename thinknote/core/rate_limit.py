from __future__ import annotations

import time
from collections import OrderedDict, deque


class SlidingWindowRateLimiter:
    """
    Per-client request counter over a sliding time window.

    Clients are kept in least-recently-seen order so idle ones can be dropped
    cheaply and the table never grows past ``max_clients``.
    """

    def __init__(
        self,
        limit: int,
        *,
        window_seconds: float = 60.0,
        max_clients: int = 10_000,
        idle_seconds: float = 1800.0,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self.max_clients = max_clients
        self.idle_seconds = idle_seconds
        self._hits: OrderedDict[str, deque[float]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._hits)

    def _prune(self, now: float) -> None:
        while self._hits:
            client, hits = next(iter(self._hits.items()))
            if hits and now - hits[-1] <= self.idle_seconds and len(self._hits) <= self.max_clients:
                break
            del self._hits[client]

    def allow(self, client: str, now: float | None = None) -> bool:
        if now is None:
            now = time.monotonic()

        hits = self._hits.pop(client, None) or deque()
        self._prune(now)

        while hits and now - hits[0] > self.window_seconds:
            hits.popleft()
        allowed = len(hits) < self.limit
        if allowed:
            hits.append(now)

        if hits:
            self._hits[client] = hits
        # Re-inserting the client may push the table one past its bound.
        if len(self._hits) > self.max_clients:
            self._hits.popitem(last=False)
        return allowed
