from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from top10qb.domain.models import Snapshot

DEFAULT_TTL_SECONDS = 60.0


class MemorySnapshotStore:
    """Single-slot, time-boxed snapshot cache.

    Holds at most one snapshot with the clock reading taken when it was
    stored. The slot is guarded by a lock so concurrent threads see either
    the old or the new (snapshot, stored_at) pair, never a mix.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot: Snapshot | None = None
        self._stored_at = 0.0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get_fresh(self) -> Snapshot | None:
        """Return the stored snapshot if it is younger than the TTL."""
        with self._lock:
            if self._snapshot is None:
                return None
            if self._clock() - self._stored_at >= self._ttl_seconds:
                return None
            return self._snapshot

    def last_good(self) -> Snapshot | None:
        """Return the stored snapshot regardless of age."""
        with self._lock:
            return self._snapshot

    def put(self, snapshot: Snapshot) -> None:
        with self._lock:
            self._snapshot = snapshot
            self._stored_at = self._clock()

    def clear(self) -> None:
        with self._lock:
            self._snapshot = None
            self._stored_at = 0.0
