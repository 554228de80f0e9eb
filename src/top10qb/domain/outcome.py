from dataclasses import dataclass
from enum import StrEnum

from top10qb.domain.errors import Top10Error
from top10qb.domain.models import Snapshot


class SnapshotOrigin(StrEnum):
    LIVE = "live"
    CACHED = "cached"
    STALE_CACHE = "stale_cache"
    PLACEHOLDER = "placeholder"
    UNCONFIGURED = "unconfigured"
    STATIC = "static"


class DataState(StrEnum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class FetchOutcome:
    """One fetch cycle's snapshot and where it came from.

    ``error`` is set whenever the cycle failed and ``snapshot`` is a
    fallback (stale cache or placeholder).
    """

    snapshot: Snapshot
    origin: SnapshotOrigin
    error: Top10Error | None = None

    @property
    def is_live(self) -> bool:
        return self.origin in (SnapshotOrigin.LIVE, SnapshotOrigin.CACHED)
