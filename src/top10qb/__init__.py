"""Weekly top 10 NFL quarterback rankings, sourced from a published Google Sheet."""

from top10qb.domain.models import Snapshot
from top10qb.domain.outcome import DataState, FetchOutcome, SnapshotOrigin
from top10qb.factory import create_provider
from top10qb.fetcher import SheetFetcher
from top10qb.provider import SnapshotProvider

__all__ = [
    "DataState",
    "FetchOutcome",
    "SheetFetcher",
    "Snapshot",
    "SnapshotOrigin",
    "SnapshotProvider",
    "create_provider",
]
