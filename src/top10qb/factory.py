from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from top10qb.cache.memory_store import MemorySnapshotStore
from top10qb.config import load_sheet_settings
from top10qb.fetcher import SheetFetcher
from top10qb.provider import SnapshotProvider
from top10qb.sheets.client import SheetClient

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from top10qb.config import SheetSettings


def create_fetcher(
    settings: SheetSettings,
    *,
    http_client: httpx.AsyncClient | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> SheetFetcher:
    client = SheetClient(
        settings.sheet_id,
        client=http_client,
        retry=settings.retry,
        timeout_seconds=settings.http_timeout_seconds,
    )
    store = MemorySnapshotStore(ttl_seconds=settings.cache_ttl_seconds, clock=clock)
    return SheetFetcher(client, store=store, tabs=settings.tabs)


def create_provider(
    settings: SheetSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> SnapshotProvider:
    """Build a provider from settings; no fetcher at all when the sheet is unconfigured."""
    if settings is None:
        settings = load_sheet_settings()
    if not settings.is_configured:
        return SnapshotProvider(None, sleep=sleep)
    return SnapshotProvider(create_fetcher(settings, http_client=http_client), sleep=sleep)
