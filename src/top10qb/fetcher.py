"""Fetch all sheet tabs, build one snapshot and memoize it.

``SheetFetcher.fetch_all`` never raises for retrieval or parsing problems.
A failed cycle falls back to the last good snapshot in the store, or to
``PLACEHOLDER_SNAPSHOT`` when nothing was ever fetched, and the returned
``FetchOutcome`` says which one happened.

A snapshot without rankings is returned as fetched but never stored, so
the store's last good snapshot always has rankings.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from top10qb.cache.memory_store import MemorySnapshotStore
from top10qb.domain.errors import SheetFetchError, TransformError
from top10qb.domain.models import PLACEHOLDER_SNAPSHOT, Snapshot
from top10qb.domain.outcome import FetchOutcome, SnapshotOrigin
from top10qb.domain.result import Err, Ok, Result
from top10qb.sheets.client import SheetTabs
from top10qb.sheets.csv_parser import parse_csv
from top10qb.sheets.log_transformer import transform_log
from top10qb.sheets.transformers import transform_dropped, transform_rankings, transform_worst

if TYPE_CHECKING:
    from top10qb.cache.protocol import SnapshotStore
    from top10qb.sheets.client import SheetClient

logger = logging.getLogger(__name__)


class SheetFetcher:
    def __init__(
        self,
        client: SheetClient,
        store: SnapshotStore | None = None,
        tabs: SheetTabs | None = None,
    ) -> None:
        self._client = client
        self._store = store if store is not None else MemorySnapshotStore()
        self._tabs = tabs or SheetTabs()

    @property
    def is_configured(self) -> bool:
        return self._client.is_configured

    async def _retrieve_tabs(self) -> Result[dict[str, str], SheetFetchError]:
        names = self._tabs.names()
        # gather schedules every request before waiting on any of them
        results = await asyncio.gather(*(self._client.fetch_tab(name) for name in names), return_exceptions=True)

        texts: dict[str, str] = {}
        for name, result in zip(names, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error("Fetch failed for tab %r: %s", name, result)
                return Err(SheetFetchError(message=str(result) or type(result).__name__, tab=name))
            texts[name] = result
        return Ok(texts)

    def _build_snapshot(self, texts: dict[str, str]) -> Result[Snapshot, TransformError]:
        tab = self._tabs.rankings
        try:
            rankings = transform_rankings(parse_csv(texts[tab]))
            tab = self._tabs.dropped
            dropped = transform_dropped(parse_csv(texts[tab]))
            tab = self._tabs.worst
            worst = transform_worst(parse_csv(texts[tab]))
            tab = self._tabs.log
            log = transform_log(parse_csv(texts[tab]))
        except Exception as exc:
            logger.exception("Transform failed for tab %r", tab)
            return Err(TransformError(message=str(exc), tab=tab))

        logger.info(
            "Fetched %d rankings, %d dropped, %d players with history, %d archive weeks",
            len(rankings.entries),
            len(dropped),
            len(log.player_history),
            len(log.archive_weeks),
        )
        return Ok(
            Snapshot(
                current_week_label=rankings.week_label,
                current_date=rankings.current_date,
                rankings=rankings.entries,
                dropped=dropped,
                worst=worst,
                player_history=log.player_history,
                archive_weeks=log.archive_weeks,
            )
        )

    def _fallback(self, error: SheetFetchError | TransformError) -> FetchOutcome:
        last_good = self._store.last_good()
        if last_good is not None:
            logger.warning("Serving last good snapshot after failure on %r", error.tab)
            return FetchOutcome(snapshot=last_good, origin=SnapshotOrigin.STALE_CACHE, error=error)
        logger.warning("No snapshot cached; serving placeholder")
        return FetchOutcome(snapshot=PLACEHOLDER_SNAPSHOT, origin=SnapshotOrigin.PLACEHOLDER, error=error)

    async def fetch_all(self) -> FetchOutcome:
        if not self.is_configured:
            logger.debug("Sheet id not configured; skipping retrieval")
            return FetchOutcome(snapshot=PLACEHOLDER_SNAPSHOT, origin=SnapshotOrigin.UNCONFIGURED)

        cached = self._store.get_fresh()
        if cached is not None:
            logger.debug("Snapshot cache hit")
            return FetchOutcome(snapshot=cached, origin=SnapshotOrigin.CACHED)

        t0 = time.perf_counter()
        fetched = await self._retrieve_tabs()
        if isinstance(fetched, Err):
            return self._fallback(fetched.error)

        built = self._build_snapshot(fetched.value)
        if isinstance(built, Err):
            return self._fallback(built.error)

        if built.value.rankings:
            self._store.put(built.value)
        else:
            logger.warning("Sheet returned no rankings; keeping the cached snapshot")
        logger.debug("Fetch cycle took %.2fs", time.perf_counter() - t0)
        return FetchOutcome(snapshot=built.value, origin=SnapshotOrigin.LIVE)

    async def aclose(self) -> None:
        await self._client.aclose()
