"""Consumer-facing snapshot provider.

Wraps a :class:`~top10qb.fetcher.SheetFetcher` with the policy page
renderers rely on:

* no sheet configured -> bundled static data, no requests
* fetch fell back to the placeholder -> static data
* fetch returned no rankings -> the previous snapshot as stale, or static data
  when nothing was shown before
* otherwise the fetched snapshot (live, fresh cache, or stale cache)

State only moves ``UNINITIALIZED -> LOADING -> READY``; there is no error
state, every refresh ends with something renderable.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from top10qb.domain.errors import EmptyRankingsError
from top10qb.domain.outcome import DataState, FetchOutcome, SnapshotOrigin
from top10qb.static_data import STATIC_SNAPSHOT

if TYPE_CHECKING:
    from top10qb.domain.errors import Top10Error
    from top10qb.domain.models import Snapshot
    from top10qb.fetcher import SheetFetcher

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 120.0

_STATIC_ORIGINS = frozenset({SnapshotOrigin.PLACEHOLDER, SnapshotOrigin.UNCONFIGURED})


class SnapshotProvider:
    def __init__(
        self,
        fetcher: SheetFetcher | None,
        static_snapshot: Snapshot = STATIC_SNAPSHOT,
        *,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self._fetcher = fetcher
        self._static_snapshot = static_snapshot
        self._sleep = sleep
        self._state = DataState.UNINITIALIZED
        self._current: FetchOutcome | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> DataState:
        return self._state

    @property
    def snapshot(self) -> Snapshot | None:
        return self._current.snapshot if self._current is not None else None

    @property
    def origin(self) -> SnapshotOrigin | None:
        return self._current.origin if self._current is not None else None

    @property
    def error(self) -> Top10Error | None:
        return self._current.error if self._current is not None else None

    @property
    def is_polling(self) -> bool:
        return self._task is not None and not self._task.done()

    def _use_static(self, error: Top10Error | None = None) -> FetchOutcome:
        return FetchOutcome(snapshot=self._static_snapshot, origin=SnapshotOrigin.STATIC, error=error)

    async def refresh(self) -> FetchOutcome:
        """Run one fetch cycle and adopt its result (or keep what is already shown)."""
        if self._fetcher is None or not self._fetcher.is_configured:
            self._current = self._use_static()
            self._state = DataState.READY
            return self._current

        if self._state is DataState.UNINITIALIZED:
            self._state = DataState.LOADING

        outcome = await self._fetcher.fetch_all()
        if outcome.origin in _STATIC_ORIGINS:
            logger.warning("Sheet data unavailable (%s); using static rankings", outcome.origin)
            outcome = self._use_static(outcome.error)
        elif not outcome.snapshot.rankings:
            outcome = self._keep_previous(outcome.error or EmptyRankingsError())

        self._current = outcome
        self._state = DataState.READY
        return outcome

    def _keep_previous(self, error: Top10Error) -> FetchOutcome:
        previous = self._current
        if previous is None or previous.origin is SnapshotOrigin.STATIC:
            logger.warning("Sheet returned no rankings; using static rankings")
            return self._use_static(error)
        logger.warning("Sheet returned no rankings; keeping previous snapshot")
        return FetchOutcome(snapshot=previous.snapshot, origin=SnapshotOrigin.STALE_CACHE, error=error)

    async def _poll(self, interval_seconds: float) -> None:
        while True:
            await self.refresh()
            await self._sleep(interval_seconds)

    def start(self, interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS) -> asyncio.Task[None]:
        """Refresh now and then every *interval_seconds* until :meth:`stop`."""
        if self.is_polling:
            raise RuntimeError("Snapshot polling already started")
        logger.debug("Starting snapshot polling every %.0fs", interval_seconds)
        self._task = asyncio.get_running_loop().create_task(self._poll(interval_seconds))
        return self._task

    async def stop(self) -> None:
        """Cancel polling. A polling task that already died re-raises its error here."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("Stopped snapshot polling")

    async def aclose(self) -> None:
        """Stop polling and release the fetcher's HTTP client."""
        try:
            await self.stop()
        finally:
            if self._fetcher is not None:
                await self._fetcher.aclose()
