import asyncio
from dataclasses import replace

import httpx

from top10qb.domain.models import Snapshot
from top10qb.domain.outcome import FetchOutcome
from top10qb.sheets._retry import RetryPolicy

NO_WAIT_RETRY = RetryPolicy(attempts=3, max_wait_seconds=0)

RANKINGS_CSV = (
    "Week Label,Week 6 · Oct 15\n"
    "Date,\"Oct 15, 2026\"\n"
    "Rank,Name,Team,Commentary,Direction,Spots,Badge\n"
    "1,Lamar Jackson,BAL,Still the one.,same,0,\n"
    "2,Patrick Mahomes,kc,,up,1,\n"
    "3,Josh Allen,BUF,\"Fun, when he's cooking.\",down,1,new\n"
)

DROPPED_CSV = "Name,Previous Rank\nTua Tagovailoa,9\nJustin Herbert,10\n"

WORST_CSV = "Name,Team,Commentary\nBryce Young,CAR,The tape isn't rooting back.\n"

LOG_CSV = (
    "Week Label,Date,Rank,Name\n"
    "Week 6,\"Oct 15, 2026\",1,Lamar Jackson\n"
    "Week 6,\"Oct 15, 2026\",2,Patrick Mahomes\n"
    "Week 6,\"Oct 15, 2026\",3,Josh Allen\n"
    "Week 5,\"Oct 8, 2026\",1,Patrick Mahomes\n"
    "Week 5,\"Oct 8, 2026\",2,Josh Allen\n"
    "Week 5,\"Oct 8, 2026\",3,Lamar Jackson\n"
)

DEFAULT_TABS = {
    "Rankings": RANKINGS_CSV,
    "Dropped Out": DROPPED_CSV,
    "Worst QB": WORST_CSV,
    "Log": LOG_CSV,
}


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSheetTransport(httpx.AsyncBaseTransport):
    """Serves CSV per tab (the ``sheet`` query parameter).

    A tab mapped to an int responds with that status code instead.
    """

    def __init__(self, tabs: dict[str, str | int] | None = None) -> None:
        self.tabs: dict[str, str | int] = dict(DEFAULT_TABS if tabs is None else tabs)
        self.requested: list[str] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        tab = request.url.params.get("sheet", "")
        self.requested.append(tab)
        body = self.tabs.get(tab, 404)
        if isinstance(body, int):
            return httpx.Response(body, text="error")
        return httpx.Response(200, text=body, headers={"content-type": "text/csv; charset=utf-8"})


class BarrierTransport(FakeSheetTransport):
    """Holds every response until *expected* requests are in flight at once."""

    def __init__(self, expected: int, tabs: dict[str, str | int] | None = None) -> None:
        super().__init__(tabs)
        self._expected = expected
        self._all_started = asyncio.Event()
        self._in_flight = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self._in_flight += 1
        if self._in_flight >= self._expected:
            self._all_started.set()
        await asyncio.wait_for(self._all_started.wait(), timeout=1.0)
        return await super().handle_async_request(request)


class FakeFetcher:
    """Stands in for SheetFetcher, replaying queued outcomes."""

    def __init__(
        self,
        outcomes: list[FetchOutcome] | None = None,
        *,
        configured: bool = True,
        error: Exception | None = None,
    ) -> None:
        self._outcomes = list(outcomes or [])
        self._error = error
        self.is_configured = configured
        self.calls = 0
        self.closed = False
        self.gate: asyncio.Event | None = None

    async def fetch_all(self) -> FetchOutcome:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self._error is not None:
            raise self._error
        if len(self._outcomes) > 1:
            return self._outcomes.pop(0)
        return self._outcomes[0]

    async def aclose(self) -> None:
        self.closed = True


def snapshot_with(base: Snapshot, **changes: object) -> Snapshot:
    return replace(base, **changes)  # type: ignore[arg-type]
