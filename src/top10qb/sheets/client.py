import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from top10qb.sheets._retry import RetryPolicy

logger = logging.getLogger(__name__)

PLACEHOLDER_SHEET_ID = "YOUR_SHEET_ID_HERE"

_BASE_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={tab}"


def is_sheet_configured(sheet_id: str) -> bool:
    return bool(sheet_id) and sheet_id != PLACEHOLDER_SHEET_ID


def tab_url(sheet_id: str, tab: str) -> str:
    """CSV export URL for one tab of a published Google Sheet."""
    return _BASE_URL.format(sheet_id=sheet_id, tab=quote(tab, safe="!~*'()"))


class SheetClient:
    """Retrieves the CSV text of individual tabs of one published sheet."""

    def __init__(
        self,
        sheet_id: str,
        client: httpx.AsyncClient | None = None,
        retry: RetryPolicy | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._sheet_id = sheet_id
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds, connect=5.0), follow_redirects=True
        )
        self._retry = retry or RetryPolicy()

    @property
    def sheet_id(self) -> str:
        return self._sheet_id

    @property
    def is_configured(self) -> bool:
        return is_sheet_configured(self._sheet_id)

    async def fetch_tab(self, tab: str) -> str:
        url = tab_url(self._sheet_id, tab)
        async for attempt in self._retry.retrying(tab):
            with attempt:
                logger.debug("GET %s", url)
                response = await self._client.get(url)
                response.raise_for_status()
                logger.debug("Tab %r responded %d (%d bytes)", tab, response.status_code, len(response.content))
                return response.text.removeprefix("\ufeff")
        raise AssertionError("retry loop ended without a result")

    async def aclose(self) -> None:
        await self._client.aclose()


@dataclass(frozen=True)
class SheetTabs:
    rankings: str = "Rankings"
    dropped: str = "Dropped Out"
    worst: str = "Worst QB"
    log: str = "Log"

    def names(self) -> tuple[str, str, str, str]:
        return (self.rankings, self.dropped, self.worst, self.log)
