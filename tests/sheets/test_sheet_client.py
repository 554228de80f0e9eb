import httpx
import pytest

from tests.fakes.sheets import NO_WAIT_RETRY, FakeSheetTransport
from top10qb.sheets.client import PLACEHOLDER_SHEET_ID, SheetClient, is_sheet_configured, tab_url


class FailNTransport(httpx.AsyncBaseTransport):
    """Returns 503 for the first N requests, then serves *text*."""

    def __init__(self, fail_count: int, text: str = "a,b\n") -> None:
        self._fail_count = fail_count
        self._text = text
        self.call_count = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.call_count += 1
        if self.call_count <= self._fail_count:
            return httpx.Response(503, content=b"Service Unavailable")
        return httpx.Response(200, text=self._text)


class TestTabUrl:
    def test_url_encodes_tab_name(self) -> None:
        assert tab_url("abc123", "Dropped Out") == (
            "https://docs.google.com/spreadsheets/d/abc123/gviz/tq?tqx=out:csv&sheet=Dropped%20Out"
        )

    def test_encodes_reserved_characters(self) -> None:
        assert tab_url("id", "Q&A/2026").endswith("sheet=Q%26A%2F2026")


class TestIsSheetConfigured:
    def test_placeholder_is_not_configured(self) -> None:
        assert not is_sheet_configured(PLACEHOLDER_SHEET_ID)

    def test_empty_is_not_configured(self) -> None:
        assert not is_sheet_configured("")

    def test_real_id(self) -> None:
        assert is_sheet_configured("1AbCdEf")


class TestSheetClient:
    async def test_fetch_tab_returns_csv_text(self) -> None:
        transport = FakeSheetTransport({"Worst QB": "Name\nBryce Young\n"})
        client = SheetClient("sheet-1", client=httpx.AsyncClient(transport=transport), retry=NO_WAIT_RETRY)

        text = await client.fetch_tab("Worst QB")

        assert text == "Name\nBryce Young\n"
        assert transport.requested == ["Worst QB"]

    async def test_strips_byte_order_mark(self) -> None:
        transport = FakeSheetTransport({"Log": "\ufeffWeek Label,Date\n"})
        client = SheetClient("sheet-1", client=httpx.AsyncClient(transport=transport), retry=NO_WAIT_RETRY)
        assert await client.fetch_tab("Log") == "Week Label,Date\n"

    async def test_retries_server_errors(self) -> None:
        transport = FailNTransport(fail_count=2)
        client = SheetClient("sheet-1", client=httpx.AsyncClient(transport=transport), retry=NO_WAIT_RETRY)

        assert await client.fetch_tab("Rankings") == "a,b\n"
        assert transport.call_count == 3

    async def test_raises_after_retries_exhausted(self) -> None:
        transport = FailNTransport(fail_count=10)
        client = SheetClient("sheet-1", client=httpx.AsyncClient(transport=transport), retry=NO_WAIT_RETRY)

        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_tab("Rankings")
        assert transport.call_count == 3

    async def test_not_found_is_an_error(self) -> None:
        transport = FakeSheetTransport({})
        client = SheetClient("sheet-1", client=httpx.AsyncClient(transport=transport), retry=NO_WAIT_RETRY)

        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_tab("Missing")
        assert transport.requested == ["Missing"]

    def test_is_configured(self) -> None:
        assert SheetClient("sheet-1").is_configured
        assert not SheetClient(PLACEHOLDER_SHEET_ID).is_configured
