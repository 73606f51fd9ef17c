"""Tests for SyncDriver: fetch, extract and timing."""

import httpx
import pytest

from deviantscrape.common.exceptions import (
    HTMLResponseAssumptionException,
    HTMLStructuralAssumptionException,
    InvalidURLException,
)
from deviantscrape.common.request_manager import SyncRequestManager
from deviantscrape.data_types import BasePage, PageResult
from deviantscrape.driver.sync_driver import SyncDriver
from deviantscrape.pages import UserJournalPage

JOURNAL_URL = "http://nick.deviantart.com/journal/"


@pytest.fixture
def serve():
    """Build a driver whose manager serves fixed markup per URL."""

    def _serve(pages: dict[str, str], status_code: int = 200) -> SyncDriver:
        def handler(request: httpx.Request) -> httpx.Response:
            body = pages.get(str(request.url))
            if body is None:
                return httpx.Response(404, text="<html><body></body></html>")
            return httpx.Response(status_code, text=body)

        manager = SyncRequestManager(transport=httpx.MockTransport(handler))
        return SyncDriver(manager)

    return _serve


class BrokenUrlPage(BasePage):
    @property
    def url(self) -> str:
        return "nowhere"

    def parse(self, page):
        return {}


class TestSyncDriver:
    def test_run_returns_records_and_timings(self, serve, journal_html):
        driver = serve({JOURNAL_URL: journal_html})

        result = driver.run(UserJournalPage("nick"))

        assert isinstance(result, PageResult)
        assert result.url == JOURNAL_URL
        assert [entry["url"] for entry in result.data] == [
            "http://nick.deviantart.com/x",
            "http://nick.deviantart.com/y",
        ]
        assert result.fetch_time >= 0
        assert result.parse_time >= 0
        assert result.total_time == pytest.approx(
            result.fetch_time + result.parse_time
        )

    def test_runs_are_independent(self, serve, journal_html):
        """Running the same page twice shall give equal records."""
        driver = serve({JOURNAL_URL: journal_html})
        page = UserJournalPage("nick")

        assert driver.run(page).data == driver.run(page).data

    def test_structural_error_propagates(self, serve):
        driver = serve(
            {
                JOURNAL_URL: '<html><body><ul class="pp mglist">'
                "<li>No link</li></ul></body></html>"
            }
        )

        with pytest.raises(HTMLStructuralAssumptionException) as exc_info:
            driver.run(UserJournalPage("nick"))

        assert exc_info.value.request_url == JOURNAL_URL

    def test_server_error_propagates(self, serve, journal_html):
        driver = serve({JOURNAL_URL: journal_html}, status_code=500)

        with pytest.raises(HTMLResponseAssumptionException):
            driver.run(UserJournalPage("nick"))

    def test_invalid_page_url(self, serve):
        with pytest.raises(InvalidURLException):
            serve({}).run(BrokenUrlPage())

    def test_owns_default_manager(self):
        with SyncDriver() as driver:
            assert isinstance(driver.request_manager, SyncRequestManager)
            assert driver._owns_manager

    def test_does_not_own_given_manager(self):
        manager = SyncRequestManager()
        driver = SyncDriver(manager)

        driver.close()

        assert not driver._owns_manager
        manager.close()
