"""Synchronous driver: fetch one page, extract it, report timings.

The driver owns the only I/O in the package. For each run it fetches the
page's URL, builds the document tree, hands it to the page's extract(),
and drops the tree before returning so a large page can be freed as soon
as the caller is done with the records.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from deviantscrape.common.lxml_page_element import parse_document
from deviantscrape.common.request_manager import SyncRequestManager
from deviantscrape.data_types import BasePage, PageResult

logger = logging.getLogger(__name__)


class SyncDriver:
    """Runs page profiles one at a time over a shared request manager.

    Example::

        with SyncRequestManager(timeout=30.0) as manager:
            driver = SyncDriver(manager)
            result = driver.run(UserJournalPage("someone"))
            for entry in result.data:
                print(entry["title"], entry["url"])
            print(f"{result.total_time:.2f}s")
    """

    def __init__(self, request_manager: SyncRequestManager | None = None):
        """Initialize the driver.

        Args:
            request_manager: Manager used to fetch pages. A default one is
                created (and owned by the driver) when omitted.
        """
        self._owns_manager = request_manager is None
        self.request_manager = request_manager or SyncRequestManager()

    def close(self) -> None:
        if self._owns_manager:
            self.request_manager.close()

    def __enter__(self) -> SyncDriver:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def run(self, page: BasePage) -> PageResult:
        """Fetch and extract one page.

        Raises:
            InvalidParameterException: If the page URL is invalid.
            TransientException: If the fetch fails.
            ScraperAssumptionException: If the page does not have the
                expected structure.
        """
        url = page.url
        logger.info("Fetching %s", url)

        start = time.perf_counter()
        response = self.request_manager.fetch(url)
        tree = parse_document(response.content, url)
        fetch_time = time.perf_counter() - start

        extraction = page.extract(tree)
        del tree

        logger.info(
            "Extracted %s: fetch %.3fs, parse %.3fs",
            url,
            fetch_time,
            extraction.elapsed,
        )
        return PageResult(
            url=url,
            data=extraction.data,
            fetch_time=fetch_time,
            parse_time=extraction.elapsed,
        )
