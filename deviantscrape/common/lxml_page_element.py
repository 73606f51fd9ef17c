"""lxml-backed PageElement and document parsing.

parse_document() turns fetched bytes into the LxmlPageElement the page
profiles query; every node it hands out carries the page URL for error
context.
"""

from __future__ import annotations

from lxml import html

from deviantscrape.common.checked_html import CheckedHtmlElement
from deviantscrape.common.exceptions import (
    HTMLStructuralAssumptionException,
    ScraperAssumptionException,
)


class LxmlPageElement:
    """PageElement over a CheckedHtmlElement.

    Attributes:
        _element: The underlying CheckedHtmlElement.
        _url: The document URL, carried into error context.
    """

    def __init__(self, element: CheckedHtmlElement, url: str = ""):
        self._element = element
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[LxmlPageElement]:
        """Query descendant elements by CSS selector.

        Raises:
            HTMLStructuralAssumptionException: If the count is out of range.
        """
        return [
            LxmlPageElement(node, self._url)
            for node in self._element.checked_css(
                selector, description, min_count, max_count
            )
        ]

    def text_content(self) -> str:
        return str(self._element.text_content())

    def get_attribute(self, name: str) -> str | None:
        return self._element.get(name)

    def parent(self, description: str) -> LxmlPageElement:
        """Return the parent element.

        Raises:
            HTMLStructuralAssumptionException: If the element is the root.
        """
        parent = self._element.checked_parent()
        if parent is None:
            raise HTMLStructuralAssumptionException(
                selector="..",
                selector_type="css",
                description=description,
                expected_min=1,
                expected_max=1,
                actual_count=0,
                request_url=self._url,
            )
        return LxmlPageElement(parent, self._url)


def parse_document(content: bytes | str, url: str = "") -> LxmlPageElement:
    """Build a PageElement for the root of an HTML document.

    Raw bytes go straight to lxml so it can detect the encoding from a BOM
    or a ``<meta charset>`` declaration.

    Args:
        content: Page markup as fetched.
        url: URL the page came from, for error context.

    Returns:
        LxmlPageElement wrapping the document's ``<html>`` element.

    Raises:
        ScraperAssumptionException: If the markup cannot be parsed at all.
    """
    try:
        root = html.document_fromstring(content)
    except Exception as e:
        raise ScraperAssumptionException(
            f"Failed to parse HTML: {e}",
            request_url=url,
            context={"error": str(e)},
        ) from e
    return LxmlPageElement(CheckedHtmlElement(root, url), url)
