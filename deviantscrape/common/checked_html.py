"""Count-checked CSS querying over lxml elements.

CheckedHtmlElement wraps an lxml.html.HtmlElement and checks every CSS
query against the number of nodes the caller expects. A required selector
that matches nothing fails here, at the first access, instead of producing
a partial record further down.
"""

from __future__ import annotations

from lxml.html import HtmlElement

from deviantscrape.common.exceptions import (
    HTMLStructuralAssumptionException,
)


class CheckedHtmlElement:
    """An HtmlElement whose CSS queries raise on unexpected match counts.

    Example::

        tree = CheckedHtmlElement(lxml.html.document_fromstring(markup), url)
        avatar = tree.checked_css("img.avatar", "avatar", max_count=None)
        entries = tree.checked_css(".pp.mglist li", "journal", min_count=0)
    """

    def __init__(self, element: HtmlElement, request_url: str = "") -> None:
        """Wrap ``element``.

        Args:
            element: The lxml HtmlElement to wrap.
            request_url: URL of the document, carried into errors.
        """
        self._element = element
        self._request_url = request_url

    @property
    def request_url(self) -> str:
        return self._request_url

    def _mismatch(
        self,
        selector: str,
        description: str,
        actual_count: int,
        min_count: int,
        max_count: int | None,
    ) -> HTMLStructuralAssumptionException:
        return HTMLStructuralAssumptionException(
            selector=selector,
            selector_type="css",
            description=description,
            expected_min=min_count,
            expected_max=max_count,
            actual_count=actual_count,
            request_url=self._request_url,
        )

    def checked_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[CheckedHtmlElement]:
        """Run a CSS query and check how many nodes it matched.

        Args:
            selector: CSS selector, resolved below (and including) this node.
            description: What is being selected, for the error message.
            min_count: Fewest matches accepted.
            max_count: Most matches accepted; None means no limit.

        Returns:
            Wrapped matches in document order.

        Raises:
            HTMLStructuralAssumptionException: If the count is out of range
                or the selector cannot be compiled.
        """
        try:
            results = self._element.cssselect(selector)
        except Exception as e:
            # Invalid CSS never matches anything; report it as structural
            raise self._mismatch(
                selector, description, 0, min_count, max_count
            ) from e

        if len(results) < min_count or (
            max_count is not None and len(results) > max_count
        ):
            raise self._mismatch(
                selector, description, len(results), min_count, max_count
            )

        return [
            CheckedHtmlElement(result, self._request_url) for result in results
        ]

    def checked_parent(self) -> CheckedHtmlElement | None:
        """Return the wrapped parent element, or None at the document root."""
        parent = self._element.getparent()
        if parent is None:
            return None
        return CheckedHtmlElement(parent, self._request_url)

    def __getattr__(self, name: str):
        """Delegate ``text_content``, ``get`` and the rest to lxml."""
        return getattr(self._element, name)
