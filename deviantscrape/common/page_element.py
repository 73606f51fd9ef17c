"""PageElement protocol for selector-based node queries.

Page profiles never touch lxml directly. They receive a PageElement for the
document root and query it by CSS, read text and attributes from the
returned nodes, and walk up to a parent where a section is identified by
its heading. A PageElement is read-only: nothing here mutates the tree.
"""

from __future__ import annotations

from typing import Protocol


class PageElement(Protocol):
    """Read-only view of one node of a parsed page.

    Queries check how many nodes matched and raise
    HTMLStructuralAssumptionException when the count is out of range.
    Results are always in document order.
    """

    @property
    def url(self) -> str:
        """The URL of the document this element belongs to."""
        ...

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[PageElement]:
        """Query descendant elements by CSS selector.

        Args:
            selector: CSS selector expression.
            description: What is being selected, for error messages.
            min_count: Fewest matches accepted (default: 1).
            max_count: Most matches accepted (None = unlimited).

        Raises:
            HTMLStructuralAssumptionException: If the count is out of range.
        """
        ...

    def text_content(self) -> str:
        """Text of the element and all its descendants, unstripped."""
        ...

    def get_attribute(self, name: str) -> str | None:
        """Attribute value, or None if the element does not carry it."""
        ...

    def parent(self, description: str) -> PageElement:
        """Return the parent element.

        Raises:
            HTMLStructuralAssumptionException: If the element is the root.
        """
        ...
