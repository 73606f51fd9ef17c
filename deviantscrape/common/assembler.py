"""Record assembly for repeated page entries.

A list page (journal entries, news reports, forum threads) repeats one
block of markup per entry. A RecordTemplate names the selector for that
block and a FieldSpec for each field inside it, and builds one record per
block in document order.

Each FieldSpec declares whether it is required. A required field whose
selector finds nothing raises HTMLStructuralAssumptionException; an
optional one is left out of the record.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from deviantscrape.common.exceptions import (
    CompoundFieldException,
    HTMLStructuralAssumptionException,
)
from deviantscrape.common.page_element import PageElement
from deviantscrape.data_types import Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """How to extract one field relative to an entry node.

    Attributes:
        name: Record key.
        selector: CSS selector, resolved inside the entry node. None means
            the entry node itself.
        attribute: Attribute to read instead of text. Attributes are always
            read from a single node.
        required: Raise when no usable node is found instead of omitting.
        index: Use the match at this position (0-based) instead of all.
        first: Use only the first match's text instead of joining all.
        where: Filter applied to the matched nodes before anything else.
        strip: Strip surrounding whitespace from the raw string.
        transform: Converts the raw string. Returning None omits the field.
    """

    name: str
    selector: str | None
    attribute: str | None = None
    required: bool = False
    index: int | None = None
    first: bool = False
    where: Callable[[PageElement], bool] | None = None
    strip: bool = False
    transform: Callable[[str], Any] | None = None

    def _nodes(self, node: PageElement) -> list[PageElement]:
        if self.selector is None:
            nodes = [node]
        else:
            nodes = node.query_css(
                self.selector, self.name, min_count=0, max_count=None
            )
        if self.where is not None:
            nodes = [n for n in nodes if self.where(n)]

        position = self.index
        if position is None and (self.first or self.attribute is not None):
            position = 0
        if position is not None:
            nodes = nodes[position : position + 1]

        if not nodes and self.required:
            raise HTMLStructuralAssumptionException(
                selector=self.selector or "(entry)",
                selector_type="css",
                description=self.name,
                expected_min=(position or 0) + 1,
                expected_max=None,
                actual_count=0,
                request_url=node.url,
            )
        return nodes

    def raw(self, node: PageElement) -> str | None:
        """Return the untransformed string, or None when nothing was found."""
        nodes = self._nodes(node)
        if not nodes:
            return None

        if self.attribute is not None:
            value = nodes[0].get_attribute(self.attribute)
            if value is None:
                if self.required:
                    raise HTMLStructuralAssumptionException(
                        selector=f"{self.selector}[{self.attribute}]",
                        selector_type="css",
                        description=f"{self.name} attribute",
                        expected_min=1,
                        expected_max=1,
                        actual_count=0,
                        request_url=node.url,
                        is_element_query=False,
                    )
                return None
        else:
            value = "".join(n.text_content() for n in nodes)

        return value.strip() if self.strip else value

    def extract(self, node: PageElement) -> Record:
        """Return ``{name: value}``, or ``{}`` when the field is omitted."""
        value: Any = self.raw(node)
        if value is None:
            return {}
        if self.transform is not None:
            try:
                value = self.transform(value)
            except CompoundFieldException as e:
                if e.request_url:
                    raise
                raise CompoundFieldException(
                    e.parser_name, e.text, e.pattern, node.url
                ) from e
            if value is None:
                return {}
        return {self.name: value}


class RecordTemplate:
    """Extracts a list of records from repeated entry blocks.

    Example::

        journals = RecordTemplate(
            ".pp.mglist li",
            [
                FieldSpec("title", ".main"),
                FieldSpec("date", ".side"),
                FieldSpec("url", ".main a", attribute="href", required=True),
            ],
            "journal entries",
        )
        records = journals.assemble(page)

    Attributes:
        container: CSS selector matching one node per entry.
        fields: FieldSpecs applied to each entry, in record key order.
        description: Human-readable name used in logs and errors.
        skip_malformed: Drop an entry whose compound field fails to parse
            instead of failing the whole page. Structural errors always
            propagate.
    """

    def __init__(
        self,
        container: str,
        fields: Sequence[FieldSpec],
        description: str,
        skip_malformed: bool = True,
    ) -> None:
        self.container = container
        self.fields = tuple(fields)
        self.description = description
        self.skip_malformed = skip_malformed

    def build_record(self, node: PageElement) -> Record:
        record: Record = {}
        for spec in self.fields:
            record.update(spec.extract(node))
        return record

    def assemble(self, root: PageElement) -> list[Record]:
        """Build one record per container node, in document order."""
        entries = root.query_css(
            self.container, self.description, min_count=0, max_count=None
        )
        records: list[Record] = []
        for position, entry in enumerate(entries):
            try:
                records.append(self.build_record(entry))
            except CompoundFieldException as e:
                if not self.skip_malformed:
                    raise
                logger.warning(
                    "Skipping %s entry %d on %s: %s",
                    self.description,
                    position,
                    root.url,
                    e.message,
                )
        return records


def find_section(
    root: PageElement,
    heading_selector: str,
    heading_text: str,
    description: str,
) -> PageElement:
    """Return the parent of the first heading with exactly ``heading_text``.

    Raises:
        HTMLStructuralAssumptionException: If no heading has that text.
    """
    headings = root.query_css(
        heading_selector, description, min_count=0, max_count=None
    )
    for heading in headings:
        if heading.text_content().strip() == heading_text:
            return heading.parent(description)
    raise HTMLStructuralAssumptionException(
        selector=f"{heading_selector}:contains({heading_text!r})",
        selector_type="css",
        description=description,
        expected_min=1,
        expected_max=None,
        actual_count=0,
        request_url=root.url,
    )
