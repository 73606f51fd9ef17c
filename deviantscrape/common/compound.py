"""Regex decomposition of one text blob into several fields.

Counters on the today page come as a number and a unit in one string,
"(1,234 replies)" or "56 Senior Members". A CompoundFieldParser holds one
pattern with named groups and optional per-group converters.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from deviantscrape.common.decode_rules import parse_count
from deviantscrape.common.exceptions import CompoundFieldException

COUNT = r"(?P<count>\d{1,3}(?:,\d{3})*)"


class CompoundFieldParser:
    """A named regular expression whose groups become fields.

    Attributes:
        name: Name used in error messages.
        pattern: Compiled expression; matched against stripped text.
        converters: Per-group callables applied to the captured strings.
    """

    def __init__(
        self,
        name: str,
        pattern: str,
        converters: Mapping[str, Callable[[str], Any]] | None = None,
    ) -> None:
        self.name = name
        self.pattern = re.compile(pattern)
        self.converters = dict(converters or {})

    def match(self, text: str) -> dict[str, Any] | None:
        """Return converted groups, or None if the text does not match."""
        m = self.pattern.match(text.strip())
        if m is None:
            return None
        groups = m.groupdict()
        for group, convert in self.converters.items():
            if groups.get(group) is not None:
                groups[group] = convert(groups[group])
        return groups

    def parse(self, text: str, request_url: str = "") -> dict[str, Any]:
        """Return converted groups.

        Raises:
            CompoundFieldException: If the text does not match.
        """
        groups = self.match(text)
        if groups is None:
            raise CompoundFieldException(
                self.name, text, self.pattern.pattern, request_url
            )
        return groups

    def extractor(self, group: str) -> Callable[[str], Any]:
        """Transform returning one group; raises on non-matching text."""

        def transform(text: str) -> Any:
            return self.parse(text)[group]

        return transform

    def __repr__(self) -> str:
        return f"CompoundFieldParser({self.name!r}, {self.pattern.pattern!r})"


def parenthesized_counter(unit: str) -> CompoundFieldParser:
    """Parser for ``(<count> <unit>)``, e.g. ``(1,234 replies)``."""
    return CompoundFieldParser(
        unit,
        rf"^\({COUNT} (?P<unit>{re.escape(unit)})\)$",
        {"count": parse_count},
    )


REPLIES = parenthesized_counter("replies")
VOTES = parenthesized_counter("votes")

ONLINE_COUNT = CompoundFieldParser(
    "deviants online",
    rf"^{COUNT}(?P<label>(?: +\w+){{1,2}}) *$",
    {"count": parse_count, "label": str.strip},
)
