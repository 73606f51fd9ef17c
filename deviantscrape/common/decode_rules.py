"""Ordered decode rules that turn raw node text into typed fields.

Profile stats and info boxes are lists of free text items ("1,234
Pageviews", "Website example.com") whose order on the page is not fixed.
Each item is matched against an ordered table of rules: the first rule
whose keyword appears in the text owns the item, and its transform
produces the field value. An item no rule claims is dropped.

Label removal is literal. A rule knows the exact label text it expects,
and if the page changes that wording the transform declines and the field
is omitted rather than sliced at a stale offset.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from deviantscrape.data_types import FieldValue, Record

logger = logging.getLogger(__name__)

THOUSANDS_SEPARATOR = ","

Transform = Callable[[str], FieldValue]


def parse_count(text: str) -> int:
    """Parse an integer after removing thousands separators.

    >>> parse_count(" 1,234 ")
    1234

    Raises:
        ValueError: If what remains is not a whole number.
    """
    digits = text.strip().replace(THOUSANDS_SEPARATOR, "")
    if not digits.isdigit():
        raise ValueError(f"not a count: {text!r}")
    return int(digits)


def strip_prefix(text: str, prefix: str) -> str | None:
    """Remove a literal leading label, or return None if it is not there."""
    if not text.startswith(prefix):
        return None
    return text[len(prefix) :]


def strip_suffix(text: str, suffix: str) -> str | None:
    """Remove a literal trailing label, or return None if it is not there."""
    if not text.endswith(suffix):
        return None
    return text[: len(text) - len(suffix)]


def split_fields(
    text: str, fields: Sequence[str], delimiter: str = "/"
) -> Record:
    """Split text on a delimiter into a fixed set of named fields.

    Parts are assigned to ``fields`` in order. If there are fewer parts
    than fields the trailing fields are left out; extra parts are ignored.

    >>> split_fields("Male/Italy", ("sex", "location"))
    {'sex': 'Male', 'location': 'Italy'}
    >>> split_fields("Female", ("sex", "location"))
    {'sex': 'Female'}
    """
    parts = text.split(delimiter)
    return dict(zip(fields, parts))


@dataclass(frozen=True)
class DecodeRule:
    """One (predicate, transform) entry in a decode table.

    Attributes:
        field: Record key the decoded value is stored under.
        predicate: Test on the raw text deciding whether this rule owns it.
        transform: Converts the raw text to a value, or returns None to
            decline (the field is then omitted).
    """

    field: str
    predicate: Callable[[str], bool]
    transform: Transform

    def matches(self, text: str) -> bool:
        return self.predicate(text)

    def apply(self, text: str) -> Record:
        value = self.transform(text)
        if value is None:
            logger.debug(
                "Rule for %s declined text %r", self.field, text
            )
            return {}
        return {self.field: value}

    def decode(self, text: str) -> Record:
        """Apply the transform if the predicate holds, else return ``{}``."""
        if not self.matches(text):
            return {}
        return self.apply(text)


def contains(keyword: str) -> Callable[[str], bool]:
    """Predicate factory for substring containment."""

    def predicate(text: str) -> bool:
        return keyword in text

    predicate.__name__ = f"contains_{keyword!r}"
    return predicate


def labelled(field: str, keyword: str, label: str) -> DecodeRule:
    """Rule for ``<label><value>`` text, yielding the value as a string.

    Args:
        field: Record key.
        keyword: Substring that identifies the item.
        label: Exact leading label removed from the stripped text.
    """

    def transform(text: str) -> str | None:
        value = strip_prefix(text.strip(), label)
        return value.strip() if value is not None else None

    return DecodeRule(field, contains(keyword), transform)


def counted(field: str, keyword: str, label: str | None = None) -> DecodeRule:
    """Rule for ``<count> <label>`` text, yielding an integer.

    The count is whatever precedes ``label`` (``keyword`` when no label is
    given), with thousands separators removed.
    """
    marker = label if label is not None else keyword

    def transform(text: str) -> int | None:
        head, found, _ = text.partition(marker)
        if not found:
            return None
        try:
            return parse_count(head)
        except ValueError:
            return None

    return DecodeRule(field, contains(keyword), transform)


class DecodeRuleTable:
    """An ordered list of decode rules where the first match wins.

    Example::

        table = DecodeRuleTable(
            [counted("forum_posts_count", "Forum Post")],
            "profile stats",
        )
        table.decode("42 Forum Posts")   # {"forum_posts_count": 42}
        table.decode("Badge Count: 3")   # {}
    """

    def __init__(self, rules: Iterable[DecodeRule], description: str) -> None:
        self.rules: tuple[DecodeRule, ...] = tuple(rules)
        self.description = description

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def fields(self) -> list[str]:
        return [rule.field for rule in self.rules]

    def match(self, text: str) -> DecodeRule | None:
        """Return the first rule whose predicate holds for ``text``."""
        for rule in self.rules:
            if rule.matches(text):
                return rule
        return None

    def decode(self, text: str) -> Record:
        """Decode one text item into at most one field.

        Only the first matching rule is consulted; if its transform declines,
        later rules are not tried.
        """
        rule = self.match(text)
        if rule is None:
            logger.debug(
                "No %s rule for text %r, ignoring", self.description, text
            )
            return {}
        return rule.apply(text)

    def decode_all(self, texts: Iterable[str]) -> Record:
        """Decode every item independently and merge the results in order."""
        record: Record = {}
        for text in texts:
            record.update(self.decode(text))
        return record
