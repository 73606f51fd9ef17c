"""Positional pairing of parallel node sequences.

Some page regions lay out one logical item across separate lists, e.g. a
column of mood labels next to a column of mood counters, or commenter names
next to comment thumbnails. These helpers zip such lists back together by
index. Lists of unequal length mean the layout has shifted and are rejected.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from deviantscrape.common.exceptions import (
    PairingLengthMismatchException,
)
from deviantscrape.data_types import Record

T = TypeVar("T")

_WHITESPACE = re.compile(r"\s+")


def label_key(label: str) -> str:
    """Normalize a page label into an identifier-style mapping key.

    >>> label_key(" Happy ")
    'happy'
    >>> label_key("Senior  Members")
    'senior_members'
    """
    return _WHITESPACE.sub("_", label.strip().lower())


def pair_sequences(
    *sequences: Sequence[T], description: str, request_url: str = ""
) -> list[tuple[T, ...]]:
    """Zip sequences by index, requiring equal lengths.

    Raises:
        PairingLengthMismatchException: If the sequences differ in length.
    """
    lengths = [len(seq) for seq in sequences]
    if len(set(lengths)) > 1:
        raise PairingLengthMismatchException(
            description, lengths, request_url
        )
    return list(zip(*sequences))


def pair_records(
    fields: Mapping[str, Sequence[Any]],
    description: str,
    request_url: str = "",
) -> list[Record]:
    """Build one record per index from named parallel sequences.

    Example::

        pair_records({"author": ["a", "b"], "url": ["/1", "/2"]}, "comments")
        # [{"author": "a", "url": "/1"}, {"author": "b", "url": "/2"}]

    Raises:
        PairingLengthMismatchException: If the sequences differ in length.
    """
    names = list(fields)
    rows = pair_sequences(
        *fields.values(), description=description, request_url=request_url
    )
    return [dict(zip(names, row)) for row in rows]


def labelled_mapping(
    labels: Sequence[str],
    values: Sequence[T],
    description: str,
    request_url: str = "",
) -> dict[str, T]:
    """Map normalized labels to the value at the same index.

    Raises:
        PairingLengthMismatchException: If the sequences differ in length.
    """
    return {
        label_key(label): value
        for label, value in pair_sequences(
            labels, values, description=description, request_url=request_url
        )
    }
