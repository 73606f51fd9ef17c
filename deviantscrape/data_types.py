"""Data types shared by page profiles, the driver and the CLI.

Records are plain dicts: field presence is key membership, and a field the
page did not provide is simply not there. Typed views of the same data are
available through the pydantic models each page declares.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Union

if TYPE_CHECKING:
    from deviantscrape.common.data_models import ScrapedData
    from deviantscrape.common.page_element import PageElement

logger = logging.getLogger(__name__)

NICKNAME_PATTERN = re.compile(r"[A-Za-z0-9-]+")

FieldValue = Union[str, int, None, dict[str, Any], list[Any]]
Record = dict[str, Any]
ResultSet = Union[Record, list[Record]]


class Section(Enum):
    """Site news sections and their browse paths."""

    FRONT = "front"
    ART = "art"
    CULTURE = "culture"
    DA = "da"
    FUN = "fun"

    @property
    def path(self) -> str:
        return _SECTION_PATHS[self]

    @classmethod
    def lookup(cls, key: str | Section) -> Section:
        """Resolve a section key, falling back to FRONT for unknown keys."""
        if isinstance(key, Section):
            return key
        try:
            return cls(key)
        except ValueError:
            logger.debug("Unknown news section %r, using front", key)
            return cls.FRONT


_SECTION_PATHS = {
    Section.FRONT: "/browse/front/",
    Section.ART: "/browse/art_news/",
    Section.CULTURE: "/browse/culture/",
    Section.DA: "/browse/deviantart_inc/",
    Section.FUN: "/browse/fun/",
}


def validate_nickname(value: Any) -> str:
    """Return ``value`` if it is usable as a user nickname.

    Raises:
        InvalidParameterException: If it is not a non-empty string of
            letters, digits and hyphens.
    """
    from deviantscrape.common.exceptions import InvalidParameterException

    if not isinstance(value, str):
        raise InvalidParameterException(
            "nickname", value, "expected a string"
        )
    if not value.strip():
        raise InvalidParameterException("nickname", value, "empty")
    if not NICKNAME_PATTERN.fullmatch(value):
        raise InvalidParameterException(
            "nickname", value, "only letters, digits and hyphens allowed"
        )
    return value


@dataclass
class Response:
    """HTTP response from fetching a page.

    Modeled after httpx.Response to provide a familiar interface.

    Attributes:
        status_code: HTTP status code (200, 404, etc.).
        headers: Response headers.
        content: Raw response bytes.
        text: Decoded response text.
        url: The URL that was requested.
    """

    status_code: int
    headers: dict[str, str]
    content: bytes
    text: str
    url: str


@dataclass(frozen=True)
class ExtractionResult:
    """The product of one extraction pass.

    Attributes:
        data: A single record or a list of records in document order.
        elapsed: Wall-clock seconds spent extracting, excluding the fetch.
    """

    data: ResultSet
    elapsed: float


@dataclass(frozen=True)
class PageResult:
    """Records plus timings for one fetched and extracted page.

    Attributes:
        url: The page URL.
        data: A single record or a list of records in document order.
        fetch_time: Seconds spent fetching and building the document tree.
        parse_time: Seconds spent extracting records from the tree.
    """

    url: str
    data: ResultSet
    fetch_time: float
    parse_time: float

    @property
    def total_time(self) -> float:
        return self.fetch_time + self.parse_time


class BasePage:
    """Base class for page extraction profiles.

    A page knows its URL, how to turn a document tree into records, and
    which pydantic model describes one record. Instances hold only their
    constructor parameters; every extraction call is independent and the
    document tree is never stored.

    Subclasses set ``model`` (and ``many`` when the page yields a list of
    records) and implement ``url`` and ``parse``.
    """

    model: ClassVar[type[ScrapedData]]
    many: ClassVar[bool] = False

    @property
    def url(self) -> str:
        raise NotImplementedError

    def parse(self, page: PageElement) -> ResultSet:
        """Extract records from a document tree."""
        raise NotImplementedError

    def extract(self, page: PageElement) -> ExtractionResult:
        """Run parse() and time it.

        Raises:
            ScraperAssumptionException: If the page does not have the
                expected structure.
        """
        start = time.perf_counter()
        data = self.parse(page)
        elapsed = time.perf_counter() - start
        logger.debug(
            "Extracted %s from %s in %.4fs",
            f"{len(data)} records" if self.many else "record",
            self.url,
            elapsed,
        )
        return ExtractionResult(data=data, elapsed=elapsed)

    def confirm(self, data: ResultSet) -> Any:
        """Validate extracted data against the page's model.

        Returns:
            A model instance, or a list of them when ``many`` is set.

        Raises:
            DataFormatAssumptionException: If a record fails validation.
        """
        if self.many:
            return [
                self.model.raw(request_url=self.url, **record).confirm()
                for record in data
            ]
        return self.model.raw(request_url=self.url, **data).confirm()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r})"
