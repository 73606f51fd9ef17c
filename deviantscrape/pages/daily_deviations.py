"""Daily Deviations list page."""

from __future__ import annotations

from deviantscrape.common.assembler import FieldSpec, RecordTemplate
from deviantscrape.common.page_element import PageElement
from deviantscrape.data_types import BasePage, Record
from deviantscrape.pages.models import DailyDeviation

DAILY_DEVIATIONS_URL = "http://today.deviantart.com/dds/"


def _is_deviation_link(node: PageElement) -> bool:
    return "/deviation/" in (node.get_attribute("href") or "")


DAILY_DEVIATION_ENTRIES = RecordTemplate(
    ".ddinfo",
    [
        FieldSpec(
            "title",
            "a",
            first=True,
            where=_is_deviation_link,
            required=True,
        ),
        FieldSpec("desc", None, strip=True),
        FieldSpec(
            "link",
            "a",
            attribute="href",
            where=_is_deviation_link,
            required=True,
        ),
    ],
    "daily deviations",
)


class DailyDeviationsPage(BasePage):
    """The list of today's Daily Deviations.

    Each ``.ddinfo`` block yields ``{title, desc, link}``; the link is the
    first anchor pointing at a ``/deviation/`` URL.
    """

    model = DailyDeviation
    many = True

    @property
    def url(self) -> str:
        return DAILY_DEVIATIONS_URL

    def parse(self, page: PageElement) -> list[Record]:
        return DAILY_DEVIATION_ENTRIES.assemble(page)
