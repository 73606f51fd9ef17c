"""Site news list pages, one per news section."""

from __future__ import annotations

from deviantscrape.common.assembler import FieldSpec, RecordTemplate
from deviantscrape.common.page_element import PageElement
from deviantscrape.data_types import BasePage, Record, Section
from deviantscrape.pages.models import NewsItem

NEWS_URL = "http://news.deviantart.com"

NEWS_ENTRIES = RecordTemplate(
    "#news-main .iconleft .report",
    [
        FieldSpec("love", ".love span"),
        FieldSpec("title", "h2"),
        FieldSpec("author", ".line0 small a .u"),
        FieldSpec("summary", ".text", strip=True),
    ],
    "news reports",
)


class SiteNewsPage(BasePage):
    """Reports listed in one news section.

    Args:
        section: A Section or one of ``front``, ``art``, ``culture``,
            ``da``, ``fun``. Anything else selects the front page.
    """

    model = NewsItem
    many = True

    def __init__(self, section: str | Section = Section.FRONT) -> None:
        self.section = Section.lookup(section)

    @property
    def url(self) -> str:
        return f"{NEWS_URL}{self.section.path}"

    def parse(self, page: PageElement) -> list[Record]:
        return NEWS_ENTRIES.assemble(page)
