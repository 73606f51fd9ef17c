"""The site "today" page: a single aggregate record.

The page is a patchwork of small boxes. Each box is extracted by its own
method below and stored under one key of the result; a box whose heading
or required node is missing fails the whole page.
"""

from __future__ import annotations

import logging

from deviantscrape.common.assembler import (
    FieldSpec,
    RecordTemplate,
    find_section,
)
from deviantscrape.common.compound import (
    ONLINE_COUNT,
    REPLIES,
    VOTES,
    CompoundFieldParser,
)
from deviantscrape.common.decode_rules import parse_count, strip_suffix
from deviantscrape.common.exceptions import ScraperAssumptionException
from deviantscrape.common.page_element import PageElement
from deviantscrape.common.pairing import (
    label_key,
    labelled_mapping,
    pair_records,
)
from deviantscrape.data_types import BasePage, Record
from deviantscrape.pages.models import TodaySummary

logger = logging.getLogger(__name__)

TODAY_URL = "http://today.deviantart.com/"

SECTION_HEADINGS = ".flatview .section h3"
DAILY_DEVIATIONS_HEADING = 11

POPULAR_JOURNALS = RecordTemplate(
    ".pppt .iconleft .abridged .userjournal",
    [
        FieldSpec("title", "h3"),
        FieldSpec("author", "a .u"),
        FieldSpec("url", "h3 a", attribute="href", required=True),
    ],
    "popular journals",
)

DEVIOUSNESS = RecordTemplate(
    ".block .pppt .ppb",
    [
        FieldSpec("nickname", "a .u", first=True, required=True),
        FieldSpec("text", "p"),
    ],
    "deviousness",
)


def _linked_entry(
    counter_field: str, parser: CompoundFieldParser, description: str
) -> RecordTemplate:
    """Template for ``<li><a>title</a> by <a>user</a> <span>(n)</span>``."""
    return RecordTemplate(
        "li",
        [
            FieldSpec("title", "a", index=0, required=True),
            FieldSpec("url", "a", attribute="href", index=0, required=True),
            FieldSpec("author", "a", index=1, required=True),
            FieldSpec(
                counter_field,
                "span",
                strip=True,
                transform=parser.extractor("count"),
            ),
        ],
        description,
    )


POPULAR_THREADS = _linked_entry("replies", REPLIES, "popular forum threads")
POPULAR_POLLS = _linked_entry("votes", VOTES, "popular user polls")

USER_NAMES = RecordTemplate(
    "li", [FieldSpec("nickname", "a .u")], "deviant names"
)


class SiteTodayPage(BasePage):
    """Today's site-wide summary."""

    model = TodaySummary

    @property
    def url(self) -> str:
        return TODAY_URL

    def parse(self, page: PageElement) -> Record:
        record: Record = {}
        record["moods"] = self.moods(page)
        record["popular_journals"] = POPULAR_JOURNALS.assemble(page)
        record["last_comments"] = self.last_comments(page)

        deviousness = DEVIOUSNESS.assemble(page)
        if deviousness:
            record["deviousness"] = deviousness[0]

        record["daily_deviations"] = self.daily_deviations(page)
        record["total_deviants_online"] = self.total_deviants_online(page)
        record["deviants_online"] = self.deviants_online(page)
        record["popular_threads"] = POPULAR_THREADS.assemble(
            find_section(
                page,
                SECTION_HEADINGS,
                "Popular Forum Threads",
                "forum threads",
            )
        )
        record["popular_polls"] = POPULAR_POLLS.assemble(
            find_section(
                page, SECTION_HEADINGS, "Popular User Polls", "user polls"
            )
        )
        record["new_deviants"] = self.names_under(page, "New Deviants")
        record["popular_deviants"] = self.names_under(
            page, "Popular Deviants Today"
        )
        return record

    def moods(self, page: PageElement) -> dict[str, str]:
        labels = page.query_css("dl .f .graph dd", "mood labels", min_count=0)
        counters = page.query_css(
            "dl .f .graph dt", "mood counters", min_count=0
        )
        return labelled_mapping(
            [label.text_content() for label in labels],
            [counter.text_content().strip() for counter in counters],
            "moods",
            page.url,
        )

    def last_comments(self, page: PageElement) -> list[Record]:
        authors = page.query_css(
            ".c .block .pppt .u", "comment authors", min_count=0
        )
        links = page.query_css(
            ".c .block .pppt .shadow a", "comment links", min_count=0
        )
        return pair_records(
            {
                "author": [author.text_content() for author in authors],
                "url": [link.get_attribute("href") for link in links],
            },
            "last comments",
            page.url,
        )

    def daily_deviations(self, page: PageElement) -> int:
        headings = page.query_css(
            ".pppt h3",
            "box headings",
            min_count=DAILY_DEVIATIONS_HEADING + 1,
        )
        text = headings[DAILY_DEVIATIONS_HEADING].text_content().strip()
        return self._count_before(text, " Daily Deviations", page.url)

    def total_deviants_online(self, page: PageElement) -> int:
        heading = page.query_css(SECTION_HEADINGS, "section headings")[0]
        text = heading.text_content().strip()
        return self._count_before(text, " Deviants Online", page.url)

    def deviants_online(self, page: PageElement) -> dict[str, int]:
        items = page.query_css(
            ".flatview .section .ppppb .block ul .f li .f",
            "deviants online by kind",
            min_count=0,
        )
        kinds: dict[str, int] = {}
        for item in items:
            parsed = ONLINE_COUNT.match(item.text_content())
            if parsed is None:
                logger.debug(
                    "Ignoring online count %r", item.text_content()
                )
                continue
            kinds[label_key(parsed["label"])] = parsed["count"]
        return kinds

    def names_under(self, page: PageElement, heading: str) -> list[str]:
        section = find_section(page, SECTION_HEADINGS, heading, heading)
        return [
            entry.get("nickname", "") for entry in USER_NAMES.assemble(section)
        ]

    @staticmethod
    def _count_before(text: str, suffix: str, url: str) -> int:
        head = strip_suffix(text, suffix)
        try:
            if head is None:
                raise ValueError(f"missing {suffix.strip()!r}")
            return parse_count(head)
        except ValueError as e:
            raise ScraperAssumptionException(
                f"Unexpected counter text {text!r}",
                request_url=url,
                context={"expected_suffix": suffix, "error": str(e)},
            ) from e
