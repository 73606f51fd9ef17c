"""A user's journal list page."""

from __future__ import annotations

from deviantscrape.common.assembler import FieldSpec, RecordTemplate
from deviantscrape.common.page_element import PageElement
from deviantscrape.data_types import BasePage, Record, validate_nickname
from deviantscrape.pages.models import JournalEntry


def user_url(nickname: str) -> str:
    return f"http://{nickname}.deviantart.com"


class UserJournalPage(BasePage):
    """Journal entries of one user, newest first as the site lists them.

    Entry URLs on the page are host-relative and are prefixed with the
    user's site URL.

    Raises:
        InvalidParameterException: If ``nickname`` is not a non-empty string.
    """

    model = JournalEntry
    many = True

    def __init__(self, nickname: str) -> None:
        self.nickname = validate_nickname(nickname)
        self.user_url = user_url(nickname)
        self._entries = RecordTemplate(
            ".pp.mglist li",
            [
                FieldSpec("title", ".main"),
                FieldSpec("date", ".side"),
                FieldSpec(
                    "url",
                    ".main a",
                    attribute="href",
                    required=True,
                    transform=self._absolute,
                ),
            ],
            "journal entries",
        )

    def _absolute(self, href: str) -> str:
        return f"{self.user_url}{href}"

    @property
    def url(self) -> str:
        return f"{self.user_url}/journal/"

    def parse(self, page: PageElement) -> list[Record]:
        return self._entries.assemble(page)
