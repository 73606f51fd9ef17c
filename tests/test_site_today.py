"""Tests for the site "today" page profile."""

import logging

import pytest

from deviantscrape.common.exceptions import (
    HTMLStructuralAssumptionException,
    PairingLengthMismatchException,
    ScraperAssumptionException,
)
from deviantscrape.pages import SiteTodayPage
from deviantscrape.pages.models import TodaySummary


@pytest.fixture
def today_record(today_page):
    return SiteTodayPage().parse(today_page)


class TestSiteTodayPage:
    def test_url(self):
        assert SiteTodayPage().url == "http://today.deviantart.com/"

    def test_keys_in_order(self, today_record):
        assert list(today_record) == [
            "moods",
            "popular_journals",
            "last_comments",
            "deviousness",
            "daily_deviations",
            "total_deviants_online",
            "deviants_online",
            "popular_threads",
            "popular_polls",
            "new_deviants",
            "popular_deviants",
        ]

    def test_moods(self, today_record):
        assert today_record["moods"] == {"happy": "40%", "sad": "10%"}

    def test_popular_journals(self, today_record):
        assert today_record["popular_journals"] == [
            {"title": "Journal One", "author": "alice", "url": "/journal/1"},
            {"title": "Journal Two", "author": "bob", "url": "/journal/2"},
        ]

    def test_last_comments(self, today_record):
        assert today_record["last_comments"] == [
            {"author": "carol", "url": "/comment/1"},
            {"author": "dave", "url": "/comment/2"},
        ]

    def test_deviousness(self, today_record):
        assert today_record["deviousness"] == {
            "nickname": "erin",
            "text": "Awarded for being devious.",
        }

    def test_counters(self, today_record):
        assert today_record["daily_deviations"] == 1234
        assert today_record["total_deviants_online"] == 12345

    def test_deviants_online_skips_unparseable_items(self, today_record):
        assert today_record["deviants_online"] == {
            "members": 10000,
            "senior_members": 2000,
        }

    def test_popular_threads(self, today_record):
        assert today_record["popular_threads"] == [
            {
                "title": "Thread One",
                "url": "/forum/1",
                "author": "frank",
                "replies": 1234,
            },
            {
                "title": "Thread Two",
                "url": "/forum/2",
                "author": "gina",
                "replies": 5,
            },
        ]

    def test_popular_polls(self, today_record):
        assert today_record["popular_polls"] == [
            {"title": "Poll One", "url": "/poll/1", "author": "hank", "votes": 42}
        ]

    def test_user_names(self, today_record):
        assert today_record["new_deviants"] == ["ivy", "jack"]
        assert today_record["popular_deviants"] == ["kim"]

    def test_record_validates(self, today_record):
        summary = SiteTodayPage().confirm(today_record)

        assert isinstance(summary, TodaySummary)
        assert summary.popular_threads[0].replies == 1234
        assert summary.deviousness is not None
        assert summary.deviousness.nickname == "erin"

    def test_parse_is_repeatable(self, today_page):
        page = SiteTodayPage()

        assert page.parse(today_page) == page.parse(today_page)


class TestSiteTodayPageFailures:
    def test_malformed_thread_counter_skips_thread(
        self, make_page, today_html, caplog
    ):
        tree = make_page(
            today_html.replace("(5 replies)", "(five replies)"),
            "http://today.deviantart.com/",
        )

        with caplog.at_level(logging.WARNING):
            record = SiteTodayPage().parse(tree)

        assert [t["title"] for t in record["popular_threads"]] == [
            "Thread One"
        ]
        assert "popular forum threads" in caplog.text

    def test_missing_deviousness_is_omitted(self, make_page, today_html):
        tree = make_page(
            today_html.replace('class="ppb"', 'class="gone"'),
            "http://today.deviantart.com/",
        )

        assert "deviousness" not in SiteTodayPage().parse(tree)

    def test_mood_mismatch_raises(self, make_page, today_html):
        tree = make_page(
            today_html.replace("<dt> 10% </dt>", ""),
            "http://today.deviantart.com/",
        )

        with pytest.raises(PairingLengthMismatchException):
            SiteTodayPage().parse(tree)

    def test_last_comment_mismatch_raises(self, make_page, today_html):
        """A comment author without a link shall fail instead of shifting pairs."""
        tree = make_page(
            today_html.replace(
                '<span class="shadow"><a href="/comment/2">y</a></span>', ""
            ),
            "http://today.deviantart.com/",
        )

        with pytest.raises(PairingLengthMismatchException) as exc_info:
            SiteTodayPage().parse(tree)

        assert exc_info.value.lengths == [2, 1]
        assert "'last comments'" in str(exc_info.value)

    def test_missing_section_raises(self, make_page, today_html):
        tree = make_page(
            today_html.replace("Popular User Polls", "Polls"),
            "http://today.deviantart.com/",
        )

        with pytest.raises(HTMLStructuralAssumptionException):
            SiteTodayPage().parse(tree)

    def test_bad_daily_deviations_counter_raises(self, make_page, today_html):
        tree = make_page(
            today_html.replace("1,234 Daily Deviations", "Daily Deviations"),
            "http://today.deviantart.com/",
        )

        with pytest.raises(ScraperAssumptionException) as exc_info:
            SiteTodayPage().parse(tree)

        assert "Daily Deviations" in exc_info.value.message

    def test_too_few_box_headings_raises(self, make_page, today_html):
        tree = make_page(
            today_html.replace("<h3>Filler 6</h3>", ""),
            "http://today.deviantart.com/",
        )

        with pytest.raises(HTMLStructuralAssumptionException) as exc_info:
            SiteTodayPage().parse(tree)

        assert exc_info.value.selector == ".pppt h3"
