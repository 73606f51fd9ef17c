"""Tests for the deviantscrape command line interface."""

import httpx
import pytest
from click.testing import CliRunner

import deviantscrape.cli as cli_module
from deviantscrape.cli import cli
from deviantscrape.common.request_manager import SyncRequestManager
from deviantscrape.config import ScraperSettings


@pytest.fixture
def serve(monkeypatch):
    """Point the CLI at a mock transport serving fixed markup per URL."""

    def _serve(pages: dict[str, str], status_code: int = 200) -> list[str]:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            body = pages.get(str(request.url))
            if body is None:
                return httpx.Response(404, text="<html><body></body></html>")
            return httpx.Response(status_code, text=body)

        transport = httpx.MockTransport(handler)

        class MockSettings(ScraperSettings):
            def request_manager(self) -> SyncRequestManager:
                return SyncRequestManager(
                    timeout=self.timeout, transport=transport
                )

        monkeypatch.setattr(
            cli_module, "load_settings", lambda path=None: MockSettings()
        )
        return requested

    return _serve


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_journal(self, runner, serve, journal_html):
        serve({"http://nick.deviantart.com/journal/": journal_html})

        result = runner.invoke(cli, ["journal", "nick"])

        assert result.exit_code == 0, result.output
        assert '"title": "Title A"' in result.output
        assert '"url": "http://nick.deviantart.com/y"' in result.output

    def test_news_section_selects_url(self, runner, serve):
        requested = serve(
            {
                "http://news.deviantart.com/browse/fun/": (
                    "<html><body><p>none</p></body></html>"
                )
            }
        )

        result = runner.invoke(cli, ["news", "--section", "fun"])

        assert result.exit_code == 0, result.output
        assert requested == ["http://news.deviantart.com/browse/fun/"]
        assert "[]" in result.output

    def test_news_unknown_section_lists_front_page(self, runner, serve):
        """An unknown section shall fall back to the front page."""
        requested = serve(
            {
                "http://news.deviantart.com/browse/front/": (
                    "<html><body><p>none</p></body></html>"
                )
            }
        )

        result = runner.invoke(cli, ["news", "--section", "sports"])

        assert result.exit_code == 0, result.output
        assert requested == ["http://news.deviantart.com/browse/front/"]

    def test_validate_flag(self, runner, serve, journal_html):
        serve({"http://nick.deviantart.com/journal/": journal_html})

        result = runner.invoke(cli, ["--validate", "journal", "nick"])

        assert result.exit_code == 0, result.output
        assert '"date": "Jan 2"' in result.output

    def test_structural_error_exits_nonzero(self, runner, serve):
        serve(
            {
                "http://nick.deviantart.com/": (
                    "<html><body><p>suspended</p></body></html>"
                )
            }
        )

        result = runner.invoke(cli, ["profile", "nick"])

        assert result.exit_code == 1
        assert "HTML structure mismatch" in result.output

    def test_server_error_exits_nonzero(self, runner, serve, journal_html):
        serve(
            {"http://nick.deviantart.com/journal/": journal_html},
            status_code=503,
        )

        result = runner.invoke(cli, ["journal", "nick"])

        assert result.exit_code == 1
        assert "HTTP 503" in result.output

    def test_blank_nickname_is_bad_parameter(self, runner, serve):
        requested = serve({})

        result = runner.invoke(cli, ["journal", " "])

        assert result.exit_code == 2
        assert requested == []

    def test_timeout_option_overrides_settings(
        self, runner, serve, monkeypatch, journal_html
    ):
        serve({"http://nick.deviantart.com/journal/": journal_html})
        seen = {}
        original = cli_module._run

        def spy(ctx, page):
            seen["timeout"] = ctx.obj["settings"].timeout
            original(ctx, page)

        monkeypatch.setattr(cli_module, "_run", spy)

        result = runner.invoke(cli, ["--timeout", "3", "journal", "nick"])

        assert result.exit_code == 0, result.output
        assert seen["timeout"] == 3.0

    def test_nickname_with_host_is_bad_parameter(self, runner, serve):
        requested = serve({})

        result = runner.invoke(cli, ["profile", "evil.example.com/"])

        assert result.exit_code == 2
        assert requested == []
