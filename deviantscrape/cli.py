"""deviantscrape CLI: fetch a page and print its records as JSON.

Usage:
    deviantscrape today
    deviantscrape dds
    deviantscrape news --section art
    deviantscrape journal NICKNAME
    deviantscrape profile NICKNAME --validate
"""

from __future__ import annotations

import json
import logging
from typing import Any

import click

from deviantscrape.common.exceptions import (
    InvalidParameterException,
    ScraperAssumptionException,
    TransientException,
)
from deviantscrape.config import load_settings
from deviantscrape.data_types import BasePage, Section
from deviantscrape.driver.sync_driver import SyncDriver
from deviantscrape.pages import (
    DailyDeviationsPage,
    SiteNewsPage,
    SiteTodayPage,
    UserJournalPage,
    UserProfilePage,
)


@click.group()
@click.version_option(package_name="deviantscrape")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON settings file.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Request timeout in seconds (overrides the settings file).",
)
@click.option(
    "--validate",
    is_flag=True,
    help="Validate records against their typed models before printing.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    timeout: float | None,
    validate: bool,
    verbose: bool,
) -> None:
    """Extract records from deviantART pages."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(config_path)
    if timeout is not None:
        settings = settings.model_copy(update={"timeout": timeout})

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["validate"] = validate


def _run(ctx: click.Context, page: BasePage) -> None:
    settings = ctx.obj["settings"]
    with settings.request_manager() as manager:
        driver = SyncDriver(manager)
        try:
            result = driver.run(page)
        except (
            InvalidParameterException,
            ScraperAssumptionException,
            TransientException,
        ) as e:
            raise click.ClickException(str(e)) from e

    data: Any = result.data
    if ctx.obj["validate"]:
        try:
            confirmed = page.confirm(result.data)
        except ScraperAssumptionException as e:
            raise click.ClickException(str(e)) from e
        if isinstance(confirmed, list):
            data = [item.to_record() for item in confirmed]
        else:
            data = confirmed.to_record()

    click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    click.echo(
        f"{result.url}: fetch {result.fetch_time:.3f}s, "
        f"parse {result.parse_time:.3f}s, total {result.total_time:.3f}s",
        err=True,
    )


def _user_page(page_class: type[BasePage], nickname: str) -> BasePage:
    try:
        return page_class(nickname)  # type: ignore[call-arg]
    except InvalidParameterException as e:
        raise click.BadParameter(str(e), param_hint="NICKNAME") from e


@cli.command()
@click.pass_context
def today(ctx: click.Context) -> None:
    """Today's site-wide summary."""
    _run(ctx, SiteTodayPage())


@cli.command()
@click.pass_context
def dds(ctx: click.Context) -> None:
    """Today's Daily Deviations."""
    _run(ctx, DailyDeviationsPage())


@cli.command()
@click.option(
    "--section",
    default=Section.FRONT.value,
    show_default=True,
    help=(
        "News section to list: "
        + ", ".join(section.value for section in Section)
        + ". Unknown sections list the front page."
    ),
)
@click.pass_context
def news(ctx: click.Context, section: str) -> None:
    """Reports in a site news section."""
    _run(ctx, SiteNewsPage(section))


@cli.command()
@click.argument("nickname")
@click.pass_context
def journal(ctx: click.Context, nickname: str) -> None:
    """Journal entries of NICKNAME."""
    _run(ctx, _user_page(UserJournalPage, nickname))


@cli.command()
@click.argument("nickname")
@click.pass_context
def profile(ctx: click.Context, nickname: str) -> None:
    """Profile of NICKNAME."""
    _run(ctx, _user_page(UserProfilePage, nickname))


def main() -> None:
    """Entry point for the ``deviantscrape`` console script."""
    cli()
