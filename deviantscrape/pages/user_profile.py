"""A user's profile page.

The profile has three regions:

* ``#deviant-info``: a fixed-order list (status, deviant type,
  sex/location, online status, member since, optionally subscriber since).
* ``#deviant-stats``: counters in no fixed order, each a number followed
  by its label.
* ``#deviant-infobox``: free-form "label value" lines, also in no fixed
  order and often with many of them missing.

The latter two are decoded with rule tables; rule order matters wherever
one keyword contains another ("Deviation Comment" before "Deviation").
"""

from __future__ import annotations

import logging

from deviantscrape.common.decode_rules import (
    DecodeRuleTable,
    counted,
    labelled,
    split_fields,
)
from deviantscrape.common.page_element import PageElement
from deviantscrape.data_types import BasePage, Record, validate_nickname
from deviantscrape.pages.models import UserProfile
from deviantscrape.pages.user_journal import user_url

logger = logging.getLogger(__name__)

STATUS = labelled("status", "Status", "Status: ")
DEVIANT_SINCE = labelled("deviant_since", "since", "Deviant since ")
SUBSCRIBED_SINCE = labelled("subscribed_since", "since", "Subscribed since ")

# Index of each positional item in #deviant-info
INFO_MIN_ITEMS = 5
SUBSCRIBED_INDEX = 5

STATS = DecodeRuleTable(
    [
        counted("scraps_count", "Scrap"),
        counted("made_comments_count", "Deviation Comment"),
        counted("got_comments_count", "Deviant Comment"),
        counted("forum_posts_count", "Forum Post"),
        counted("news_comments_count", "News Comment"),
        counted("deviations_count", "Deviation"),
        counted("pageviews_count", "Pageview"),
    ],
    "profile stats",
)

INFOBOX = DecodeRuleTable(
    [
        labelled("user_website", "Website", "Website "),
        labelled("user_email", "Email", "Email "),
        labelled("user_aim", "AIM", "AIM "),
        labelled("user_msn", "MSN", "MSN "),
        labelled("user_yahoo", "Yahoo", "Yahoo "),
        labelled("user_icq", "ICQ", "ICQ "),
        labelled("user_skype", "Skype", "Skype "),
        labelled("user_age", "Age", "Current Age: "),
        labelled("user_residence", "Residence", "Current Residence: "),
        labelled(
            "fav_deviantwear_size",
            "deviantWEAR",
            "Favourite deviantWEAR sizing: ",
        ),
        labelled("fav_print_size", "Print", "Print preference: "),
        labelled("interests", "Interest", "Interests: "),
        labelled("fav_movies", "movie", "Favourite movie: "),
        labelled("fav_bands", "band", "Favourite band or musician: "),
        labelled("fav_musics", "of music", "Favourite genre of music: "),
        labelled("fav_artists", "artist", "Favourite artist: "),
        labelled("fav_poet_writer", "poet", "Favourite poet or writer: "),
        labelled(
            "fav_photographers", "photographer", "Favourite photographer: "
        ),
        labelled(
            "fav_style", "digital art", "Favourite style or digital art: "
        ),
        labelled("fav_os", "Operating", "Operating System: "),
        labelled("fav_mp3_players", "MP3", "MP3 player of choice: "),
        labelled("fav_shells", "Shell", "Shell of choice: "),
        labelled("fav_wallpapers", "Wallpaper", "Wallpaper of choice: "),
        labelled("fav_skins", "Skin", "Skin of choice: "),
        labelled("fav_games", "game", "Favourite game: "),
        labelled(
            "fav_game_platforms",
            "gaming platform",
            "Favourite gaming platform: ",
        ),
        labelled(
            "fav_cartoon_character",
            "cartoon character",
            "Favourite cartoon character: ",
        ),
        labelled("pers_quote", "Quote", "Personal Quote: "),
        labelled("tools", "the Trade", "Tools of the Trade: "),
    ],
    "profile info box",
)


class UserProfilePage(BasePage):
    """Profile data of one user.

    Raises:
        InvalidParameterException: If ``nickname`` is not a non-empty string.
    """

    model = UserProfile

    def __init__(self, nickname: str) -> None:
        self.nickname = validate_nickname(nickname)

    @property
    def url(self) -> str:
        return user_url(self.nickname)

    def parse(self, page: PageElement) -> Record:
        record: Record = {}

        avatar = page.query_css("img.avatar", "avatar image", max_count=None)
        src = avatar[0].get_attribute("src")
        if src is not None:
            record["avatar_path"] = src

        record.update(self._parse_info(page))

        stats = page.query_css(
            "#deviant-stats li", "profile stats", min_count=0
        )
        record.update(STATS.decode_all(li.text_content() for li in stats))

        infobox = page.query_css(
            "#deviant-infobox.box ul.f li", "profile info box", min_count=0
        )
        record.update(INFOBOX.decode_all(li.text_content() for li in infobox))

        return record

    def _parse_info(self, page: PageElement) -> Record:
        items = [
            li.text_content()
            for li in page.query_css(
                "#deviant-info li", "deviant info", min_count=INFO_MIN_ITEMS
            )
        ]
        record: Record = {}
        record.update(STATUS.decode(items[0]))
        record["deviant_type"] = items[1].strip()
        record.update(split_fields(items[2].strip(), ("sex", "location")))
        record["online_status"] = items[3].strip()
        record.update(DEVIANT_SINCE.decode(items[4]))
        if len(items) > SUBSCRIBED_INDEX:
            record.update(SUBSCRIBED_SINCE.decode(items[SUBSCRIBED_INDEX]))
        return record
