"""Pydantic models for the records each page produces."""

from __future__ import annotations

from pydantic import Field

from deviantscrape.common.data_models import ScrapedData


class DailyDeviation(ScrapedData):
    """One entry of the Daily Deviations list."""

    title: str = Field(..., description="Deviation title")
    desc: str | None = Field(None, description="Entry description text")
    link: str = Field(..., description="Deviation URL")


class NewsItem(ScrapedData):
    """One report on a site news page."""

    love: str | None = Field(None, description="Love counter text")
    title: str | None = None
    author: str | None = None
    summary: str | None = None


class JournalEntry(ScrapedData):
    """One entry of a user's journal list."""

    title: str | None = None
    date: str | None = None
    url: str = Field(..., description="Absolute URL of the entry")


class UserProfile(ScrapedData):
    """A user's profile page."""

    avatar_path: str
    status: str | None = None
    deviant_type: str | None = None
    sex: str | None = None
    location: str | None = None
    online_status: str | None = None
    deviant_since: str | None = None
    subscribed_since: str | None = None

    scraps_count: int | None = None
    made_comments_count: int | None = None
    got_comments_count: int | None = None
    forum_posts_count: int | None = None
    news_comments_count: int | None = None
    deviations_count: int | None = None
    pageviews_count: int | None = None

    user_website: str | None = None
    user_email: str | None = None
    user_aim: str | None = None
    user_msn: str | None = None
    user_yahoo: str | None = None
    user_icq: str | None = None
    user_skype: str | None = None
    user_age: str | None = None
    user_residence: str | None = None
    fav_deviantwear_size: str | None = None
    fav_print_size: str | None = None
    interests: str | None = None
    fav_movies: str | None = None
    fav_bands: str | None = None
    fav_musics: str | None = None
    fav_artists: str | None = None
    fav_poet_writer: str | None = None
    fav_photographers: str | None = None
    fav_style: str | None = None
    fav_os: str | None = None
    fav_mp3_players: str | None = None
    fav_shells: str | None = None
    fav_wallpapers: str | None = None
    fav_skins: str | None = None
    fav_games: str | None = None
    fav_game_platforms: str | None = None
    fav_cartoon_character: str | None = None
    pers_quote: str | None = None
    tools: str | None = None


class PopularJournal(ScrapedData):
    title: str | None = None
    author: str | None = None
    url: str


class LastComment(ScrapedData):
    author: str
    url: str | None = None


class Deviousness(ScrapedData):
    """The current Deviousness award."""

    nickname: str
    text: str | None = None


class ForumThread(ScrapedData):
    title: str
    url: str | None = None
    author: str
    replies: int | None = None


class UserPoll(ScrapedData):
    title: str
    url: str | None = None
    author: str
    votes: int | None = None


class TodaySummary(ScrapedData):
    """The site-wide aggregate shown on the today page."""

    moods: dict[str, str] = Field(default_factory=dict)
    popular_journals: list[PopularJournal] = Field(default_factory=list)
    last_comments: list[LastComment] = Field(default_factory=list)
    deviousness: Deviousness | None = None
    daily_deviations: int | None = None
    total_deviants_online: int | None = None
    deviants_online: dict[str, int] = Field(default_factory=dict)
    popular_threads: list[ForumThread] = Field(default_factory=list)
    popular_polls: list[UserPoll] = Field(default_factory=list)
    new_deviants: list[str] = Field(default_factory=list)
    popular_deviants: list[str] = Field(default_factory=list)
