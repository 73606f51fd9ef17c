"""Page extraction profiles, one per page type."""

from deviantscrape.pages.daily_deviations import DailyDeviationsPage
from deviantscrape.pages.site_news import SiteNewsPage
from deviantscrape.pages.site_today import SiteTodayPage
from deviantscrape.pages.user_journal import UserJournalPage
from deviantscrape.pages.user_profile import UserProfilePage

__all__ = [
    "DailyDeviationsPage",
    "SiteNewsPage",
    "SiteTodayPage",
    "UserJournalPage",
    "UserProfilePage",
]
