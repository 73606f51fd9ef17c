"""Shared fixtures: page markup and a document-tree factory."""

from collections.abc import Callable

import pytest

from deviantscrape.common.lxml_page_element import (
    LxmlPageElement,
    parse_document,
)

JOURNAL_HTML = """
<html>
<body>
    <ul class="pp mglist">
        <li><span class="main"><a href="/x">Title A</a></span><span class="side">Jan 1</span></li>
        <li><span class="main"><a href="/y">Title B</a></span><span class="side">Jan 2</span></li>
    </ul>
</body>
</html>
"""

NEWS_HTML = """
<html>
<body>
    <div id="news-main"><div class="iconleft">
        <div class="report">
            <div class="love"><span>12</span></div>
            <h2>Big News</h2>
            <div class="line0"><small><a href="/u/editor"><span class="u">editor</span></a></small></div>
            <div class="text">  Something happened.  </div>
        </div>
        <div class="report"><h2>Quiet News</h2></div>
    </div></div>
</body>
</html>
"""

DAILY_DEVIATIONS_HTML = """
<html>
<body>
    <div class="ddinfo"><a href="http://alice.deviantart.com/">alice</a> <a href="http://www.deviantart.com/deviation/123/">Sunset</a><div class="foot">Featured by staff</div></div>
    <div class="ddinfo"><a href="http://www.deviantart.com/deviation/456/">Moon</a></div>
</body>
</html>
"""

PROFILE_HTML = """
<html>
<body>
    <img class="avatar" src="http://a.deviantart.com/avatars/n/i/nick.png">
    <div id="deviant-info"><ul>
        <li>Status: Student</li>
        <li>Digital Artist</li>
        <li> Male/Italy </li>
        <li>Online</li>
        <li>Deviant since Jan 1, 2005</li>
        <li>Subscribed since Feb 2, 2006</li>
    </ul></div>
    <div id="deviant-stats"><ul>
        <li>1,234 Deviations</li>
        <li>12 Scraps [browse]</li>
        <li>5,678 Deviation Comments</li>
        <li>910 Deviant Comments</li>
        <li>42 Forum Posts</li>
        <li>3 News Comments</li>
        <li>98,765 Pageviews</li>
        <li>Badge Count: 3</li>
    </ul></div>
    <div id="deviant-infobox" class="box"><ul class="f">
        <li>Website example.com</li>
        <li>Current Age: 25</li>
        <li>Favourite movie: Brazil</li>
        <li>Operating System: Linux</li>
        <li>Personal Quote: Hello there</li>
        <li>Shoe size: 44</li>
    </ul></div>
</body>
</html>
"""

TODAY_HTML = """
<html>
<body>
    <dl><div class="f"><div class="graph">
        <dd>Happy</dd><dt> 40% </dt>
        <dd>Sad</dd><dt> 10% </dt>
    </div></div></dl>

    <div class="pppt">
        <h3>Popular Journals</h3>
        <div class="iconleft"><div class="abridged">
            <div class="userjournal"><h3><a href="/journal/1">Journal One</a></h3><a href="/u/alice"><span class="u">alice</span></a></div>
            <div class="userjournal"><h3><a href="/journal/2">Journal Two</a></h3><a href="/u/bob"><span class="u">bob</span></a></div>
        </div></div>
    </div>

    <div class="c"><div class="block"><div class="pppt">
        <h3>Latest Comments</h3>
        <span class="u">carol</span><span class="shadow"><a href="/comment/1">x</a></span>
        <span class="u">dave</span><span class="shadow"><a href="/comment/2">y</a></span>
    </div></div></div>

    <div class="block"><div class="pppt">
        <h3>Deviousness</h3>
        <div class="ppb"><a href="/u/erin"><span class="u">erin</span></a><p>Awarded for being devious.</p></div>
    </div></div>

    <div class="pppt">
        <h3>Filler 6</h3><h3>Filler 7</h3><h3>Filler 8</h3>
        <h3>Filler 9</h3><h3>Filler 10</h3><h3>Filler 11</h3>
        <h3>1,234 Daily Deviations</h3>
    </div>

    <div class="flatview">
        <div class="section">
            <h3>12,345 Deviants Online</h3>
            <div class="ppppb"><div class="block"><ul><li class="f"><ul>
                <li><span class="f">10,000 Members</span></li>
                <li><span class="f">2,000 Senior Members</span></li>
                <li><span class="f">Staff online</span></li>
            </ul></li></ul></div></div>
        </div>
        <div class="section"><h3>Popular Forum Threads</h3><ul>
            <li><a href="/forum/1">Thread One</a> by <a href="/u/frank">frank</a> <span>(1,234 replies)</span></li>
            <li><a href="/forum/2">Thread Two</a> by <a href="/u/gina">gina</a> <span>(5 replies)</span></li>
        </ul></div>
        <div class="section"><h3>Popular User Polls</h3><ul>
            <li><a href="/poll/1">Poll One</a> by <a href="/u/hank">hank</a> <span>(42 votes)</span></li>
        </ul></div>
        <div class="section"><h3>New Deviants</h3><ul>
            <li><a href="/u/ivy"><span class="u">ivy</span></a></li>
            <li><a href="/u/jack"><span class="u">jack</span></a></li>
        </ul></div>
        <div class="section"><h3>Popular Deviants Today</h3><ul>
            <li><a href="/u/kim"><span class="u">kim</span></a></li>
        </ul></div>
    </div>
</body>
</html>
"""


@pytest.fixture
def make_page() -> Callable[..., LxmlPageElement]:
    """Factory building a document tree from markup."""

    def _make(
        markup: str, url: str = "http://example.deviantart.com/"
    ) -> LxmlPageElement:
        return parse_document(markup, url)

    return _make


@pytest.fixture
def journal_page(make_page) -> LxmlPageElement:
    return make_page(JOURNAL_HTML, "http://nick.deviantart.com/journal/")


@pytest.fixture
def news_page(make_page) -> LxmlPageElement:
    return make_page(NEWS_HTML, "http://news.deviantart.com/browse/front/")


@pytest.fixture
def daily_deviations_page(make_page) -> LxmlPageElement:
    return make_page(
        DAILY_DEVIATIONS_HTML, "http://today.deviantart.com/dds/"
    )


@pytest.fixture
def profile_page(make_page) -> LxmlPageElement:
    return make_page(PROFILE_HTML, "http://nick.deviantart.com")


@pytest.fixture
def today_page(make_page) -> LxmlPageElement:
    return make_page(TODAY_HTML, "http://today.deviantart.com/")


@pytest.fixture
def today_html() -> str:
    """Raw today page markup, for tests that alter it before parsing."""
    return TODAY_HTML


@pytest.fixture
def journal_html() -> str:
    return JOURNAL_HTML
