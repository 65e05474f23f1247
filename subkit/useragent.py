"""Random user agent strings for browsers and search engine crawlers."""

from __future__ import annotations

import random

BROWSER_USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:89.0) Gecko/20100101 Firefox/89.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.1.1 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.114 Safari/537.36",
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:89.0) Gecko/20100101 Firefox/89.0",
)

_COMPATIBLE_CRAWLERS = (
    "Baiduspider/2.0",
    "Baiduspider-render/2.0",
    "Googlebot/2.1",
    "Googlebot-Image/1.0",
    "bingbot/2.0",
    "Yahoo! Slurp China",
    "Yahoo! Slurp",
)

_STANDALONE_CRAWLERS = (
    "Sogou web spider/4.0",
    "Sogou Pic Spider/3.0",
    "Sogou News Spider/4.0",
    "Sogou Video Spider/3.0",
    "Sosospider",
    "Sosoimagespider",
    "360spider",
)

_DESKTOP_HOST = (
    "Mozilla/5.0 (Windows NT 6.1; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/69.0.3497.81 {} Safari/537.36"
)
_MOBILE_HOST = (
    "Mozilla/5.0 (Linux; U; Android 4.0.2; en-us) AppleWebKit/534.30 "
    "(KHTML, like Gecko) Version/4.0 Mobile Safari/534.30; {}"
)

ENGINE_USER_AGENTS: tuple[str, ...] = (
    *(f"Mozilla/5.0 (compatible; {name})" for name in _COMPATIBLE_CRAWLERS),
    *_STANDALONE_CRAWLERS,
    _DESKTOP_HOST.format("YisouSpider/5.0"),
    _MOBILE_HOST.format("360Spider"),
    _MOBILE_HOST.format("HaosouSpider"),
)

_random = random.Random()


def random_user_agent(user_or_search_engine: bool) -> str:
    """Pick a browser user agent when True, a crawler user agent when False."""
    if user_or_search_engine:
        return _random.choice(BROWSER_USER_AGENTS)
    return _random.choice(ENGINE_USER_AGENTS)