"""Check that an HTTP proxy works and how fast it answers."""

from __future__ import annotations

import re
import time

import requests

DEFAULT_TEST_URL = "http://google.com"

_PROXY_RE = re.compile(
    r"(http)://[\w\-_]+(\.[\w\-_]+)+([\w\-\.,@?^=%&:/~\+#]*[\w\-@?^=%&/~\+#])?",
    re.ASCII,
)


class ProxyError(Exception):
    """The proxy address is invalid or the proxy could not be reached."""


def proxy_test(proxy_addr: str, test_url: str = DEFAULT_TEST_URL) -> tuple[int, int]:
    """Fetch ``test_url`` through an ``http://`` proxy.

    Returns ``(milliseconds, status)``; ``(0, 0)`` when the answer is not 200.
    Raises ProxyError for an invalid address or a failed request.
    """
    if _PROXY_RE.search(proxy_addr) is None:
        raise ProxyError("proxy address illegal, only support http://xx:xx")
    proxies = {"http": proxy_addr, "https": proxy_addr}
    begin = time.monotonic()
    try:
        with requests.Session() as session:
            session.trust_env = False
            response = session.get(test_url, proxies=proxies, timeout=(10, 5))
    except requests.RequestException as exc:
        raise ProxyError(f"proxy request failed: {exc}") from exc
    speed = int((time.monotonic() - begin) * 1000)
    if response.status_code != 200:
        return 0, 0
    return speed, response.status_code