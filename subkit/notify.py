"""Collect short notices by group and push them to a webhook."""

from __future__ import annotations

import logging
import threading
from urllib.parse import quote_plus

import requests

_log = logging.getLogger(__name__)


class NotifyCenter:
    """Keeps the latest notice per group and sends them with GET requests.

    Each notice is sent to ``<webhook_url><group>/<url-escaped content>``.
    """

    def __init__(self, webhook_url: str) -> None:
        self.webhook_url = webhook_url
        self._infos: dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def infos(self) -> dict[str, str]:
        """A copy of the pending notices, keyed by group."""
        with self._lock:
            return dict(self._infos)

    def add(self, group_name: str, info_content: str) -> None:
        """Record a notice; a later notice for the same group replaces it."""
        with self._lock:
            self._infos[group_name] = info_content

    def send(self) -> int:
        """Send every pending notice and return how many were delivered.

        Nothing is sent when no webhook is configured. Sending stops at the
        first request that fails; the failure is logged.
        """
        if not self.webhook_url:
            return 0
        sent = 0
        with requests.Session() as session:
            for group, content in self.infos.items():
                url = self.webhook_url + group + "/" + quote_plus(content, safe="")
                try:
                    session.get(url)
                except requests.RequestException as exc:
                    _log.error("notify center send %s", exc)
                    return sent
                sent += 1
        return sent

    def clear(self) -> None:
        """Drop all pending notices."""
        with self._lock:
            self._infos = {}