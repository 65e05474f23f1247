import re

import pytest
import requests
import responses

from subkit.notify import NotifyCenter

HOOK = "http://example.com/hook/"
HOOK_PATTERN = re.compile(r"http://example\.com/hook/.*")


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_send_escapes_content_into_url(mocked):
    mocked.add(responses.GET, HOOK_PATTERN, body="ok")
    center = NotifyCenter(HOOK)
    center.add("groupName", "Info asd 哈哈")
    assert center.send() == 1
    assert len(mocked.calls) == 1
    assert mocked.calls[0].request.url == HOOK + "groupName/Info+asd+%E5%93%88%E5%93%88"


def test_later_add_replaces_group(mocked):
    mocked.add(responses.GET, HOOK_PATTERN, body="ok")
    center = NotifyCenter(HOOK)
    center.add("g", "first")
    center.add("g", "second")
    assert center.infos == {"g": "second"}
    assert center.send() == 1
    assert mocked.calls[0].request.url == HOOK + "g/second"


def test_each_group_is_sent(mocked):
    mocked.add(responses.GET, HOOK_PATTERN, body="ok")
    center = NotifyCenter(HOOK)
    center.add("a", "x")
    center.add("b", "y")
    assert center.send() == 2
    urls = sorted(call.request.url for call in mocked.calls)
    assert urls == [HOOK + "a/x", HOOK + "b/y"]


def test_empty_webhook_sends_nothing(mocked):
    center = NotifyCenter("")
    center.add("g", "content")
    assert center.send() == 0
    assert len(mocked.calls) == 0


def test_clear_drops_pending(mocked):
    mocked.add(responses.GET, HOOK_PATTERN, body="ok")
    center = NotifyCenter(HOOK)
    center.add("g", "content")
    center.clear()
    assert center.infos == {}
    assert center.send() == 0
    assert len(mocked.calls) == 0


def test_failure_stops_sending(mocked):
    mocked.add(responses.GET, HOOK_PATTERN, body=requests.ConnectionError("down"))
    center = NotifyCenter(HOOK)
    center.add("a", "x")
    center.add("b", "y")
    assert center.send() == 0
    assert len(mocked.calls) == 1