import pytest

from subkit.useragent import (
    BROWSER_USER_AGENTS,
    ENGINE_USER_AGENTS,
    random_user_agent,
)


@pytest.mark.parametrize(
    ("flag", "pool"),
    [(True, BROWSER_USER_AGENTS), (False, ENGINE_USER_AGENTS)],
)
def test_agent_comes_from_matching_pool(flag, pool):
    for _ in range(50):
        assert random_user_agent(flag) in pool


def test_engine_agents_are_not_browser_agents():
    picked = {random_user_agent(False) for _ in range(100)}
    assert picked.isdisjoint(BROWSER_USER_AGENTS)


def test_choice_varies():
    picked = {random_user_agent(False) for _ in range(300)}
    assert len(picked) > 1