"""
Shared fixtures for the BlogForge test suite.

Every test runs WITHOUT OpenAI or Firebase: generation goes through a
scripted fake generator and persistence through the in-memory store.
"""

from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from blogforge.main import create_app
from blogforge.routes.articles import limiter
from blogforge.schemas.articles import WritingPreferences
from blogforge.services.article_store import InMemoryArticleStore
from blogforge.utils.auth import verify_token


class FakeGenerator:
    """Returns queued replies in order and records every prompt it was given."""

    def __init__(self, replies=None):
        self.replies: List = list(replies or [])
        self.calls: List[Tuple[str, str]] = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if not self.replies:
            raise AssertionError("FakeGenerator ran out of replies")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


# ---------------------------------------------------------------------------
# Canned model output
# ---------------------------------------------------------------------------

PLAIN_TITLES = "\n".join([
    "1. 10 Coffee Brewing Mistakes to Avoid",
    "2. The Beginner's Guide to Pour-Over Coffee",
    "3. How Water Temperature Changes Your Coffee",
    "4. Espresso vs Drip: Which Is Right for You?",
    "5. Storing Coffee Beans the Right Way",
])

BREWMASTER_TITLES = "\n".join([
    "1. BrewMaster: The Smarter Way to Make Coffee",
    "2. Why BrewMaster Changes Your Morning Coffee",
    "3. BrewMaster Tips for Better Pour-Over",
    "4. Cold Brew Made Easy With BrewMaster",
    "5. BrewMaster: Espresso at Home",
])

PLAIN_ARTICLE = """**# 5 Coffee Tips**

Great coffee starts with a few simple habits. This guide covers the essentials.

## Use Fresh Beans

Buy whole beans and grind them right before brewing.

## Mind the Water

* Filtered water tastes cleaner
* Aim for 92-96 degrees Celsius



Enjoy your next cup.

KEYWORDS:
1. coffee tips
2. fresh beans"""

KEYWORDS_REPLY = "1. coffee tips\n2. **fresh coffee beans**\n3. brewing water temperature\n4. coffee grinder\n5. home barista\n6. extra keyword"


def brewmaster_article(mentions_in_intro: bool = True) -> str:
    intro = (
        "BrewMaster makes great coffee simple for everyone."
        if mentions_in_intro
        else "Great coffee is simpler than it looks."
    )
    return "\n\n".join([
        "# Coffee With BrewMaster",
        intro,
        "### Grinding",
        "BrewMaster grinds beans evenly. BrewMaster keeps the grind consistent.",
        "### Brewing",
        "The BrewMaster brewer controls water temperature.",
        "### Conclusion",
        "Try BrewMaster today and taste the difference with brewmaster.",
    ])


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def store():
    return InMemoryArticleStore()


@pytest.fixture
def brewmaster5():
    return WritingPreferences(context="BrewMaster", explicitness=5)


@pytest.fixture
def auth_user():
    """Decoded token the fake auth dependency returns; tests may mutate it."""
    return {"uid": "user-1", "email": "writer@example.com"}


@pytest.fixture
def app(generator, store, auth_user):
    # One limiter serves every app built in this process
    limiter.reset()
    application = create_app(generator=generator, article_store=store)
    application.dependency_overrides[verify_token] = lambda: auth_user
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def anonymous_client(generator, store):
    return TestClient(create_app(generator=generator, article_store=store))
