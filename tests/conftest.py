"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and a call-recording
source double. Isolation fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os

import pytest

from castor.core.result import Success
from castor.models import Tweet, TweetSentiment, User
from castor.sources.stub import StubTweetSource

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingSource:
    """Source test double for short-circuit verification.

    Answers every lookup from the configured results and records each call
    so tests can assert which stages ran.
    """

    user: User = field(default_factory=lambda: User(id="234", name="Tyrone"))
    tweet_id: str | None = "123"
    tweet_message: str = "Wahoo"
    sentiment_positive: bool = True
    user_result: object | None = None
    tweet_result: object | None = None
    sentiment_result: object | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    def get_user(self, user_id: str):
        self.calls.append(("get_user", user_id))
        if self.user_result is not None:
            return self.user_result
        return Success(self.user)

    def get_latest_tweet(self, user_id: str):
        self.calls.append(("get_latest_tweet", user_id))
        if self.tweet_result is not None:
            return self.tweet_result
        return Success(Tweet(id=self.tweet_id, message=self.tweet_message, user_id=user_id))

    def get_tweet_sentiment(self, tweet_id: str):
        self.calls.append(("get_tweet_sentiment", tweet_id))
        if self.sentiment_result is not None:
            return self.sentiment_result
        return Success(
            TweetSentiment(id="123", is_positive=self.sentiment_positive, tweet_id=tweet_id)
        )

    @property
    def called(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def recording_source() -> RecordingSource:
    """A fresh happy-path ``RecordingSource``."""
    return RecordingSource()


@pytest.fixture
def stub_source() -> StubTweetSource:
    """The default stub source."""
    return StubTweetSource()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_castor_env(request, monkeypatch):
    """Clear CASTOR_* env vars to prevent test pollution.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("CASTOR_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("hypothesis").setLevel(logging.WARNING)
