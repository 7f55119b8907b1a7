"""The three dependent lookups behind a tweet details run.

Each stage returns a ``Result``. The id guards live here, in front of the
source, so a user or tweet without an id fails the run without the source
being asked for anything further.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from castor.core.result import Failure
from castor.errors import TweetNotFound, UserNotFound

if TYPE_CHECKING:
    from collections.abc import Callable

    from castor.core.result import Result
    from castor.errors import NotFoundError
    from castor.models import Tweet, TweetSentiment, User
    from castor.sources.base import TweetSource

log = logging.getLogger(__name__)


def fetch_user(source: TweetSource, user_id: str) -> Result[User, NotFoundError]:
    """Stage 1: look up the user."""
    log.debug("Stage fetch_user: user_id=%r", user_id)
    return source.get_user(user_id)


def latest_tweet(source: TweetSource) -> Callable[[User], Result[Tweet, NotFoundError]]:
    """Stage 2: build the step that fetches a user's latest tweet."""

    def step(user: User) -> Result[Tweet, NotFoundError]:
        if user.id is None:
            log.debug("Stage latest_tweet: user %r has no id", user.name)
            return Failure(UserNotFound())
        log.debug("Stage latest_tweet: user_id=%r", user.id)
        return source.get_latest_tweet(user.id)

    return step


def tweet_sentiment(
    source: TweetSource,
) -> Callable[[Tweet], Result[TweetSentiment, NotFoundError]]:
    """Stage 3: build the step that scores a tweet."""

    def step(tweet: Tweet) -> Result[TweetSentiment, NotFoundError]:
        if tweet.id is None:
            log.debug("Stage tweet_sentiment: tweet by %r has no id", tweet.user_id)
            return Failure(TweetNotFound())
        log.debug("Stage tweet_sentiment: tweet_id=%r", tweet.id)
        return source.get_tweet_sentiment(tweet.id)

    return step
