"""Stub source for demos and tests."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from castor.core.result import Success
from castor.models import Tweet, TweetSentiment, User

if TYPE_CHECKING:
    from castor.core.result import Result
    from castor.errors import NotFoundError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StubTweetSource:
    """Source that answers every lookup with fixed values.

    The requested user id is ignored: ``get_user`` always returns the
    configured user. Tweets and sentiments are bound to the id they were
    asked for, so the pipeline still threads ids from one stage to the next.
    """

    user_id: str | None = "234"
    user_name: str = "Tyrone"
    tweet_id: str | None = "123"
    tweet_message: str = "Wahoo"
    sentiment_id: str = "123"
    sentiment_positive: bool = True

    def get_user(self, user_id: str) -> Result[User, NotFoundError]:
        """Return the configured user regardless of ``user_id``."""
        log.debug("stub get_user(%r)", user_id)
        return Success(User(id=self.user_id, name=self.user_name))

    def get_latest_tweet(self, user_id: str) -> Result[Tweet, NotFoundError]:
        """Return the configured tweet, attributed to ``user_id``."""
        log.debug("stub get_latest_tweet(%r)", user_id)
        return Success(Tweet(id=self.tweet_id, message=self.tweet_message, user_id=user_id))

    def get_tweet_sentiment(self, tweet_id: str) -> Result[TweetSentiment, NotFoundError]:
        """Return the configured sentiment for ``tweet_id``."""
        log.debug("stub get_tweet_sentiment(%r)", tweet_id)
        return Success(
            TweetSentiment(
                id=self.sentiment_id,
                is_positive=self.sentiment_positive,
                tweet_id=tweet_id,
            )
        )
