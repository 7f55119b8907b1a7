"""Source protocol: the three lookups the tweet details pipeline depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from castor.core.result import Result
    from castor.errors import NotFoundError
    from castor.models import Tweet, TweetSentiment, User


@runtime_checkable
class TweetSource(Protocol):
    """Minimal lookup protocol: user, latest tweet, tweet sentiment.

    Implementations report a missing entity by returning a ``Failure``
    holding a ``NotFoundError``; they do not raise for it.
    """

    def get_user(self, user_id: str) -> Result[User, NotFoundError]:
        """Look up a user by id."""
        ...

    def get_latest_tweet(self, user_id: str) -> Result[Tweet, NotFoundError]:
        """Look up the most recent tweet posted by ``user_id``."""
        ...

    def get_tweet_sentiment(self, tweet_id: str) -> Result[TweetSentiment, NotFoundError]:
        """Score the sentiment of ``tweet_id``."""
        ...
