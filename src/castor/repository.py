"""Repository facade: the library entry point for tweet details."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from castor.pipeline import get_strategy
from castor.sources.stub import StubTweetSource

if TYPE_CHECKING:
    from castor.config import FrozenConfig
    from castor.core.result import Result
    from castor.errors import NotFoundError
    from castor.models import TweetDetails
    from castor.sources.base import TweetSource

log = logging.getLogger(__name__)


class TwitterRepository:
    """Assembles ``TweetDetails`` from a ``TweetSource``.

    Example:
        repo = TwitterRepository(strategy="curried")
        match repo.get_tweet_details("1234"):
            case Success(details):
                print(details.expressed_message)
            case Failure(error):
                print(error.message)
    """

    def __init__(
        self, source: TweetSource | None = None, *, strategy: str = "applicative"
    ) -> None:
        self.source: TweetSource = source if source is not None else StubTweetSource()
        self.strategy = strategy
        # Fail on unknown names at construction, not on first lookup
        self._run = get_strategy(strategy)

    @classmethod
    def from_config(cls, config: FrozenConfig) -> TwitterRepository:
        """Build a repository over a stub source seeded from ``config``."""
        source = StubTweetSource(
            user_name=config.stub_user_name,
            tweet_message=config.stub_tweet_message,
            sentiment_positive=config.stub_sentiment_positive,
        )
        return cls(source, strategy=config.strategy)

    def get_tweet_details(self, user_id: str) -> Result[TweetDetails, NotFoundError]:
        """Run the configured strategy for ``user_id``."""
        result = self._run(self.source, user_id)
        log.debug("%s pipeline for %r -> %r", self.strategy, user_id, result)
        return result

    def __repr__(self) -> str:
        return f"TwitterRepository(source={self.source!r}, strategy={self.strategy!r})"
