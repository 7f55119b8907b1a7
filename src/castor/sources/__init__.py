"""Data sources for the tweet details pipeline."""

from castor.sources.base import TweetSource
from castor.sources.stub import StubTweetSource

__all__ = ["StubTweetSource", "TweetSource"]
