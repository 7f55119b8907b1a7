"""Domain values assembled by the tweet details pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """A user; ``id`` is absent for users that cannot be looked up further."""

    id: str | None
    name: str


@dataclass(frozen=True, slots=True)
class Tweet:
    """A tweet posted by ``user_id``."""

    id: str | None
    message: str
    user_id: str


@dataclass(frozen=True, slots=True)
class TweetSentiment:
    """Sentiment score of a single tweet."""

    id: str
    is_positive: bool
    tweet_id: str


@dataclass(frozen=True, slots=True)
class TweetDetails:
    """A user, their latest tweet, and that tweet's sentiment.

    Terminal value of a pipeline run. ``expressed_message`` is derived on
    access and not stored.
    """

    user: User
    tweet: Tweet
    sentiment: TweetSentiment

    @property
    def expressed_message(self) -> str:
        """Human-readable summary, e.g. ``"Tyrone said Wahoo which has a positive statement"``."""
        description = "positive" if self.sentiment.is_positive else "negative"
        return f"{self.user.name} said {self.tweet.message} which has a {description} statement"
