"""Curried strategy: chain the stages with ``flat_map`` and result adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from castor.core.combinators import apply_result, apply_result_of, curry
from castor.models import TweetDetails
from castor.pipeline.stages import fetch_user, latest_tweet, tweet_sentiment

if TYPE_CHECKING:
    from castor.core.result import Result
    from castor.errors import NotFoundError
    from castor.sources.base import TweetSource

log = logging.getLogger(__name__)


def get_tweet_details(
    source: TweetSource, user_id: str
) -> Result[TweetDetails, NotFoundError]:
    """Assemble ``TweetDetails`` for ``user_id``.

    Every link of the chain carries ``(stage_output, partially_applied)``
    so the next adapter knows both what to look up and what to feed.
    """
    log.debug("Curried pipeline for user_id=%r", user_id)
    return (
        apply_result(fetch_user(source, user_id), curry(TweetDetails))
        .flat_map(apply_result_of(latest_tweet(source)))
        .flat_map(apply_result_of(tweet_sentiment(source), keep_intermediate=False))
    )
