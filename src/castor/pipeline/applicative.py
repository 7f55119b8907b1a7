"""Applicative strategy: chain the stages with the ``apply_*`` family."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from castor.core.combinators import (
    apply_fn_keep_arg,
    apply_step,
    apply_step_keep_arg,
    curry,
    pure,
)
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

    The curried constructor starts in a ``Success`` and absorbs one stage
    output per apply. Each apply threads its stage's output forward as the
    input of the next stage; the last one keeps only the finished record.
    """
    log.debug("Applicative pipeline for user_id=%r", user_id)
    with_user = apply_fn_keep_arg(pure(curry(TweetDetails)), fetch_user(source, user_id))
    with_tweet = apply_step_keep_arg(with_user, pure(latest_tweet(source)))
    return apply_step(with_tweet, pure(tweet_sentiment(source)))
