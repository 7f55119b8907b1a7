"""castor: a Result type, its combinators, and a pipeline built with them.

Public API:
    - Success / Failure / Result: the error-carrying value type
    - pure, apply_*, curry, apply_result*: combinators over Result
    - TwitterRepository: tweet details entry point
    - report_tweet_details(): print or report a pipeline outcome
"""

from __future__ import annotations

import logging

from castor.config import FrozenConfig, resolve_config
from castor.core import (
    Curried,
    Failure,
    Result,
    Success,
    apply_fn,
    apply_fn_keep_arg,
    apply_result,
    apply_result_of,
    apply_step,
    apply_step_keep_arg,
    curry,
    pure,
)
from castor.errors import (
    CastorError,
    ConfigurationError,
    InternalError,
    NotFoundError,
    TweetNotFound,
    UserNotFound,
)
from castor.models import Tweet, TweetDetails, TweetSentiment, User
from castor.report import report_tweet_details
from castor.repository import TwitterRepository
from castor.sources import StubTweetSource, TweetSource

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("castor-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("castor").addHandler(logging.NullHandler())

__all__ = [
    "CastorError",
    "ConfigurationError",
    "Curried",
    "Failure",
    "FrozenConfig",
    "InternalError",
    "NotFoundError",
    "Result",
    "StubTweetSource",
    "Success",
    "Tweet",
    "TweetDetails",
    "TweetNotFound",
    "TweetSentiment",
    "TweetSource",
    "TwitterRepository",
    "User",
    "UserNotFound",
    "apply_fn",
    "apply_fn_keep_arg",
    "apply_result",
    "apply_result_of",
    "apply_step",
    "apply_step_keep_arg",
    "curry",
    "pure",
    "report_tweet_details",
    "resolve_config",
]
