"""Terminal reporting of a pipeline result."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from castor.core.result import Failure, Success
from castor.errors import InternalError

if TYPE_CHECKING:
    from collections.abc import Callable

    from castor.core.result import Result
    from castor.errors import NotFoundError
    from castor.models import TweetDetails

log = logging.getLogger(__name__)


def report_tweet_details(
    result: Result[TweetDetails, NotFoundError],
    *,
    emit: Callable[[str], object] = print,
    on_error: Callable[[NotFoundError], object] | None = None,
) -> bool:
    """Emit the expressed message, or report the failure.

    A failure is logged at ERROR level and passed to ``on_error``; it is
    never raised, so callers and tests can observe it.

    Returns:
        True when ``result`` was a success.
    """
    match result:
        case Success(details):
            emit(details.expressed_message)
            return True
        case Failure(error):
            log.error("Tweet details unavailable: %s", error)
            if on_error is not None:
                on_error(error)
            return False
    raise InternalError(f"Expected a Success or Failure, got {result!r}")
