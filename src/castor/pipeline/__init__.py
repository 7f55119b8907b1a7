"""Tweet details pipeline.

Two interchangeable strategies build the same ``TweetDetails`` from the
same three stages:

- ``applicative``: explicit apply combinators over boxed functions.
- ``curried``: a ``flat_map`` chain over ``apply_result`` adapters.

Both short-circuit on the first failing stage and return identical
results for identical sources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from castor.errors import ConfigurationError
from castor.pipeline import applicative, curried

if TYPE_CHECKING:
    from collections.abc import Callable

    from castor.core.result import Result
    from castor.errors import NotFoundError
    from castor.models import TweetDetails
    from castor.sources.base import TweetSource

    Strategy = Callable[[TweetSource, str], Result[TweetDetails, NotFoundError]]

StrategyName = Literal["applicative", "curried"]

STRATEGIES: dict[str, Strategy] = {
    "applicative": applicative.get_tweet_details,
    "curried": curried.get_tweet_details,
}


def get_strategy(name: str) -> Strategy:
    """Return the pipeline function registered under ``name``.

    Raises:
        ConfigurationError: If no strategy has that name.
    """
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown strategy: {name!r}",
            hint=f"Supported strategies: {', '.join(sorted(STRATEGIES))}",
        ) from None


__all__ = ["STRATEGIES", "StrategyName", "get_strategy"]
