"""Result Monad for explicit error handling.

A ``Result`` is exactly one of ``Success(value)`` or ``Failure(error)``.
Failures are ordinary return values: nothing in the combinator algebra
raises to signal one. ``flat_map`` is the single primitive; ``map`` is
defined in terms of it so the two can never disagree.
"""

from __future__ import annotations

import dataclasses
import typing

from castor.errors import InternalError

if typing.TYPE_CHECKING:
    from collections.abc import Callable

T = typing.TypeVar("T")
E = typing.TypeVar("E")


class _ResultOps:
    """Operations shared by both variants, built on ``flat_map``."""

    __slots__ = ()

    def map(self, transform):
        """Apply ``transform`` to a success payload; failures pass through."""
        return self.flat_map(lambda value: Success(transform(value)))


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T](_ResultOps):
    """A successful result."""

    value: T

    def flat_map[U, F](self, transform: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Hand the payload to ``transform`` and return its result as-is."""
        return transform(self.value)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def value_or(self, default: object) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E](_ResultOps):
    """A failed result, containing the error."""

    error: E

    def flat_map(self, transform: Callable[[typing.Any], typing.Any]) -> Failure[E]:
        """Return this failure untouched; ``transform`` is never called."""
        return self

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def value_or[D](self, default: D) -> D:
        return default

    def unwrap(self) -> typing.NoReturn:
        """Failures have no value to unwrap.

        Raises:
            InternalError: always; check ``is_success`` or ``match`` first.
        """
        raise InternalError(
            f"unwrap() called on Failure({self.error!r})",
            hint="Check is_success or use value_or() before unwrapping.",
        )


Result = Success[T] | Failure[E]
