"""Exception hierarchy for castor.

Two kinds of error live here. ``NotFoundError`` and its subclasses are
*values*: pipeline stages return them inside a ``Failure`` and never raise
them. ``ConfigurationError`` and ``InternalError`` are raised for caller or
programming mistakes that are not part of the data flow.
"""

from __future__ import annotations


class CastorError(Exception):
    """Base exception for all castor errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    @property
    def message(self) -> str:
        """The human-readable message, without the hint."""
        return str(self.args[0]) if self.args else ""


class ConfigurationError(CastorError):
    """Configuration validation or resolution failed."""


class InternalError(CastorError):
    """A castor internal error (bug) or invariant violation."""


class NotFoundError(CastorError):
    """An entity lookup came back empty.

    Carried as the error payload of a ``Failure``. Subclasses name the
    entity so callers can branch on the cause with ``isinstance`` or
    ``match`` rather than by comparing messages. Equality is by class and
    message so that results produced by separate pipeline runs compare equal.
    """

    default_message = "Entity not found"

    def __init__(self, message: str | None = None, *, hint: str | None = None) -> None:
        super().__init__(message or self.default_message, hint=hint)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotFoundError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class UserNotFound(NotFoundError):
    """The user could not be resolved, or has no id to look up tweets by."""

    default_message = "User not found"


class TweetNotFound(NotFoundError):
    """The tweet could not be resolved, or has no id to score."""

    default_message = "Tweet not found"
