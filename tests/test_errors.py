from __future__ import annotations

import pytest

from castor.errors import (
    CastorError,
    ConfigurationError,
    InternalError,
    NotFoundError,
    TweetNotFound,
    UserNotFound,
)

pytestmark = pytest.mark.unit


def test_not_found_defaults_per_cause() -> None:
    assert UserNotFound().message == "User not found"
    assert TweetNotFound().message == "Tweet not found"
    assert NotFoundError().message == "Entity not found"
    assert str(UserNotFound("user 7 is gone")) == "user 7 is gone"


def test_not_found_equality_is_by_class_and_message() -> None:
    assert UserNotFound() == UserNotFound()
    assert UserNotFound("a") != UserNotFound("b")
    assert UserNotFound("same") != TweetNotFound("same")
    assert hash(TweetNotFound()) == hash(TweetNotFound())
    assert {UserNotFound(), UserNotFound()} == {UserNotFound()}


def test_not_found_repr_names_cause() -> None:
    assert repr(TweetNotFound()) == "TweetNotFound('Tweet not found')"


def test_causes_can_be_told_apart_without_string_matching() -> None:
    def describe(error: NotFoundError) -> str:
        match error:
            case UserNotFound():
                return "user"
            case TweetNotFound():
                return "tweet"
            case _:
                return "other"

    assert describe(UserNotFound("x")) == "user"
    assert describe(TweetNotFound("x")) == "tweet"
    assert describe(NotFoundError("x")) == "other"


def test_subclass_hierarchy() -> None:
    """Every castor error is catchable as CastorError."""
    for err in (
        ConfigurationError("c"),
        InternalError("i"),
        UserNotFound(),
        TweetNotFound(),
    ):
        assert isinstance(err, CastorError)
    assert isinstance(UserNotFound(), NotFoundError)


def test_hint_is_kept_separately_from_message() -> None:
    err = ConfigurationError("bad value", hint="do this")

    assert str(err) == "bad value"
    assert err.message == "bad value"
    assert err.hint == "do this"
    assert ConfigurationError("plain").hint is None
