"""Tests for exceptions.py -- CannyError hierarchy."""

from __future__ import annotations

import pickle

import pytest

from canny.exceptions import (
    CannyError,
    ResultUsageError,
    Unauthorized,
    UnauthorizedError,
)


class TestCannyError:
    """Base exception for all canny errors."""

    def test_is_exception(self):
        assert issubclass(CannyError, Exception)

    def test_message(self):
        err = CannyError("something went wrong")
        assert str(err) == "something went wrong"


class TestUnauthorizedError:
    def test_is_canny_error(self):
        assert issubclass(UnauthorizedError, CannyError)

    def test_alias(self):
        assert Unauthorized is UnauthorizedError

    def test_attributes(self):
        err = UnauthorizedError("not owner", "delete", "doc-1", ("user-2",), {"force": True})
        assert err.reason == "not owner"
        assert err.action == "delete"
        assert err.target == "doc-1"
        assert err.args == ("user-2",)
        assert err.kwargs == {"force": True}

    def test_defaults(self):
        err = UnauthorizedError("nope", "show", "doc")
        assert err.args == ()
        assert err.kwargs == {}

    def test_message(self):
        err = UnauthorizedError("not owner", "delete", "doc-1", ("user-2", 3), {"force": True})
        assert str(err) == "Cannot ['delete', 'doc-1', 'user-2', 3], force: True because not owner"
        assert err.message == str(err)

    def test_message_without_arguments(self):
        err = UnauthorizedError("private", "show", 7)
        assert str(err) == "Cannot ['show', 7] because private"

    def test_message_keywords_follow_closing_bracket(self):
        err = UnauthorizedError("locked", "edit", "doc", (), {"force": True, "note": "x"})
        assert str(err) == "Cannot ['edit', 'doc'], force: True, note: 'x' because locked"

    def test_repr_shows_reason_action_and_target(self):
        err = UnauthorizedError("not owner", "delete", "doc-1", ("user-2",), {"force": True})
        assert repr(err) == "UnauthorizedError(reason='not owner', action='delete', target='doc-1')"

    def test_repr_does_not_show_call_arguments_as_message(self):
        err = UnauthorizedError("nope", "show", "doc", ("user-2",))
        assert "user-2" not in repr(err)

    def test_catchable_as_canny_error(self):
        with pytest.raises(CannyError):
            raise UnauthorizedError("nope", "show", "doc")

    def test_pickle_round_trip_keeps_fields(self):
        err = UnauthorizedError("nope", "show", "doc", (1,), {"k": "v"})
        clone = pickle.loads(pickle.dumps(err))
        assert clone.reason == "nope"
        assert clone.args == (1,)
        assert clone.kwargs == {"k": "v"}
        assert str(clone) == str(err)


class TestResultUsageError:
    def test_is_canny_error(self):
        assert issubclass(ResultUsageError, CannyError)

    def test_message(self):
        assert str(ResultUsageError("twice")) == "twice"
