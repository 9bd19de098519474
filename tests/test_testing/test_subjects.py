"""Tests for MockSubject and its factories."""

from __future__ import annotations

import dataclasses

import pytest

from canny.testing import MockSubject, make_admin, make_anonymous, make_user


class TestMockSubject:
    def test_defaults(self) -> None:
        subject = MockSubject(id=1)
        assert subject.role == "viewer"

    def test_frozen(self) -> None:
        subject = MockSubject(id=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            subject.role = "admin"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert MockSubject(id=1, role="admin") == make_admin()


class TestFactories:
    def test_make_admin(self) -> None:
        assert make_admin(id=7) == MockSubject(id=7, role="admin")

    def test_make_user(self) -> None:
        assert make_user(id=5, role="editor") == MockSubject(id=5, role="editor")

    def test_make_anonymous(self) -> None:
        anon = make_anonymous()
        assert anon.id == 0
        assert anon.role == "anonymous"
