"""Shared test fixtures for canny tests."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Any

import pytest

from canny.config._config import _reset_global_config

# ---------------------------------------------------------------------------
# Test targets
# ---------------------------------------------------------------------------


@dataclass
class Person:
    id: int
    name: str = ""


@dataclass
class Document:
    """Target whose decision methods implement a small ownership policy."""

    id: int
    owner: Person
    is_public: bool = False

    def authorize_to_show(self, subject: Person) -> bool | str:
        if self.is_public or subject == self.owner:
            return True
        return "private document"

    def authorize_to_delete(self, subject: Person) -> bool | str:
        return True if subject == self.owner else "not owner"


@dataclass
class RecordingTarget:
    """Target that records every decision call and returns a canned answer."""

    answer: Any = True
    calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = field(default_factory=list)

    def authorize_to_show(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append(("show", args, kwargs))
        return self.answer


class PositionalOnlyTarget:
    """Decision method that accepts no keyword arguments at all."""

    def authorize_to_show(self, a: int, b: int) -> bool | str:
        return True if (a, b) == (1, 2) else "wrong arguments"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_global_config() -> Generator[None, None, None]:
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def owner() -> Person:
    return Person(id=1, name="Alice")


@pytest.fixture()
def stranger() -> Person:
    return Person(id=2, name="Bob")


@pytest.fixture()
def doc(owner: Person) -> Document:
    return Document(id=10, owner=owner)
