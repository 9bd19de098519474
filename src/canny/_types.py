"""Shared type aliases for canny."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

__all__ = ["Block", "Polarity", "is_authorized"]

# Which outcome a Result's ``run`` block fires on.
Polarity = Literal["can", "cannot"]

# A block attached to a Result. Called with no arguments, or with the
# denial reason, depending on polarity.
Block = Callable[..., Any]


def is_authorized(answer: object) -> bool:
    """Return ``True`` only when *answer* is the ``True`` singleton.

    Any other value, including truthy ones such as ``1`` or ``"yes"``, is a
    denial reason.
    """
    return answer is True
