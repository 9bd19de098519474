"""Exception hierarchy for canny."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

__all__ = [
    "CannyError",
    "ResultUsageError",
    "Unauthorized",
    "UnauthorizedError",
]


class CannyError(Exception):
    """Base exception for all canny errors."""


class UnauthorizedError(CannyError):
    """The decision method denied the action.

    Raised only by :meth:`~canny.Authorizer.authorize`. Carries the denial
    reason together with the effective arguments the decision method was
    called with (defaults already merged in).

    Attributes:
        reason: The value returned by the decision method.
        action: The action that was checked.
        target: The entity owning the decision method.
        args: Effective positional arguments.
        kwargs: Effective keyword arguments.
        message: The rendered text, ``Cannot [action, target, *args], key: value because reason``.

    Example::

        try:
            authorizer.authorize("delete", doc)
        except UnauthorizedError as exc:
            flash(f"{exc.action} refused: {exc.reason}")
    """

    def __init__(
        self,
        reason: object,
        action: object,
        target: object,
        args: Sequence[object] = (),
        kwargs: Mapping[str, object] | None = None,
    ) -> None:
        self.reason = reason
        self.action = action
        self.target = target
        self.kwargs = dict(kwargs or {})
        # BaseException.args normally holds the message; here it holds the
        # call arguments, so __str__, __repr__ and __reduce__ are overridden below.
        self.args = tuple(args)
        self.message = self._build_message()

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(reason={self.reason!r}, "
            f"action={self.action!r}, target={self.target!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self),
            (self.reason, self.action, self.target, self.args, self.kwargs),
        )

    def _build_message(self) -> str:
        # Keyword pairs follow the closing bracket:
        # Cannot ['delete', doc, user], force: True because not owner
        positional = [self.action, self.target, *self.args]
        keywords = "".join(f", {key}: {value!r}" for key, value in self.kwargs.items())
        return f"Cannot {positional!r}{keywords} because {self.reason}"


Unauthorized = UnauthorizedError


class ResultUsageError(CannyError):
    """A :class:`~canny.Result` block gate was misused.

    Raised when ``run`` or ``else_`` is called a second time on the same
    result, or without a callable block.
    """
