"""Result: the chainable outcome of ``Authorizer.can`` / ``Authorizer.cannot``."""

from __future__ import annotations

from typing import Any

from canny._types import Block, Polarity, is_authorized
from canny.exceptions import ResultUsageError

__all__ = ["Result"]


class Result:
    """Outcome of a decision, with one ``run`` gate and one ``else_`` gate.

    The polarity chosen at construction decides which gate fires:

    =========  ==========  =====================  =====================
    polarity   authorized  ``run(block)``         ``else_(block)``
    =========  ==========  =====================  =====================
    can        yes         ``block()``            skipped
    can        no          skipped                ``block(reason)``
    cannot     yes         skipped                ``block()``
    cannot     no          ``block(reason)``      skipped
    =========  ==========  =====================  =====================

    Each gate may be called once per instance. The return value of a block
    that fires is kept in :attr:`value`.

    Instances are built only through :meth:`can` and :meth:`cannot`.
    A Result is meant for a single owner; its gates are unsynchronized
    flags.

    Example::

        authorizer.can("edit", doc, user).run(
            lambda: render_editor(doc)
        ).else_(
            lambda reason: render_readonly(doc, reason)
        ).value
    """

    __slots__ = ("_polarity", "_authorized", "_reason", "_value", "_ran", "_ran_else")

    _polarity: Polarity
    _authorized: bool
    _reason: Any
    _value: Any
    _ran: bool
    _ran_else: bool

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError("Result cannot be instantiated directly; use Result.can() or Result.cannot()")

    @classmethod
    def can(cls, answer: object) -> Result:
        """Build a result whose ``run`` block fires when *answer* authorizes."""
        return cls._build("can", answer)

    @classmethod
    def cannot(cls, answer: object) -> Result:
        """Build a result whose ``run`` block fires when *answer* denies."""
        return cls._build("cannot", answer)

    @classmethod
    def _build(cls, polarity: Polarity, answer: object) -> Result:
        self = cls.__new__(cls)
        self._polarity = polarity
        self._authorized = is_authorized(answer)
        self._reason = None if self._authorized else answer
        self._value = None
        self._ran = False
        self._ran_else = False
        return self

    @property
    def polarity(self) -> Polarity:
        return self._polarity

    @property
    def authorized(self) -> bool:
        """``True`` when the decision answer was ``True``, whatever the polarity."""
        return self._authorized

    @property
    def reason(self) -> Any:
        """The denial reason, or ``None`` when authorized."""
        return self._reason

    @property
    def value(self) -> Any:
        """Return value of the last block that fired, or ``None``."""
        return self._value

    def run(self, block: Block | None) -> Result:
        """Fire *block* when the outcome matches the polarity.

        Raises:
            ResultUsageError: On a second call, or if *block* is not callable.
        """
        if self._ran:
            raise ResultUsageError("Result.run() can only be called once")
        _require_block(block, "run")
        self._ran = True

        if self._polarity == "can":
            if self._authorized:
                self._value = block()  # type: ignore[misc]
        elif not self._authorized:
            self._value = block(self._reason)  # type: ignore[misc]
        return self

    def else_(self, block: Block | None) -> Result:
        """Fire *block* when the outcome does not match the polarity.

        Raises:
            ResultUsageError: On a second call, or if *block* is not callable.
        """
        if self._ran_else:
            raise ResultUsageError("Result.else_() can only be called once")
        _require_block(block, "else_")
        self._ran_else = True

        if self._polarity == "can":
            if not self._authorized:
                self._value = block(self._reason)  # type: ignore[misc]
        elif self._authorized:
            self._value = block()  # type: ignore[misc]
        return self

    def __repr__(self) -> str:
        if self._authorized:
            return f"<Result {self._polarity} authorized>"
        return f"<Result {self._polarity} denied reason={self._reason!r}>"


def _require_block(block: object, gate: str) -> None:
    if block is None:
        raise ResultUsageError(f"Result.{gate}() requires a block")
    if not callable(block):
        raise ResultUsageError(f"Result.{gate}() block must be callable, got {block!r}")
