"""Authorizer: dispatches an action to the target's decision method."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from canny._audit import log_decision, log_denial
from canny._types import is_authorized
from canny.config._config import get_global_config
from canny.exceptions import UnauthorizedError
from canny.result import Result

__all__ = ["Authorizer"]


class Authorizer:
    """Resolve ``(action, target)`` to a decision by calling the target.

    For an action ``"show"`` the target's ``authorize_to_show`` method is
    called (the prefix is :attr:`CannyConfig.method_prefix`). It returns
    ``True`` to allow; any other value denies and is used as the reason.

    Default arguments given at construction are merged into every call:
    positional defaults are prepended, keyword defaults are overridden by
    call-site keywords. Instances are immutable and safe to share.

    Args:
        *default_args: Positional arguments prepended to every decision call.
        **default_kwargs: Keyword arguments merged under every decision call.

    Example::

        class Document:
            def authorize_to_delete(self, user):
                return True if user.id == self.owner_id else "not owner"

        authorizer = Authorizer(current_user)
        authorizer.is_allowed("delete", doc)        # bool
        authorizer.authorize("delete", doc)         # raises UnauthorizedError
        authorizer.can("delete", doc).run(lambda: doc.destroy())
    """

    __slots__ = ("_default_args", "_default_kwargs")

    def __init__(self, *default_args: Any, **default_kwargs: Any) -> None:
        self._default_args: tuple[Any, ...] = default_args
        self._default_kwargs: Mapping[str, Any] = MappingProxyType(dict(default_kwargs))

    @property
    def default_args(self) -> tuple[Any, ...]:
        return self._default_args

    @property
    def default_kwargs(self) -> Mapping[str, Any]:
        return self._default_kwargs

    def can(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> Result:
        """Decide and wrap the answer in a ``can``-polarity :class:`Result`."""
        return Result.can(self._decide(action, target, args, kwargs))

    def cannot(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> Result:
        """Decide and wrap the answer in a ``cannot``-polarity :class:`Result`."""
        return Result.cannot(self._decide(action, target, args, kwargs))

    def is_allowed(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> bool:
        """Return ``True`` iff the decision method returned ``True``."""
        return is_authorized(self._decide(action, target, args, kwargs))

    def is_denied(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> bool:
        return not self.is_allowed(action, target, *args, **kwargs)

    def authorize(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> None:
        """Return if the action is allowed, raise otherwise.

        Raises:
            UnauthorizedError: The decision method returned a reason. The
                error carries the effective (default-merged) arguments.
        """
        effective_args, effective_kwargs = self._merge(args, kwargs)
        answer = self._dispatch(action, target, effective_args, effective_kwargs)
        if is_authorized(answer):
            return

        exc = UnauthorizedError(answer, action, target, effective_args, effective_kwargs)
        if get_global_config().log_decisions:
            log_denial(exc)
        raise exc

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _decide(
        self,
        action: object,
        target: object,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        effective_args, effective_kwargs = self._merge(args, kwargs)
        return self._dispatch(action, target, effective_args, effective_kwargs)

    def _merge(
        self, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> tuple[tuple[Any, ...], dict[str, Any]]:
        return (*self._default_args, *args), {**self._default_kwargs, **kwargs}

    def _dispatch(
        self,
        action: object,
        target: object,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        config = get_global_config()
        method_name = f"{config.method_prefix}{action}"
        # AttributeError from a missing decision method propagates as-is.
        method = getattr(target, method_name)
        # An empty kwargs dict unpacks to nothing, so decision methods without
        # keyword parameters are still callable.
        answer = method(*args, **kwargs)

        if config.log_decisions:
            log_decision(action=action, target=target, method=method_name, answer=answer)
        return answer

    def __repr__(self) -> str:
        return f"Authorizer(args={self._default_args!r}, kwargs={dict(self._default_kwargs)!r})"
