"""Process-wide configuration for canny."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "CannyConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_DEFAULT_CLASS_ACTIONS: frozenset[str] = frozenset({"index", "new", "create"})


@dataclass(frozen=True, slots=True)
class CannyConfig:
    """Immutable configuration with merge semantics.

    Attributes:
        method_prefix: Prefix joined with the action to name the decision
            method looked up on the target (``"authorize_to_"`` gives
            ``authorize_to_show`` for ``"show"``).
        log_decisions: Emit audit log records for every decision.
        class_actions: Actions that the request integrations check against
            the model class instead of a loaded instance.

    Example::

        config = CannyConfig(log_decisions=True)
        merged = config.merge(method_prefix="can_")
    """

    method_prefix: str = "authorize_to_"
    log_decisions: bool = False
    class_actions: frozenset[str] = field(default=_DEFAULT_CLASS_ACTIONS)

    def __post_init__(self) -> None:
        if not isinstance(self.method_prefix, str) or not self.method_prefix:
            raise ValueError(
                f"method_prefix must be a non-empty string, got {self.method_prefix!r}"
            )
        if not (self.method_prefix + "x").isidentifier():
            raise ValueError(
                f"method_prefix must start a valid identifier, got {self.method_prefix!r}"
            )
        if not isinstance(self.class_actions, frozenset):
            # Use object.__setattr__ because the dataclass is frozen
            object.__setattr__(self, "class_actions", frozenset(self.class_actions))

    def merge(
        self,
        *,
        method_prefix: str | None = None,
        log_decisions: bool | None = None,
        class_actions: Iterable[str] | None = None,
    ) -> CannyConfig:
        """Return a new config with non-None overrides applied.

        Example::

            base = CannyConfig()
            verbose = base.merge(log_decisions=True)
        """
        return CannyConfig(
            method_prefix=method_prefix if method_prefix is not None else self.method_prefix,
            log_decisions=log_decisions if log_decisions is not None else self.log_decisions,
            class_actions=(
                frozenset(class_actions) if class_actions is not None else self.class_actions
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = CannyConfig()


def get_global_config() -> CannyConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    method_prefix: str | None = None,
    log_decisions: bool | None = None,
    class_actions: Iterable[str] | None = None,
) -> CannyConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Args:
        method_prefix: Prefix of decision method names.
        log_decisions: Enable/disable audit logging of decisions.
        class_actions: Actions checked against the model class by the
            request integrations.

    Example::

        configure(log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        method_prefix=method_prefix,
        log_decisions=log_decisions,
        class_actions=class_actions,
    )
    return _global_config


def _set_global_config(cfg: CannyConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = CannyConfig()
