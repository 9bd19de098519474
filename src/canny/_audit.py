"""Audit logging for authorization decisions."""

from __future__ import annotations

import logging

from canny._types import is_authorized
from canny.exceptions import UnauthorizedError

__all__ = ["log_decision", "log_denial"]

logger = logging.getLogger("canny")


def log_decision(
    *,
    action: object,
    target: object,
    method: str,
    answer: object,
) -> None:
    """Log one decision returned by a target's decision method.

    Logging levels:
    - INFO: Summary (action, target, allowed or denied with reason)
    - DEBUG: The resolved decision method name

    Example::

        log_decision(action="show", target=doc, method="authorize_to_show", answer=True)
    """
    if is_authorized(answer):
        logger.info("Decision: %s on %r allowed", action, target)
    else:
        logger.info("Decision: %s on %r denied (reason: %s)", action, target, answer)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Decision for %s resolved by %s.%s", action, type(target).__name__, method)


def log_denial(exc: UnauthorizedError) -> None:
    """Log a denial that is about to be raised by ``Authorizer.authorize``."""
    logger.warning("Unauthorized: %s", exc)
