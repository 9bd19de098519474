"""FastAPI integration for canny."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install canny[fastapi]"
    ) from exc

from canny.integrations.fastapi._dependencies import (
    AuthorizeDep,
    get_authorizer,
    get_session,
    get_subject,
)
from canny.integrations.fastapi._errors import install_error_handlers

__all__ = [
    "AuthorizeDep",
    "get_authorizer",
    "get_session",
    "get_subject",
    "install_error_handlers",
]
