"""Flask integration for canny."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install canny[flask]"
    ) from exc

from canny.integrations.flask._extension import CannyExtension

__all__ = ["CannyExtension"]
