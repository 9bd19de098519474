"""canny pytest plugin -- auto-discovered via pytest11 entry point.

This module is registered as a pytest plugin in ``pyproject.toml``::

    [project.entry-points.pytest11]
    canny = "canny.testing._plugin"
"""

from __future__ import annotations

# Re-export fixtures so they are auto-discovered by pytest.
from canny.testing._fixtures import canny_isolated_config  # noqa: F401

__all__ = ["canny_isolated_config"]
