"""Configuration module for canny."""

from __future__ import annotations

from canny.config._config import CannyConfig, configure, get_global_config

__all__ = ["CannyConfig", "configure", "get_global_config"]
