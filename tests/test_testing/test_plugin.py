"""Tests for canny.testing._plugin -- pytest plugin registration."""

from __future__ import annotations

from canny.testing import _plugin


class TestPluginExports:
    """The plugin module re-exports fixture functions for auto-discovery."""

    def test_exports_canny_isolated_config(self) -> None:
        assert hasattr(_plugin, "canny_isolated_config")
