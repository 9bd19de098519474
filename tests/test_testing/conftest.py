"""Import fixtures from canny.testing for test discovery."""

from canny.testing._fixtures import canny_isolated_config

__all__ = ["canny_isolated_config"]
