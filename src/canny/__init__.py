"""canny: convention-based authorization decisions.

Targets own their policy as ``authorize_to_<action>`` methods returning
``True`` or a denial reason. ``Authorizer`` finds and calls them and
wraps the answer in a chainable ``Result``.

Example::

    from canny import Authorizer

    class Post:
        def authorize_to_edit(self, user):
            return True if user.id == self.author_id else "not the author"

    authorizer = Authorizer(current_user)
    authorizer.authorize("edit", post)  # raises UnauthorizedError if denied

    label = (
        authorizer.can("edit", post)
        .run(lambda: "Edit")
        .else_(lambda reason: f"Locked: {reason}")
        .value
    )
"""

from importlib.metadata import PackageNotFoundError, version

from canny._types import Polarity
from canny.authorizer import Authorizer
from canny.config._config import CannyConfig, configure
from canny.exceptions import (
    CannyError,
    ResultUsageError,
    Unauthorized,
    UnauthorizedError,
)
from canny.result import Result

try:
    __version__ = version("canny")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "Authorizer",
    "CannyConfig",
    "CannyError",
    "Polarity",
    "Result",
    "ResultUsageError",
    "Unauthorized",
    "UnauthorizedError",
    "configure",
]
