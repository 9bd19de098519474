"""canny testing utilities: MockSubject, assertions, and fixtures.

Example::

    from canny import Authorizer
    from canny.testing import MockSubject, assert_denied

    def test_strangers_cannot_delete(doc):
        assert_denied(Authorizer(MockSubject(id=99)), "delete", doc, reason="not owner")
"""

from canny.testing._assertions import assert_authorized, assert_denied
from canny.testing._fixtures import canny_isolated_config
from canny.testing._isolation import isolated_config
from canny.testing._subjects import MockSubject, make_admin, make_anonymous, make_user

__all__ = [
    "MockSubject",
    "assert_authorized",
    "assert_denied",
    "canny_isolated_config",
    "isolated_config",
    "make_admin",
    "make_anonymous",
    "make_user",
]
