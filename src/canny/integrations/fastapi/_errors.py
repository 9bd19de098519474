"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from canny.exceptions import UnauthorizedError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install the exception handler for canny denials on a FastAPI app.

    ``UnauthorizedError`` becomes ``403 Forbidden`` with a JSON body
    carrying the rendered message and the denial reason.

    Args:
        app: The FastAPI application instance.

    Example::

        from fastapi import FastAPI
        from canny.integrations.fastapi import install_error_handlers

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: UnauthorizedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={"detail": str(exc), "reason": str(exc.reason)},
        )
