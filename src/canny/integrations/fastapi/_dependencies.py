"""FastAPI dependencies for canny authorization."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from canny.authorizer import Authorizer

__all__ = ["AuthorizeDep", "get_authorizer", "get_session", "get_subject"]


# ---------------------------------------------------------------------------
# Sentinel dependency functions for DI-based configuration
# ---------------------------------------------------------------------------


def get_subject(request: Request) -> Any:
    """Sentinel dependency, override via ``app.dependency_overrides[get_subject]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure their subject provider before using ``AuthorizeDep``.

    Example::

        from canny.integrations.fastapi import get_subject

        app.dependency_overrides[get_subject] = get_current_user
    """
    raise NotImplementedError(
        "Override get_subject via app.dependency_overrides[get_subject]. "
        "See canny docs for configuration guide."
    )


def get_session(request: Request) -> Session:
    """Sentinel dependency, override via ``app.dependency_overrides[get_session]``.

    Only required by ``AuthorizeDep`` with ``id_param`` set.
    """
    raise NotImplementedError(
        "Override get_session via app.dependency_overrides[get_session]. "
        "See canny docs for configuration guide."
    )


def get_authorizer(subject: Any = Depends(get_subject)) -> Authorizer:
    """Request-scoped :class:`~canny.Authorizer` bound to the current subject.

    Example::

        @app.get("/posts/{post_id}/edit")
        def edit_form(post_id: int, authorizer: Authorizer = Depends(get_authorizer)):
            post = load_post(post_id)
            return authorizer.can("edit", post).run(lambda: render(post)).value
    """
    return Authorizer(subject)


# ---------------------------------------------------------------------------
# Async session detection helper
# ---------------------------------------------------------------------------


def _is_async_session(session: object) -> bool:
    """Check if a session is an AsyncSession without hard-importing asyncio extras."""
    try:
        from sqlalchemy.ext.asyncio import AsyncSession

        return isinstance(session, AsyncSession)
    except ImportError:
        return False


# ---------------------------------------------------------------------------
# Dependency builder
# ---------------------------------------------------------------------------


def _extra_arguments(
    request: Request,
    args: Callable[[Request], Sequence[Any]] | None,
    kwargs: Callable[[Request], Mapping[str, Any]] | None,
) -> tuple[Sequence[Any], Mapping[str, Any]]:
    return (args(request) if args else ()), (kwargs(request) if kwargs else {})


def _make_dependency(
    model: type,
    action: str,
    *,
    id_param: str | None = None,
    args: Callable[[Request], Sequence[Any]] | None = None,
    kwargs: Callable[[Request], Mapping[str, Any]] | None = None,
) -> Callable[..., Any]:
    """Build the async dependency function for a given model/action.

    Args:
        model: The class to authorize, or to load instances of.
        action: The action name.
        id_param: Path parameter name for single-instance checks.
        args: ``(request) -> sequence`` of extra positional arguments.
        kwargs: ``(request) -> mapping`` of extra keyword arguments.
    """
    if id_param is None:

        async def _authorize_class(
            request: Request,
            authorizer: Authorizer = Depends(get_authorizer),
        ) -> Any:
            extra_args, extra_kwargs = _extra_arguments(request, args, kwargs)
            authorizer.authorize(action, model, *extra_args, **extra_kwargs)
            return model

        return _authorize_class

    async def _authorize_instance(
        request: Request,
        authorizer: Authorizer = Depends(get_authorizer),
        session: Session = Depends(get_session),
    ) -> Any:
        pk_value = request.path_params[id_param]

        # Support both sync and async sessions
        if _is_async_session(session):
            instance = await session.get(model, pk_value)  # type: ignore[misc]
        else:
            instance = session.get(model, pk_value)

        if instance is None:
            raise HTTPException(status_code=404, detail="Not found")

        extra_args, extra_kwargs = _extra_arguments(request, args, kwargs)
        authorizer.authorize(action, instance, *extra_args, **extra_kwargs)
        return instance

    return _authorize_instance


def AuthorizeDep(
    model: type,
    action: str,
    *,
    id_param: str | None = None,
    args: Callable[[Request], Sequence[Any]] | None = None,
    kwargs: Callable[[Request], Mapping[str, Any]] | None = None,
) -> Any:
    """FastAPI dependency that authorizes an action before the route runs.

    Without ``id_param`` the action is checked against *model* itself
    (class-level decision methods, e.g. ``index`` or ``create``) and the
    dependency resolves to *model*. With ``id_param`` the instance whose
    primary key is that path parameter is loaded through ``get_session``
    (404 if missing), checked, and returned.

    Denials raise :class:`~canny.UnauthorizedError`; install
    ``install_error_handlers`` to turn them into 403 responses.

    Args:
        model: The class to authorize, or to load instances of.
        action: The action name (e.g., ``"show"``).
        id_param: Path parameter name for single-instance checks.
        args: ``(request) -> sequence`` of extra positional arguments.
        kwargs: ``(request) -> mapping`` of extra keyword arguments.

    Returns:
        A FastAPI ``Depends`` instance.

    Example::

        @app.get("/documents/{doc_id}")
        async def show_document(
            doc: Document = AuthorizeDep(Document, "show", id_param="doc_id"),
        ) -> dict:
            return {"id": doc.id, "title": doc.title}
    """
    dep_fn = _make_dependency(model, action, id_param=id_param, args=args, kwargs=kwargs)
    return Depends(dep_fn)
