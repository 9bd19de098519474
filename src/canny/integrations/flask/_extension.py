"""Flask extension for canny authorization."""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from flask import Flask, abort, current_app, g, jsonify
from sqlalchemy.orm import Session

from canny.authorizer import Authorizer
from canny.config._config import get_global_config
from canny.exceptions import UnauthorizedError
from canny.result import Result

__all__ = ["CannyExtension"]

F = TypeVar("F", bound=Callable[..., Any])

ArgsProvider = Callable[[Mapping[str, Any]], Sequence[Any]]
KwargsProvider = Callable[[Mapping[str, Any]], Mapping[str, Any]]
Handler = Callable[[str, Mapping[str, Any]], None]


class CannyExtension:
    """Flask extension that authorizes requests against the current subject.

    Each request gets its own :class:`~canny.Authorizer` whose leading
    default argument is the subject returned by ``subject_provider``, so
    decision methods receive the subject first. The extension registers a
    403 handler for :class:`~canny.UnauthorizedError`, exposes ``can``,
    ``cannot``, ``is_allowed`` and ``is_denied`` to templates, and offers
    :meth:`authorize_action` as a view decorator.

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        subject_provider: A callable ``() -> subject`` returning the acting
            subject. Called within request context.
        session_provider: Optional callable ``() -> Session`` used by
            :meth:`authorize_action` to load instances by primary key.

    Example::

        app = Flask(__name__)
        canny = CannyExtension(app, subject_provider=lambda: g.user)

        @app.post("/documents/<int:id>/delete")
        @canny.authorize_action(Document, loader=lambda pk: db.session.get(Document, pk))
        def delete(id):
            ...

    In templates::

        {% if is_allowed("edit", document) %}<a href="...">Edit</a>{% endif %}
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        subject_provider: Callable[[], Any],
        session_provider: Callable[[], Session] | None = None,
    ) -> None:
        self._subject_provider = subject_provider
        self._session_provider = session_provider

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores the providers on ``app.extensions["canny"]``, registers the
        error handler for :class:`~canny.UnauthorizedError` and the
        template helpers.
        """
        app.extensions["canny"] = {
            "subject_provider": self._subject_provider,
            "session_provider": self._session_provider,
        }

        @app.errorhandler(UnauthorizedError)
        def handle_unauthorized(exc: UnauthorizedError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc), "reason": str(exc.reason)}), 403

        @app.context_processor
        def inject_helpers() -> dict[str, Any]:  # pyright: ignore[reportUnusedFunction]
            return {
                "can": self.can,
                "cannot": self.cannot,
                "is_allowed": self.is_allowed,
                "is_denied": self.is_denied,
            }

    # ------------------------------------------------------------------
    # Request-scoped authorizer
    # ------------------------------------------------------------------

    @property
    def authorizer(self) -> Authorizer:
        """The authorizer for the current request, bound to its subject."""
        authorizer: Authorizer | None = g.get("_canny_authorizer")
        if authorizer is None:
            ext_state: dict[str, Any] = current_app.extensions["canny"]
            subject_provider: Callable[[], Any] = ext_state["subject_provider"]
            authorizer = Authorizer(subject_provider())
            g._canny_authorizer = authorizer
        return authorizer

    def can(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> Result:
        return self.authorizer.can(action, target, *args, **kwargs)

    def cannot(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> Result:
        return self.authorizer.cannot(action, target, *args, **kwargs)

    def is_allowed(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> bool:
        return self.authorizer.is_allowed(action, target, *args, **kwargs)

    def is_denied(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> bool:
        return self.authorizer.is_denied(action, target, *args, **kwargs)

    def authorize(self, action: object, target: object, /, *args: Any, **kwargs: Any) -> None:
        """Authorize *action* on *target* for the current subject.

        Raises:
            UnauthorizedError: If the decision method denies the action.
        """
        self.authorizer.authorize(action, target, *args, **kwargs)

    # ------------------------------------------------------------------
    # View decorator
    # ------------------------------------------------------------------

    def authorize_action(
        self,
        model: type | None = None,
        *,
        action: str | None = None,
        id_param: str = "id",
        loader: Callable[[Any], Any] | None = None,
        class_args: ArgsProvider | None = None,
        class_kwargs: KwargsProvider | None = None,
        instance_args: ArgsProvider | None = None,
        instance_kwargs: KwargsProvider | None = None,
        handler: Handler | None = None,
    ) -> Callable[[F], F]:
        """Authorize the view before it runs.

        The action defaults to the view function's name. Actions listed in
        :attr:`CannyConfig.class_actions` (``index``, ``new``, ``create``
        by default) are checked against *model* itself; any other action is
        checked against the instance whose primary key is the *id_param*
        view argument. A missing instance aborts with 404. The checked
        target is stored on ``g.canny_target``.

        With *handler*, none of that happens: ``handler(action, view_kwargs)``
        is called instead and is expected to raise (usually through
        :meth:`authorize`) to refuse the request.

        Args:
            model: The class owning class-level decision methods. Required
                unless *handler* is given.
            action: Explicit action name instead of the view name.
            id_param: View argument holding the primary key.
            loader: ``(pk) -> instance | None``. Defaults to
                ``session_provider().get(model, pk)``.
            class_args: ``(view_kwargs) -> sequence`` of extra positional
                arguments for class-level checks.
            class_kwargs: ``(view_kwargs) -> mapping`` of extra keyword
                arguments for class-level checks.
            instance_args: Same as *class_args*, for instance checks.
            instance_kwargs: Same as *class_kwargs*, for instance checks.
            handler: ``(action, view_kwargs) -> None`` replacing the
                class/instance check.

        Raises:
            ValueError: If neither *model* nor *handler* is given.

        Example::

            @app.get("/projects/<int:project_id>/documents")
            @canny.authorize_action(
                Document,
                action="index",
                class_kwargs=lambda view_kwargs: {"project_id": view_kwargs["project_id"]},
            )
            def list_documents(project_id):
                ...

            @app.post("/documents/<int:id>/publish")
            @canny.authorize_action(
                handler=lambda action, view_kwargs: canny.authorize(
                    action, load_document(view_kwargs["id"]), channel="web"
                ),
            )
            def publish(id):
                ...
        """
        if model is None and handler is None:
            raise ValueError("authorize_action needs a model or a handler")

        def decorator(view: F) -> F:
            view_action = action if action is not None else view.__name__

            @functools.wraps(view)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                if handler is not None:
                    handler(view_action, kwargs)
                    return view(*args, **kwargs)

                assert model is not None
                if view_action in get_global_config().class_actions:
                    target: Any = model
                    extra_args = class_args(kwargs) if class_args else ()
                    extra_kwargs = class_kwargs(kwargs) if class_kwargs else {}
                else:
                    target = self._load_instance(model, kwargs, id_param, loader)
                    extra_args = instance_args(kwargs) if instance_args else ()
                    extra_kwargs = instance_kwargs(kwargs) if instance_kwargs else {}

                self.authorize(view_action, target, *extra_args, **extra_kwargs)
                g.canny_target = target
                return view(*args, **kwargs)

            return wrapper  # type: ignore[return-value]

        return decorator

    def _load_instance(
        self,
        model: type,
        view_kwargs: Mapping[str, Any],
        id_param: str,
        loader: Callable[[Any], Any] | None,
    ) -> Any:
        if id_param not in view_kwargs:
            raise RuntimeError(
                f"authorize_action needs the view argument {id_param!r} to load {model.__name__}"
            )
        pk = view_kwargs[id_param]

        if loader is not None:
            instance = loader(pk)
        else:
            session_provider: Callable[[], Session] | None = current_app.extensions["canny"][
                "session_provider"
            ]
            if session_provider is None:
                raise RuntimeError(
                    "authorize_action needs a loader or a session_provider on CannyExtension"
                )
            instance = session_provider().get(model, pk)

        if instance is None:
            abort(404)
        return instance
