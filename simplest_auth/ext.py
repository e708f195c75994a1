"""Flask binding for `SessionAuth`.

Usage::

    auth = SimplestAuth(app, user_class=SQLAlchemyUserStore(User))

    @app.get("/secret")
    @login_required
    def secret():
        # The session may still name a user that has since been deleted.
        user = current_auth().current_user
        if user is None:
            return current_auth().access_denied()
        return f"hello {user.email}"
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, TypeVar

from flask import Flask, current_app, flash, g, jsonify, redirect, request, session, url_for
from werkzeug.local import LocalProxy

from simplest_auth.config import config_defaults
from simplest_auth.controller import SessionAuth
from simplest_auth.errors import AuthenticationRequired

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

EXTENSION_KEY = "simplest_auth"


class SimplestAuth:
    def __init__(self, app: Flask | None = None, user_class=None):
        self.user_class = user_class
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask, user_class=None) -> None:
        if user_class is not None:
            self.user_class = user_class

        for key, value in config_defaults().items():
            app.config.setdefault(key, value)

        app.extensions[EXTENSION_KEY] = self

        @app.context_processor
        def inject_auth():
            """Expose the current user to all templates."""
            auth = current_auth()
            return {"current_user": auth.current_user, "logged_in": auth.logged_in()}

        @app.errorhandler(AuthenticationRequired)
        def handle_authentication_required(err: AuthenticationRequired):
            login_url = url_for(app.config["SIMPLEST_AUTH_LOGIN_VIEW"])
            return jsonify(err.to_dict(login_url)), err.status_code


def _extension() -> SimplestAuth:
    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:
        raise RuntimeError("SimplestAuth has not been initialized on this app") from None


class FlaskSessionAuth(SessionAuth):
    """`SessionAuth` wired to Flask's request globals."""

    response = None

    @property
    def session(self):
        return session

    @property
    def request(self):
        return request

    @property
    def user_class(self):
        return _extension().user_class

    @property
    def new_session_url(self) -> str:
        return url_for(current_app.config["SIMPLEST_AUTH_LOGIN_VIEW"])

    @property
    def login_message(self) -> str:
        return current_app.config["SIMPLEST_AUTH_LOGIN_MESSAGE"]

    @property
    def return_to_key(self) -> str:
        return current_app.config["SIMPLEST_AUTH_RETURN_TO_KEY"]

    def request_uri(self) -> str:
        # full_path always ends in "?" even without a query string
        return request.full_path if request.query_string else request.path

    def flash(self, message: str, category: str) -> None:
        flash(message, category)

    def redirect_to(self, url: str):
        self.response = redirect(url)
        return self.response


def current_auth() -> FlaskSessionAuth:
    """The auth helper for the current request, created on first use."""
    if "simplest_auth" not in g:
        g.simplest_auth = FlaskSessionAuth()
    return g.simplest_auth


# A proxy is never `None` itself: test it with `not current_user` or `== None`,
# or read `current_auth().current_user` when an identity check is needed.
current_user = LocalProxy(lambda: current_auth().current_user)


def login_required(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        auth = current_auth()
        if not auth.login_required():
            return auth.response
        return fn(*args, **kwargs)

    return wrapper  # type: ignore


def api_login_required(fn: F) -> F:
    """Like `login_required`, but answers 401 JSON instead of redirecting."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not current_auth().authorized():
            logger.info("unauthorized api request to %s", request.path)
            raise AuthenticationRequired()
        return fn(*args, **kwargs)

    return wrapper  # type: ignore
