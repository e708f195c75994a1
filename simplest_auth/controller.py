"""Session-based authentication helper for request handlers.

`SessionAuth` is a mixin. The object it is mixed into supplies the
collaborators:

    session          mutable mapping, persisted by the host between requests
    request          exposes ``full_path`` for the current request
    flash(msg, cat)  one-request user-facing message
    redirect_to(url) issue a redirect
    new_session_url  URL of the login page
    user_class       the user store (see `simplest_auth.stores`)

One instance handles one request. The current user is resolved at most once
per instance and cached, including the "nobody is logged in" outcome.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from simplest_auth.stores import NOT_FOUND_ERRORS

logger = logging.getLogger(__name__)

DEFAULT_SESSION_KEY = "user_id"
DEFAULT_RETURN_TO_KEY = "return_to"
DEFAULT_LOGIN_MESSAGE = "Login or Registration Required"

# Marks a cache that has not been resolved yet; None means "resolved, no user".
_UNRESOLVED = object()


class SessionAuth:
    default_session_key = DEFAULT_SESSION_KEY
    return_to_key = DEFAULT_RETURN_TO_KEY
    login_message = DEFAULT_LOGIN_MESSAGE
    user_id_attribute = "id"

    # --- authorization -------------------------------------------------

    def authorized(self) -> bool:
        """Override to layer role or permission checks over authentication."""
        return self.logged_in()

    def logged_in(self) -> bool:
        return bool(self.current_user_id())

    def login_required(self) -> bool:
        """Gate for the start of request handling.

        Returns False after running the deny flow when the request is not
        authorized; the caller should stop handling the request.
        """
        if not self.authorized():
            self.access_denied()
            return False
        return True

    def access_denied(self):
        logger.info("access denied for %s", self.request_uri())
        self.store_location()
        self.flash(self.login_message, "error")
        return self.redirect_to(self.new_session_url)

    # --- return-to round trip ------------------------------------------

    def request_uri(self) -> str:
        return self.request.full_path

    def store_location(self) -> None:
        self.session[self.return_to_key] = self.request_uri()

    def redirect_back_or_default(self, default_url: str):
        """Redirect to the stored location, or `default_url` if none.

        Call after a successful login. The stored location is cleared either way.
        """
        return_to = self.session.get(self.return_to_key)
        self.session[self.return_to_key] = None
        return self.redirect_to(return_to or default_url)

    # --- current user --------------------------------------------------

    def session_key(self):
        key = getattr(self.user_class, "session_key", None)
        if callable(key):
            key = key()
        return key or self.default_session_key

    def current_user_id(self):
        return self.session.get(self.session_key())

    @property
    def current_user(self) -> Optional[Any]:
        user = self.__dict__.get("_current_user", _UNRESOLVED)
        if user is _UNRESOLVED:
            user = self._resolve_current_user()
            self._current_user = user
        return user

    @current_user.setter
    def current_user(self, user) -> None:
        self.session[self.session_key()] = getattr(user, self.user_id_attribute, None)
        self._current_user = user

    def _resolve_current_user(self):
        user_id = self.current_user_id()
        if not user_id:
            return None

        user = self._find_user(user_id)
        if user is None:
            logger.debug("no user for session id %r, clearing session", user_id)
            self.clear_session()
        return user

    def _find_user(self, user_id):
        store = self.user_class
        fetch = getattr(store, "get", None)
        if fetch is not None:
            try:
                return fetch(user_id)
            except NOT_FOUND_ERRORS:
                logger.debug("direct fetch missed user %r, trying filter lookup", user_id)
        return store.filter_by(**{self.user_id_attribute: user_id}).first()

    def clear_session(self) -> None:
        self.session[self.session_key()] = None


class RequestAuth(SessionAuth):
    """`SessionAuth` with its collaborators passed in explicitly.

    Build one per request and drop it when the request is done.
    """

    def __init__(
        self,
        session,
        request,
        redirect_to,
        flash,
        new_session_url: str,
        user_class,
        login_message: Optional[str] = None,
    ):
        self.session = session
        self.request = request
        self.redirect_to = redirect_to
        self.flash = flash
        self.new_session_url = new_session_url
        self.user_class = user_class
        if login_message is not None:
            self.login_message = login_message
