"""User store adapters.

A store is whatever the host configures as ``user_class``. Two lookup shapes
are supported:

* direct fetch: ``store.get(identifier)`` returns the user or raises a
  not-found error (``RecordNotFound`` or SQLAlchemy's ``NoResultFound``);
* query builder: ``store.filter_by(id=identifier).first()`` returns the user
  or ``None``.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from sqlalchemy.exc import NoResultFound


class RecordNotFound(LookupError):
    """Raised by direct-fetch stores when no user has the given identifier."""


# Errors that mean "no such user" on the direct-fetch path.
NOT_FOUND_ERRORS = (RecordNotFound, NoResultFound)


class UserQuery(Protocol):
    def first(self) -> Any: ...


class UserStore(Protocol):
    def get(self, identifier: Any) -> Any: ...

    def filter_by(self, **criteria: Any) -> UserQuery: ...


class SQLAlchemyUserStore:
    """Expose a Flask-SQLAlchemy model through both lookup shapes."""

    def __init__(self, model, session=None):
        self.model = model
        self._session = session

    @property
    def session(self):
        # Flask-SQLAlchemy binds `Model.query` to the app's scoped session.
        if self._session is not None:
            return self._session
        return self.model.query.session

    @property
    def session_key(self) -> Optional[str]:
        return getattr(self.model, "session_key", None)

    def get(self, identifier):
        return self.session.get_one(self.model, identifier)

    def filter_by(self, **criteria):
        return self.session.query(self.model).filter_by(**criteria)

    def __repr__(self) -> str:
        return f"<SQLAlchemyUserStore {self.model.__name__}>"
