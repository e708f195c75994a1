from simplest_auth.controller import RequestAuth, SessionAuth
from simplest_auth.errors import AuthenticationRequired
from simplest_auth.ext import (
    FlaskSessionAuth,
    SimplestAuth,
    api_login_required,
    current_auth,
    current_user,
    login_required,
)
from simplest_auth.stores import RecordNotFound, SQLAlchemyUserStore, UserStore
from simplest_auth.views import AuthMethodView

__all__ = [
    "AuthMethodView",
    "AuthenticationRequired",
    "FlaskSessionAuth",
    "RecordNotFound",
    "RequestAuth",
    "SQLAlchemyUserStore",
    "SessionAuth",
    "SimplestAuth",
    "UserStore",
    "api_login_required",
    "current_auth",
    "current_user",
    "login_required",
]
