import os

from simplest_auth.controller import DEFAULT_LOGIN_MESSAGE, DEFAULT_RETURN_TO_KEY


class Config:
    # Endpoint name passed to url_for() to build the login page URL.
    SIMPLEST_AUTH_LOGIN_VIEW = os.getenv("SIMPLEST_AUTH_LOGIN_VIEW", "login")
    SIMPLEST_AUTH_LOGIN_MESSAGE = os.getenv("SIMPLEST_AUTH_LOGIN_MESSAGE", DEFAULT_LOGIN_MESSAGE)
    SIMPLEST_AUTH_RETURN_TO_KEY = os.getenv("SIMPLEST_AUTH_RETURN_TO_KEY", DEFAULT_RETURN_TO_KEY)


def config_defaults() -> dict:
    return {k: v for k, v in vars(Config).items() if k.startswith("SIMPLEST_AUTH_")}
