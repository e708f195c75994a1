import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///simplest_auth_demo.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SIMPLEST_AUTH_LOGIN_VIEW = "site.login"
