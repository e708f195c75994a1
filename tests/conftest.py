import os
import sys

import pytest
from werkzeug.security import generate_password_hash

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from demo.config import Config
from demo.extensions import db
from demo.factory import create_app
from demo.models import User


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    # Use SQLite in tests for simplicity.
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


def _add_user(app, email, password, is_admin=False) -> int:
    with app.app_context():
        user = User(email=email, password_hash=generate_password_hash(password), is_admin=is_admin)
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture()
def user_id(app):
    return _add_user(app, "test@test.com", "Test123!")


@pytest.fixture()
def admin_id(app):
    return _add_user(app, "admin@test.com", "Admin123!", is_admin=True)


def login(client, email="test@test.com", password="Test123!"):
    return client.post("/login", data={"email": email, "password": password})
