from __future__ import annotations

import logging

from flask import Flask

from demo.config import Config
from demo.extensions import auth, db
from demo.models import User
from demo.routes import bp as site_bp
from simplest_auth import SQLAlchemyUserStore


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    db.init_app(app)
    auth.init_app(app, user_class=SQLAlchemyUserStore(User))

    app.register_blueprint(site_bp)

    @app.cli.command("init-db")
    def init_db_cmd():
        """Create tables."""
        db.create_all()
        print("DB initialized (tables created).")

    return app
