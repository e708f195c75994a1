from datetime import datetime

from demo.extensions import db


class User(db.Model):
    __tablename__ = "users"

    # Session slot the auth helper stores our id under.
    session_key = "user_id"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
