from flask_sqlalchemy import SQLAlchemy

from simplest_auth import SimplestAuth

# Singletons (initialized in app factory)
db = SQLAlchemy()
auth = SimplestAuth()
