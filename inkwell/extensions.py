"""
Flask Extensions

The session cookie only carries the user id; Flask-Login resolves it back
to a User row on every request.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for user sessions
login_manager = LoginManager()
