"""
Inkwell - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the blog.
"""

import logging
import os

from flask import Flask
from inkwell.extensions import db, login_manager
from inkwell.config import Config
from inkwell.errors import StorageUnavailable
from inkwell.utils import configure_logging, plain_text

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    
    # Register blueprints
    from inkwell.auth import auth_bp
    from inkwell.blog import blog_bp
    from inkwell.api import api_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(api_bp, url_prefix='/api')
    
    # Restricted pages redirect anonymous visitors to /login
    from inkwell.services.guard import init_guard
    init_guard(app)
    
    # Session cookie holds only the user id
    @login_manager.user_loader
    def load_user(user_id):
        from inkwell.services.accounts import load_user as resolve_user
        return resolve_user(user_id)
    
    # Lets templates decide whether to show edit/delete controls
    @app.context_processor
    def inject_is_owner():
        from inkwell.services.posts import is_owner
        return dict(is_owner=is_owner)
    
    @app.errorhandler(StorageUnavailable)
    def storage_unavailable(exc):
        logger.error('Aborting request: %s', exc.message)
        return plain_text(exc.message, 503)
    
    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()
    
    return app
