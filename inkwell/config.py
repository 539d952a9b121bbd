"""
Configuration settings for the Inkwell blog
"""
import os


class Config:
    """Flask application configuration"""
    
    # Signs the session cookie that carries the logged-in user's id
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'inkwell-dev-only-session-key'
    SESSION_COOKIE_HTTPONLY = True
    REMEMBER_COOKIE_HTTPONLY = True
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'inkwell.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Process settings
    PORT = int(os.environ.get('PORT') or 5000)
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
