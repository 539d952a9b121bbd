"""
Account Services

Registration, credential checks and session resolution.
"""

import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from inkwell.errors import UsernameTaken, EmailTaken, UnknownUsername, InvalidPassword
from inkwell.extensions import db
from inkwell.models import User, is_valid_id
from inkwell.services.storage import storage_guard

logger = logging.getLogger(__name__)


def _username_exists(username):
    return User.query.filter_by(username=username).first() is not None


def _email_exists(email):
    return User.query.filter_by(email=email).first() is not None


def register(name, email, username, password):
    """Create a new user.

    The username is checked before the email, so a request that collides on
    both reports ``UsernameTaken``. The lookups are only a fast path: the
    unique constraints on ``users`` decide the winner when two registrations
    race, and the loser gets the same error it would have seen sequentially.

    Raises:
        UsernameTaken: a user already has ``username``
        EmailTaken: a user already has ``email``
        StorageUnavailable: the database could not be reached
    """
    with storage_guard():
        if _username_exists(username):
            raise UsernameTaken()
        if _email_exists(email):
            raise EmailTaken()
        
        user = User(
            name=name,
            email=email,
            username=username,
            password_hash=generate_password_hash(password, method='pbkdf2:sha256'),
        )
        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.info('Registration for %s lost a uniqueness race', username)
            if User.query.filter_by(username=username).first() is not None:
                raise UsernameTaken()
            raise EmailTaken()
    
    logger.info('Registered user %s (%s)', user.username, user.id)
    return user


def login(username, password):
    """Return the user whose username and password both match.

    Raises:
        UnknownUsername: no user has ``username``
        InvalidPassword: the password does not verify against the stored digest
    """
    with storage_guard():
        user = User.query.filter_by(username=username).first()
    
    if user is None:
        logger.warning('Login failed: unknown username %s', username)
        raise UnknownUsername()
    if not check_password_hash(user.password_hash, password):
        logger.warning('Login failed: bad password for %s', username)
        raise InvalidPassword()
    
    logger.info('User %s logged in', user.username)
    return user


def load_user(user_id):
    """Resolve the id stored in the session cookie to a User, or None."""
    if not is_valid_id(user_id):
        return None
    with storage_guard():
        return db.session.get(User, user_id)
