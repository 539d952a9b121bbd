"""
Storage helpers shared by the services.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import OperationalError

from inkwell.errors import StorageUnavailable
from inkwell.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard():
    """Turn a lost database connection into StorageUnavailable.

    The session is rolled back first so the request can be aborted cleanly.
    """
    try:
        yield
    except OperationalError as exc:
        db.session.rollback()
        logger.exception('Database error: %s', exc)
        raise StorageUnavailable() from exc
