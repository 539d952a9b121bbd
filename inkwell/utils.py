"""
Utility helpers shared by the blueprints.
"""

import logging

from flask import make_response

logger = logging.getLogger(__name__)


def plain_text(message, status=200):
    """Build a text/plain response. Lookup and permission failures use this."""
    response = make_response(message, status)
    response.mimetype = 'text/plain'
    return response


def configure_logging(app):
    """Set up root logging from the LOG_LEVEL config value."""
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    app.logger.setLevel(level)
    logger.debug('Logging configured at %s', level)
