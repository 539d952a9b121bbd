"""
Authorization Guard

Runs before every request and sends anonymous visitors of restricted pages
to the login form.
"""

import logging

from flask import request, redirect, url_for
from flask_login import current_user

logger = logging.getLogger(__name__)

# First path segments that need a logged-in user. The single post view
# (/blog/<id>) is public while the listing (/blogs) is not.
RESTRICTED_PAGES = frozenset({'blogs', 'post', 'user', 'update'})


def first_segment(path):
    """Return the first segment of a URL path: '/user/abc' -> 'user'."""
    parts = (path or '').split('/')
    return parts[1] if len(parts) > 1 else ''


def is_restricted(path):
    return first_segment(path) in RESTRICTED_PAGES


def check_request():
    """before_request hook. Returns a redirect or None to let the request through."""
    if current_user.is_authenticated:
        return None
    if is_restricted(request.path):
        logger.debug('Anonymous request to %s redirected to login', request.path)
        return redirect(url_for('auth.login'))
    return None


def init_guard(app):
    app.before_request(check_request)
