"""
Post Services

Creating, reading, editing and deleting blog posts. Every mutation is
restricted to the post's author.
"""

import logging

from inkwell.errors import NotFound, Forbidden
from inkwell.extensions import db
from inkwell.models import User, Post, is_valid_id
from inkwell.services.storage import storage_guard

logger = logging.getLogger(__name__)

POST_NOT_FOUND = 'There is no blog posted that matches that query'
USER_NOT_FOUND = 'There is no user registered that matches that query'


def _is_logged_in(user):
    return user is not None and getattr(user, 'is_authenticated', False)


def is_owner(user, post):
    """True when ``user`` wrote ``post``."""
    return _is_logged_in(user) and post is not None and post.author_id == user.id


def create_post(session_user, title, content):
    """Store a new post authored by ``session_user``.

    Title and content are stored as given; empty values are accepted.
    """
    if not _is_logged_in(session_user):
        raise Forbidden('You must be logged in to write a blog post.')
    
    post = Post(
        title=title,
        content=content,
        author_id=session_user.id,
        author=session_user.snapshot(),
    )
    with storage_guard():
        db.session.add(post)
        db.session.commit()
    
    logger.info('User %s created post %s', session_user.id, post.id)
    return post


def list_posts():
    """Every post, in whatever order the database returns them."""
    with storage_guard():
        return Post.query.all()


def get_post(post_id):
    """Fetch one post. Malformed ids fail without touching the database."""
    if not is_valid_id(post_id):
        raise NotFound(POST_NOT_FOUND)
    with storage_guard():
        post = db.session.get(Post, post_id)
    if post is None:
        raise NotFound(POST_NOT_FOUND)
    return post


def get_user_profile(user_id):
    """Return ``(user, posts)`` for the profile page."""
    if not is_valid_id(user_id):
        raise NotFound(USER_NOT_FOUND)
    with storage_guard():
        user = db.session.get(User, user_id)
        if user is None:
            raise NotFound(USER_NOT_FOUND)
        posts = Post.query.filter_by(author_id=user_id).all()
    return user, posts


def _owned_post(session_user, post_id):
    post = get_post(post_id)
    if not is_owner(session_user, post):
        logger.warning('User %s may not modify post %s',
                       getattr(session_user, 'id', None), post_id)
        raise Forbidden()
    return post


def prepare_update(session_user, post_id):
    """Load a post for the edit form.

    Raises:
        NotFound: malformed id or no such post
        Forbidden: ``session_user`` did not write this post
    """
    return _owned_post(session_user, post_id)


def apply_update(session_user, post_id, title, content):
    """Replace the post's title, content and author fields.

    This is a full replace: the author snapshot is refreshed from
    ``session_user`` as well.
    """
    post = _owned_post(session_user, post_id)
    with storage_guard():
        post.title = title
        post.content = content
        post.author_id = session_user.id
        post.author = session_user.snapshot()
        db.session.commit()
    
    logger.info('User %s updated post %s', session_user.id, post.id)
    return post


def delete_post(session_user, post_id):
    """Delete a post written by ``session_user``.

    Returns True when a row was removed. Unknown or malformed ids are a no-op
    returning False, so deleting twice leaves the same state as deleting once.
    """
    if not _is_logged_in(session_user):
        raise Forbidden('You must be logged in to delete a blog post.')
    if not is_valid_id(post_id):
        return False
    
    with storage_guard():
        post = db.session.get(Post, post_id)
        if post is None:
            return False
        if not is_owner(session_user, post):
            logger.warning('User %s may not delete post %s', session_user.id, post_id)
            raise Forbidden('You do not have permission to delete this blog post.')
        db.session.delete(post)
        db.session.commit()
    
    logger.info('User %s deleted post %s', session_user.id, post_id)
    return True
