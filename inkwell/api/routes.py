"""
API Routes
"""

import logging

from flask import request
from flask_login import current_user
from inkwell.api import api_bp
from inkwell.errors import Forbidden
from inkwell.services import posts
from inkwell.utils import plain_text

logger = logging.getLogger(__name__)


@api_bp.route('/delete-blog', methods=['DELETE'])
def delete_blog():
    """Delete a post owned by the logged-in user.

    ``userId`` is still accepted from older page scripts but plays no part
    in the permission check; the session user does.
    """
    blog_id = request.args.get('blogId', '')
    user_id = request.args.get('userId')
    logger.debug('delete-blog blogId=%s userId=%s', blog_id, user_id)
    
    try:
        posts.delete_post(current_user, blog_id)
    except Forbidden as e:
        return plain_text(e.message, 403)
    
    return '', 204
