"""
Services Package

Exports all services for easy importing.
"""

from inkwell.services.accounts import register, login, load_user
from inkwell.services.guard import RESTRICTED_PAGES, is_restricted, init_guard
from inkwell.services.posts import (
    create_post,
    list_posts,
    get_post,
    get_user_profile,
    prepare_update,
    apply_update,
    delete_post,
    is_owner,
)

__all__ = [
    'register',
    'login',
    'load_user',
    'RESTRICTED_PAGES',
    'is_restricted',
    'init_guard',
    'create_post',
    'list_posts',
    'get_post',
    'get_user_profile',
    'prepare_update',
    'apply_update',
    'delete_post',
    'is_owner',
]
