"""
Models Package

Exports all models for easy importing.
"""

from inkwell.models.ids import ID_LENGTH, new_id, is_valid_id
from inkwell.models.user import User
from inkwell.models.post import Post

__all__ = ['User', 'Post', 'ID_LENGTH', 'new_id', 'is_valid_id']
