"""
Record identifiers

Users and posts are keyed by 24 lowercase hex characters generated at insert.
"""

import secrets

ID_LENGTH = 24


def new_id():
    return secrets.token_hex(ID_LENGTH // 2)


def is_valid_id(value):
    """Cheap shape check run before any lookup; not a full validation."""
    return isinstance(value, str) and len(value) == ID_LENGTH
