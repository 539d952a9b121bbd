"""
Blog Exceptions

Domain errors raised by the services. Routes turn them into re-rendered
forms or plain-text responses using ``message``.
"""


class BlogError(Exception):
    """Base exception for blog service errors."""

    message = 'Something went wrong.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFound(BlogError):
    """Raised when an id is malformed or matches no record."""

    message = 'There is no record that matches that query'


class Forbidden(BlogError):
    """Raised when the acting user may not modify a post."""

    message = 'You do not have permission to modify this blog post.'


class UsernameTaken(BlogError):
    message = 'Username is taken.'


class EmailTaken(BlogError):
    message = 'Email is taken.'


class UnknownUsername(BlogError):
    message = 'Username is not correct'


class InvalidPassword(BlogError):
    message = 'Invalid credentials'


class StorageUnavailable(BlogError):
    """Raised when the database cannot be reached. Aborts the request."""

    message = 'The blog database is unavailable. Please try again later.'
