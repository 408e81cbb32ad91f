# File: app/core/exceptions.py

from typing import Any, Sequence


class UserServiceError(Exception):
    """Base class for errors raised by the user service layer."""

    pass


class InvalidArgumentError(UserServiceError, ValueError):
    """A required argument was missing."""

    pass


class UserNotFoundError(UserServiceError):
    """No user exists with the requested id."""

    def __init__(self, user_id: Any):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class DuplicateEmailError(UserServiceError):
    """A user with this email is already stored."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already exists: {email}")


class UserValidationError(UserServiceError):
    """
    Raised by the default validator when a user's fields are malformed.

    `errors` holds the pydantic error dicts so callers (e.g. the API layer)
    can report them field by field.
    """

    def __init__(self, message: str, errors: Sequence[dict] | None = None):
        self.errors = list(errors or [])
        super().__init__(message)
