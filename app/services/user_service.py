# File: app/services/user_service.py

"""
User service.

Orchestrates the user lifecycle:
  - validate input
  - check / mutate the store
  - send welcome / goodbye emails

Persistence, validation rules and email delivery are injected, so the
service itself holds no state beyond those three references.
"""

import logging
from typing import List, Optional

from app.core.exceptions import (
    DuplicateEmailError,
    InvalidArgumentError,
    UserNotFoundError,
)
from app.models.user import User
from app.services.interfaces import Notifier, UserStore, UserValidator

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        user_store: UserStore,
        notifier: Notifier,
        validator: UserValidator,
    ):
        self.user_store = user_store
        self.notifier = notifier
        self.validator = validator

    def create_user(self, user: Optional[User]) -> User:
        """
        Create a new user.

        Order is fixed: validate -> duplicate check -> save -> welcome email.

        Raises:
            InvalidArgumentError: user is None
            DuplicateEmailError: a stored user already has this email
            Whatever the validator raises, unchanged.
        """
        if user is None:
            raise InvalidArgumentError("User cannot be None")

        self.validator.validate_user(user)

        if self.user_store.exists_by_email(user.email):
            logger.warning("Rejected new user, email already exists: %s", user.email)
            raise DuplicateEmailError(user.email)

        saved_user = self.user_store.save(user)
        self.notifier.send_welcome_email(saved_user.email)

        logger.info("Created user %s (%s)", saved_user.id, saved_user.email)
        return saved_user

    def get_user_by_id(self, user_id: Optional[int]) -> User:
        """
        Look up a user by id.

        Raises:
            InvalidArgumentError: user_id is None
            UserNotFoundError: no user with that id
        """
        if user_id is None:
            raise InvalidArgumentError("User ID cannot be None")

        user = self.user_store.find_by_id(user_id)
        if user is None:
            logger.warning("User not found: %s", user_id)
            raise UserNotFoundError(user_id)
        return user

    def find_by_email(self, email: Optional[str]) -> Optional[User]:
        # Blank input is "no match", not an error, and never hits the store.
        if email is None or not email.strip():
            return None

        return self.user_store.find_by_email(email)

    def get_all_active_users(self) -> List[User]:
        return [user for user in self.user_store.find_all() if user.active]

    def update_user(self, user_id: Optional[int], updated_user: User) -> User:
        """
        Copy name and email from `updated_user` onto the stored user and save it.

        The stored object is the one mutated and saved; `updated_user.id`
        is ignored.

        Raises:
            InvalidArgumentError: user_id is None
            UserNotFoundError: no user with that id
        """
        existing_user = self.get_user_by_id(user_id)

        existing_user.name = updated_user.name
        existing_user.email = updated_user.email

        saved_user = self.user_store.save(existing_user)
        logger.info("Updated user %s", saved_user.id)
        return saved_user

    def delete_user(self, user_id: Optional[int]) -> None:
        """
        Delete a user, then send the goodbye email.

        Raises:
            InvalidArgumentError: user_id is None
            UserNotFoundError: no user with that id
        """
        user = self.get_user_by_id(user_id)
        email = user.email

        self.user_store.delete(user)
        self.notifier.send_goodbye_email(email)
        logger.info("Deleted user %s (%s)", user_id, email)

    def count_users(self) -> int:
        return self.user_store.count()
