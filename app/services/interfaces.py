# File: app/services/interfaces.py

"""
Collaborator contracts consumed by UserService.

The service only talks to persistence, validation and email delivery
through these three classes; concrete implementations live in
app.repositories and app.services.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from app.models.user import User


class UserStore(ABC):
    """Persistence for User entities."""

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Return True if any stored user has this email."""

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Persist a user (insert or update) and return the stored instance.

        A new user gets its id assigned here.
        """

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with this id, or None."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with this email, or None."""

    @abstractmethod
    def find_all(self) -> Sequence[User]:
        """Return every stored user."""

    @abstractmethod
    def delete(self, user: User) -> None:
        """Remove a stored user."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored users."""


class UserValidator(ABC):
    """Business-rule checks for a User before it is stored."""

    @abstractmethod
    def validate_user(self, user: User) -> None:
        """Raise if the user is malformed; return None otherwise."""


class Notifier(ABC):
    """Outgoing email notifications."""

    @abstractmethod
    def send_welcome_email(self, email: str) -> None:
        """Send the welcome email to this address."""

    @abstractmethod
    def send_goodbye_email(self, email: str) -> None:
        """Send the goodbye email to this address."""
