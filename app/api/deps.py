# File: app/api/deps.py

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.repositories.user_repository import SqlAlchemyUserRepository
from app.services.email_service import LoggingEmailService
from app.services.interfaces import Notifier, UserValidator
from app.services.user_service import UserService
from app.services.validation_service import EmailValidationService

# Shared across requests so the outbox accumulates for the process lifetime
_notifier = LoggingEmailService()
_validator = EmailValidationService()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_notifier() -> Notifier:
    return _notifier


def get_validator() -> UserValidator:
    return _validator


def get_user_service(
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    validator: UserValidator = Depends(get_validator),
) -> UserService:
    """
    Build a UserService bound to the request's DB session.

    Usage in route functions:
        service: UserService = Depends(get_user_service)
    """
    return UserService(SqlAlchemyUserRepository(db), notifier, validator)
