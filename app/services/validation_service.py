# File: app/services/validation_service.py

"""
Default user validator.

Runs a User's fields through the UserCreate schema so the rules applied
to API payloads (EmailStr, non-blank name) also guard the service, and
adds a length cap on the name from settings.
"""

from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import UserValidationError
from app.models.user import User
from app.schemas.user import UserCreate
from app.services.interfaces import UserValidator


class EmailValidationService(UserValidator):
    def __init__(self, max_name_length: int | None = None):
        self.max_name_length = max_name_length or settings.max_name_length

    def validate_user(self, user: User) -> None:
        try:
            UserCreate.model_validate({"email": user.email, "name": user.name})
        except ValidationError as e:
            raise UserValidationError(
                f"Invalid user: {e.error_count()} error(s)",
                e.errors(include_url=False, include_context=False),
            ) from e

        if len(user.name) > self.max_name_length:
            raise UserValidationError(
                f"Invalid user: name longer than {self.max_name_length} characters",
                [
                    {
                        "loc": ("name",),
                        "msg": f"name must be at most {self.max_name_length} characters",
                        "type": "string_too_long",
                    }
                ],
            )
