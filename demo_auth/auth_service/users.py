from typing import Optional

from . import validators
from .auth import hash_password
from .models import User
from .repository import UserRepository


class UserService:
    """Validation helpers plus the user lookups and writes the auth flows need."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    @staticmethod
    def is_email_valid(email: Optional[str]) -> bool:
        return validators.is_email_valid(email)

    @staticmethod
    def is_password_valid(password: Optional[str]) -> bool:
        return validators.is_password_valid(password)

    def find_by_email(self, email: Optional[str]) -> Optional[User]:
        if email is None:
            return None
        return self._repository.find_by_email(email)

    def create_user(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        user = User(
            email=email,
            password=hash_password(password),
            first_name=first_name,
            last_name=last_name,
        )
        return self._repository.save(user)
