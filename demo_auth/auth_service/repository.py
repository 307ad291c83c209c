"""
Persistence gateway for User records.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import User

logger = logging.getLogger(__name__)


class DuplicateUserError(Exception):
    """Raised when a save violates the unique e-mail constraint."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email


class UserRepository:
    """Lookup-by-email and create operations backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self._db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self._db.query(User).filter(User.email == email).first()

    def save(self, user: User) -> User:
        self._db.add(user)
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logger.warning("Unique constraint hit while saving user email=%s", user.email)
            raise DuplicateUserError(user.email) from e
        self._db.refresh(user)
        return user
