"""
Signup, signin and password reset decisions.

Checks run in a fixed order and the first failure is raised as an
AuthError subclass carrying the HTTP status and the user facing message.
"""
import logging
from typing import Callable, Optional

from .auth import create_access_token, verify_password
from .models import User
from .repository import DuplicateUserError
from .users import UserService

logger = logging.getLogger(__name__)

RESET_PASSWORD_MESSAGE = "Senha redefinida com sucesso (fake)"


class AuthError(Exception):
    """Base class for authentication outcomes other than success."""

    status_code: int = 400
    message: str = "Requisição inválida"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidEmailError(AuthError):
    status_code = 422
    message = "E-mail inválido"


class InvalidPasswordError(AuthError):
    status_code = 422
    message = "Senha inválida"


class EmailInUseError(AuthError):
    status_code = 409
    message = "E-mail já está em uso"


class EmailNotFoundError(AuthError):
    status_code = 404
    message = "Usuário não encontrado"


class CredentialMismatchError(AuthError):
    # Same outcome for unknown e-mail and wrong password
    status_code = 401
    message = "Credenciais inválidas"


class AuthService:
    def __init__(self, users: UserService, token_issuer: Callable[[str], str] = create_access_token):
        self._users = users
        self._token_issuer = token_issuer

    def _check_credentials_format(self, email: Optional[str], password: Optional[str]) -> None:
        if not self._users.is_email_valid(email):
            raise InvalidEmailError()
        if not self._users.is_password_valid(password):
            raise InvalidPasswordError()

    def signup(
        self,
        email: Optional[str],
        password: Optional[str],
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        self._check_credentials_format(email, password)

        if self._users.find_by_email(email) is not None:
            raise EmailInUseError()

        try:
            user = self._users.create_user(email, password, first_name=first_name, last_name=last_name)
        except DuplicateUserError as e:
            # lost a race with a concurrent signup for the same address
            raise EmailInUseError() from e

        logger.info("User created: user_id=%s email=%s", user.id, user.email)
        return user

    def signin(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Check the credentials and return a freshly issued access token.

        Raises:
            InvalidEmailError, InvalidPasswordError: Malformed input
            CredentialMismatchError: Unknown e-mail or wrong password
        """
        self._check_credentials_format(email, password)

        user = self._users.find_by_email(email)
        if user is None or not verify_password(password, user.password):
            raise CredentialMismatchError()

        return self._token_issuer(user.email)

    def reset_password(self, email: Optional[str]) -> str:
        # Acknowledgment only: the stored user is left untouched
        if not self._users.is_email_valid(email):
            raise InvalidEmailError()

        if self._users.find_by_email(email) is None:
            raise EmailNotFoundError()

        return RESET_PASSWORD_MESSAGE
