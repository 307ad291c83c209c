"""
Format checks for user supplied credentials.
"""
import re
from typing import Optional

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = "!@#$%^&*()-_=+[]{};:,.?/<>~|"

EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9_+&*-]+(?:\.[A-Za-z0-9_+&*-]+)*"
    r"@(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}"
)

PASSWORD_PATTERN = re.compile(
    r"(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])"
    r"(?=.*[" + re.escape(PASSWORD_SYMBOLS) + r"])"
    r"(?=\S+\Z).{" + str(PASSWORD_MIN_LENGTH) + r",}"
)


def is_email_valid(email: Optional[str]) -> bool:
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_password_valid(password: Optional[str]) -> bool:
    """
    A valid password has at least 8 characters, no whitespace, and at least
    one uppercase letter, one lowercase letter, one digit and one symbol
    from PASSWORD_SYMBOLS.
    """
    if not password or not isinstance(password, str):
        return False
    return PASSWORD_PATTERN.fullmatch(password) is not None
