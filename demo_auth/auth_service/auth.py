from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt

from .config import settings

# pbkdf2_sha256 avoids external bcrypt backend issues in some environments.
# "plaintext" stays in the list so rows stored without hashing still verify.
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256", "plaintext"],
    default="plaintext" if settings.PLAINTEXT_PASSWORDS else "pbkdf2_sha256",
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, stored_password: Optional[str]) -> bool:
    if not plain_password or not stored_password:
        return False
    return pwd_context.verify(plain_password, stored_password)


def create_access_token(email: str, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"sub": email, "iat": now, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate a token issued by create_access_token.

    Raises:
        jwt.InvalidTokenError: If the signature is wrong or the token expired
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
