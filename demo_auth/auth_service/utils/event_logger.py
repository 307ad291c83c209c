"""
Event logger utility for authentication events.
"""
from datetime import datetime
from typing import Optional
from fastapi import Request
import sys
import logging
import os

from ..config import settings


def configure_logging() -> None:
    """
    Configure stdout logging plus a file handler under LOG_DIR when the
    directory can be created.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    # Try to add file handler, but continue without it if directory creation fails
    try:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(settings.LOG_DIR, "auth_events.log")))
    except OSError as e:
        print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s:%(message)s",
        handlers=handlers
    )


logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "signup_success",
    "signup_failure",
    "signin_success",
    "signin_failure",
    "password_reset_requested",
    "password_reset_failure",
}


def client_ip(request: Request) -> Optional[str]:
    """Client address, falling back to the first X-Forwarded-For hop."""
    if request.client and request.client.host:
        return request.client.host
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return None


def log_auth_event(
    event_type: str,
    email: Optional[str],
    request: Request,
    reason: Optional[str] = None
) -> None:
    """
    Log an authentication event.

    Args:
        event_type: One of ALLOWED_EVENT_TYPES
        email: E-mail supplied with the request (may be absent)
        request: FastAPI Request object
        reason: Optional failure message

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    # escape control characters so one event stays on one log line
    if email:
        email = email.encode("unicode_escape").decode("ascii")
    ip_address = client_ip(request)
    timestamp = datetime.utcnow().isoformat()

    if reason:
        logger.info(
            "AUTH %s email=%s ip=%s reason=%s timestamp=%s",
            event_type, email, ip_address, reason, timestamp
        )
    else:
        logger.info(
            "AUTH %s email=%s ip=%s timestamp=%s",
            event_type, email, ip_address, timestamp
        )
