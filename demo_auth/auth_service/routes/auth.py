"""
Auth router: signup, signin and the stub password reset.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..db import get_db
from ..repository import UserRepository
from ..schemas import (
    UserCreate,
    UserLogin,
    UserResponse,
    Token,
    PasswordResetRequest,
    MessageResponse,
)
from ..service import AuthService, AuthError
from ..users import UserService
from ..utils.event_logger import log_auth_event

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserService(UserRepository(db)))


@router.post("/signup", response_model=UserResponse)
def signup(payload: UserCreate, request: Request, service: AuthService = Depends(get_auth_service)):
    try:
        user = service.signup(
            payload.email,
            payload.password,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
    except AuthError as e:
        log_auth_event("signup_failure", payload.email, request, reason=e.message)
        raise

    log_auth_event("signup_success", user.email, request)
    return user


@router.post("/signin", response_model=Token)
def signin(credentials: UserLogin, request: Request, service: AuthService = Depends(get_auth_service)):
    try:
        token = service.signin(credentials.email, credentials.password)
    except AuthError as e:
        log_auth_event("signin_failure", credentials.email, request, reason=e.message)
        raise

    log_auth_event("signin_success", credentials.email, request)
    return Token(token=token)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(payload: PasswordResetRequest, request: Request, service: AuthService = Depends(get_auth_service)):
    try:
        message = service.reset_password(payload.email)
    except AuthError as e:
        log_auth_event("password_reset_failure", payload.email, request, reason=e.message)
        raise

    log_auth_event("password_reset_requested", payload.email, request)
    return MessageResponse(message=message)
