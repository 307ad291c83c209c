"""
HTTP boundary tests with the auth service replaced by a mock, so only the
outcome to status/message mapping is exercised.
"""
import logging

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from demo_auth.auth_service.main import app
from demo_auth.auth_service.models import User
from demo_auth.auth_service.routes.auth import get_auth_service
from demo_auth.auth_service.service import (
    AuthService,
    CredentialMismatchError,
    EmailInUseError,
    EmailNotFoundError,
    InvalidEmailError,
    InvalidPasswordError,
    RESET_PASSWORD_MESSAGE,
)


@pytest.fixture
def auth_service():
    return Mock(spec=AuthService)


@pytest.fixture
def client(auth_service):
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    # no `with`: startup is not needed when the service is mocked
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.parametrize("error, status_code, message", [
    (InvalidEmailError(), 422, "E-mail inválido"),
    (InvalidPasswordError(), 422, "Senha inválida"),
    (EmailInUseError(), 409, "E-mail já está em uso"),
])
def test_signup_failures(client, auth_service, error, status_code, message):
    auth_service.signup.side_effect = error

    response = client.post("/auth/signup", json={"email": "valid@email.com", "password": "ValidPass1!"})

    assert response.status_code == status_code
    assert response.json() == {"message": message}


def test_signup_returns_created_user(client, auth_service):
    auth_service.signup.return_value = User(id=7, email="valid@email.com", password="secret")

    response = client.post("/auth/signup", json={"email": "valid@email.com", "password": "ValidPass1!"})

    assert response.status_code == 200
    assert response.json()["email"] == "valid@email.com"
    assert response.json()["id"] == 7
    auth_service.signup.assert_called_once_with(
        "valid@email.com", "ValidPass1!", first_name=None, last_name=None
    )


def test_signin_returns_token(client, auth_service):
    auth_service.signin.return_value = "signed-token"

    response = client.post("/auth/signin", json={"email": "valid@email.com", "password": "ValidPass1!"})

    assert response.status_code == 200
    assert response.json()["token"] == "signed-token"


@pytest.mark.parametrize("error, status_code, message", [
    (InvalidEmailError(), 422, "E-mail inválido"),
    (InvalidPasswordError(), 422, "Senha inválida"),
    (CredentialMismatchError(), 401, "Credenciais inválidas"),
])
def test_signin_failures(client, auth_service, error, status_code, message):
    auth_service.signin.side_effect = error

    response = client.post("/auth/signin", json={"email": "valid@email.com", "password": "anyPassword"})

    assert response.status_code == status_code
    assert response.json() == {"message": message}


def test_reset_password_success(client, auth_service):
    auth_service.reset_password.return_value = RESET_PASSWORD_MESSAGE

    response = client.post("/auth/reset-password", json={"email": "valid@email.com"})

    assert response.status_code == 200
    assert response.json() == {"message": "Senha redefinida com sucesso (fake)"}


@pytest.mark.parametrize("error, status_code, message", [
    (InvalidEmailError(), 422, "E-mail inválido"),
    (EmailNotFoundError(), 404, "Usuário não encontrado"),
])
def test_reset_password_failures(client, auth_service, error, status_code, message):
    auth_service.reset_password.side_effect = error

    response = client.post("/auth/reset-password", json={"email": "valid@email.com"})

    assert response.status_code == status_code
    assert response.json() == {"message": message}


def test_store_failure_returns_generic_error(client, auth_service):
    auth_service.signin.side_effect = OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    response = client.post("/auth/signin", json={"email": "valid@email.com", "password": "ValidPass1!"})

    assert response.status_code == 500
    assert response.json() == {"message": "Erro interno do servidor"}
    assert "disk" not in response.text


def test_reset_password_failure_is_logged(client, auth_service, caplog):
    auth_service.reset_password.side_effect = EmailNotFoundError()

    with caplog.at_level(logging.INFO, logger="demo_auth.auth_service.utils.event_logger"):
        response = client.post("/auth/reset-password", json={"email": "nobody@email.com"})

    assert response.status_code == 404
    assert "AUTH password_reset_failure email=nobody@email.com" in caplog.text
    assert "reason=Usuário não encontrado" in caplog.text
    assert "password_reset_requested" not in caplog.text
