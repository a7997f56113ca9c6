"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB). The client is not used as
a context manager, so the lifespan (index creation) does not run.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from bootcamp_api.application.dto.auth_dto import TokenResponse
from bootcamp_api.application.dto.user_dto import UserResponse
from bootcamp_api.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from bootcamp_api.application.use_cases.auth.login_user import LoginUserUseCase
from bootcamp_api.application.use_cases.auth.register_user import RegisterUserUseCase
from bootcamp_api.domain.exceptions import ConflictError, UnauthorizedError


@pytest.fixture
def mock_register_use_case():
    uc = AsyncMock(spec=RegisterUserUseCase)
    return uc


@pytest.fixture
def mock_login_use_case():
    uc = AsyncMock(spec=LoginUserUseCase)
    return uc


@pytest.fixture
def mock_current_user_use_case():
    uc = AsyncMock(spec=GetCurrentUserUseCase)
    return uc


@pytest.fixture
def mock_container(mock_register_use_case, mock_login_use_case, mock_current_user_use_case):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        RegisterUserUseCase: mock_register_use_case,
        LoginUserUseCase: mock_login_use_case,
        GetCurrentUserUseCase: mock_current_user_use_case,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from bootcamp_api.main import app

    with patch("bootcamp_api.api.v1.auth_controller.get_container", return_value=mock_container), patch(
        "bootcamp_api.api.v1.dependencies.get_container", return_value=mock_container
    ):
        yield TestClient(app)


class TestAuthAPI:
    """Tests for /api/v1/auth endpoints"""

    def test_register_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = UserResponse(
            id="usr-1",
            full_name="Test User",
            email="test@example.com",
            role="publisher",
        )
        response = client.post(
            "/api/v1/auth/register",
            json={
                "full_name": "Test User",
                "email": "test@example.com",
                "password": "password123",
                "role": "publisher",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "test@example.com"
        assert data["role"] == "publisher"

    def test_register_as_admin_is_rejected(self, client, mock_register_use_case):
        response = client.post(
            "/api/v1/auth/register",
            json={
                "full_name": "Sneaky",
                "email": "sneaky@example.com",
                "password": "password123",
                "role": "admin",
            },
        )
        assert response.status_code == 400
        assert response.json()["success"] is False
        mock_register_use_case.execute.assert_not_called()

    def test_register_duplicate_returns_400(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = ConflictError(
            "User with this email already exists"
        )
        response = client.post(
            "/api/v1/auth/register",
            json={
                "full_name": "Test",
                "email": "existing@example.com",
                "password": "password123",
            },
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "User with this email already exists"}

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = TokenResponse(
            access_token="jwt.token.here"
        )
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["access_token"] == "jwt.token.here"
        assert data["token_type"] == "bearer"

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = None
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "wrongpass123"},
        )
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_me_requires_token(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Not authorized to access this route"}

    def test_me_with_invalid_token(self, client, mock_current_user_use_case):
        mock_current_user_use_case.execute.side_effect = UnauthorizedError("Invalid or expired token")
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer bad.token"})
        assert response.status_code == 401

    def test_me_returns_current_user(self, client, mock_current_user_use_case):
        mock_current_user_use_case.execute.return_value = UserResponse(
            id="usr-1", full_name="Test User", email="test@example.com", role="user"
        )
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer good.token"})
        assert response.status_code == 200
        assert response.json()["id"] == "usr-1"
        mock_current_user_use_case.execute.assert_awaited_once_with("good.token")
