"""
Unit tests for auth use cases (Login, Register, GetCurrentUser).
"""
from unittest.mock import AsyncMock

import pytest
from bootcamp_api.core.security import create_jwt_token, decode_jwt_token, hash_password
from bootcamp_api.application.use_cases.auth.login_user import LoginUserUseCase
from bootcamp_api.application.use_cases.auth.register_user import RegisterUserUseCase
from bootcamp_api.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from bootcamp_api.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest, TokenResponse
from bootcamp_api.domain.exceptions import ConflictError, UnauthorizedError
from bootcamp_api.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings):
        user = User(
            id="usr-123",
            full_name="Test User",
            email="test@example.com",
            hashed_password=hash_password("validpass123"),
            role="publisher",
        )
        mock_user_repo.find_by_email.return_value = user

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="validpass123")
        )
        assert isinstance(result, TokenResponse)
        claims = decode_jwt_token(result.access_token)
        assert claims["sub"] == "usr-123"
        assert claims["role"] == "publisher"

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="unknown@example.com", password="anypass123")
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, mock_settings):
        user = User(
            id="usr-1",
            full_name="Test",
            email="test@example.com",
            hashed_password=hash_password("correctpass"),
        )
        mock_user_repo.find_by_email.return_value = user

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="wrongpassword")
        )
        assert result is None


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id="usr-new",
            full_name=user.full_name,
            email=user.email,
            hashed_password=user.hashed_password,
            role=user.role,
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserRegistrationRequest(
                full_name="New User",
                email="new@example.com",
                password="password123",
                role="publisher",
            )
        )
        assert result.id == "usr-new"
        assert result.email == "new@example.com"
        assert result.role == "publisher"

        saved = mock_user_repo.save.call_args.args[0]
        assert saved.id is None
        assert saved.hashed_password != "password123"

    @pytest.mark.asyncio
    async def test_register_defaults_to_user_role(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id="usr-2",
            full_name=user.full_name,
            email=user.email,
            hashed_password=user.hashed_password,
            role=user.role,
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserRegistrationRequest(full_name="Plain", email="plain@example.com", password="password123")
        )
        assert result.role == "user"

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self, mock_user_repo):
        existing = User(
            id="usr-1",
            full_name="Existing",
            email="existing@example.com",
            hashed_password="hash",
        )
        mock_user_repo.find_by_email.return_value = existing

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError, match="already exists"):
            await use_case.execute(
                UserRegistrationRequest(
                    full_name="Duplicate",
                    email="existing@example.com",
                    password="password123",
                )
            )
        mock_user_repo.save.assert_not_called()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_current_user_success(self, mock_user_repo, mock_settings):
        token = create_jwt_token("usr-123", {"email": "user@example.com", "role": "user"})
        user = User(
            id="usr-123",
            full_name="Current User",
            email="user@example.com",
            hashed_password="hash",
            role="admin",
        )
        mock_user_repo.find_by_id.return_value = user

        use_case = GetCurrentUserUseCase(mock_user_repo)
        result = await use_case.execute(token)
        assert result.id == "usr-123"
        # Role comes from the stored user, not the token
        assert result.role == "admin"
        mock_user_repo.find_by_id.assert_awaited_once_with("usr-123")

    @pytest.mark.asyncio
    async def test_get_current_user_invalid_token_raises(self, mock_user_repo, mock_settings):
        use_case = GetCurrentUserUseCase(mock_user_repo)
        with pytest.raises(UnauthorizedError, match="Invalid"):
            await use_case.execute("invalid.jwt.token")

    @pytest.mark.asyncio
    async def test_get_current_user_not_found_raises(self, mock_user_repo, mock_settings):
        token = create_jwt_token("nonexistent", {"email": "x@x.com"})
        mock_user_repo.find_by_id.return_value = None

        use_case = GetCurrentUserUseCase(mock_user_repo)
        with pytest.raises(UnauthorizedError, match="User not found"):
            await use_case.execute(token)
