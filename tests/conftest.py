"""
Shared pytest fixtures for bootcamp_api tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from bootcamp_api.application.dto.user_dto import UserResponse
from bootcamp_api.domain.models.bootcamp import Bootcamp, GeoLocation

OWNER_ID = "64b7f0c2a1b2c3d4e5f60718"
OTHER_USER_ID = "64b7f0c2a1b2c3d4e5f60799"
BOOTCAMP_ID = "5d713995b721c3bb38c1f5d0"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_devcamper",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "MAX_FILE_UPLOAD": "1000",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.max_file_upload = 1000
    mock.file_upload_path = str(tmp_path / "uploads")
    mock.geocoder_base_url = "https://geocoder.test"
    mock.geocoder_user_agent = "BootcampAPI-tests"
    mock.geocoder_country_codes = ""
    mock.geocoder_timeout = 5.0

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("bootcamp_api.core.config.get_settings", return_value=mock), patch(
        "bootcamp_api.core.security.get_settings", return_value=mock
    ), patch(
        "bootcamp_api.infrastructure.storage.local_photo_storage.get_settings", return_value=mock
    ), patch(
        "bootcamp_api.infrastructure.external.geocoder_client.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def publisher():
    return UserResponse(id=OWNER_ID, full_name="Pat Publisher", email="pat@example.com", role="publisher")


@pytest.fixture
def other_publisher():
    return UserResponse(id=OTHER_USER_ID, full_name="Olly Other", email="olly@example.com", role="publisher")


@pytest.fixture
def admin():
    return UserResponse(id="64b7f0c2a1b2c3d4e5f60000", full_name="Ada Admin", email="ada@example.com", role="admin")


@pytest.fixture
def plain_user():
    return UserResponse(id="64b7f0c2a1b2c3d4e5f61111", full_name="Uma User", email="uma@example.com", role="user")


@pytest.fixture
def bootcamp():
    """A bootcamp owned by the `publisher` fixture."""
    return Bootcamp(
        id=BOOTCAMP_ID,
        user=OWNER_ID,
        name="Devworks Bootcamp",
        slug="devworks-bootcamp",
        description="Devworks is a full stack JavaScript Bootcamp",
        address="233 Bay State Rd Boston MA 02215",
        location=GeoLocation(
            coordinates=[-71.104028, 42.350846],
            formatted_address="233 Bay State Rd, Boston, MA 02215-1405, US",
            city="Boston",
            state="MA",
            zipcode="02215",
            country="US",
        ),
        careers=["Web Development", "UI/UX", "Business"],
        housing=True,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )
