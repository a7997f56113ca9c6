# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if the plain password matches the bcrypt hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed hash stored for the user
        return False


def create_jwt_token(subject: str, claims: Optional[Dict[str, Any]] = None) -> str:
    """
    Create a signed access token for a user

    Args:
        subject: User ID stored in the standard "sub" claim
        claims: Extra claims to embed (e.g. email, role)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **(claims or {}),
        "sub": subject,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is invalid, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
