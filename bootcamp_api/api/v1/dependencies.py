# Standard library imports
from typing import Callable, Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...domain.exceptions import ForbiddenError, UnauthorizedError
from ...di.container import get_container


security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Raises:
        UnauthorizedError: If the bearer token is missing or invalid
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authorized to access this route")

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(credentials.credentials)


def require_roles(*roles: str) -> Callable:
    """
    Build a dependency that lets only the given roles through

    Usage:
        current_user: UserResponse = Depends(require_roles("publisher", "admin"))
    """

    async def role_guard(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
        if current_user.role not in roles:
            raise ForbiddenError(
                f"User role {current_user.role} is not authorized to access this route"
            )
        return current_user

    return role_guard
