from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .bootcamp_dto import (
    BootcampCreateRequest,
    BootcampUpdateRequest,
    BootcampResponse,
    BootcampEnvelope,
    BootcampListResponse,
    BootcampRadiusResponse,
    DeleteResponse,
    LocationResponse,
    PageRef,
    PhotoUploadResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "BootcampCreateRequest",
    "BootcampUpdateRequest",
    "BootcampResponse",
    "BootcampEnvelope",
    "BootcampListResponse",
    "BootcampRadiusResponse",
    "DeleteResponse",
    "LocationResponse",
    "PageRef",
    "PhotoUploadResponse",
]
