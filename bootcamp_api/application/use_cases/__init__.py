from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .bootcamp import (
    ListBootcampsUseCase,
    GetBootcampUseCase,
    CreateBootcampUseCase,
    UpdateBootcampUseCase,
    DeleteBootcampUseCase,
    GetBootcampsInRadiusUseCase,
    UploadBootcampPhotoUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ListBootcampsUseCase",
    "GetBootcampUseCase",
    "CreateBootcampUseCase",
    "UpdateBootcampUseCase",
    "DeleteBootcampUseCase",
    "GetBootcampsInRadiusUseCase",
    "UploadBootcampPhotoUseCase",
]
