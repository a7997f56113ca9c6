from .list_bootcamps import ListBootcampsUseCase
from .get_bootcamp import GetBootcampUseCase
from .create_bootcamp import CreateBootcampUseCase
from .update_bootcamp import UpdateBootcampUseCase
from .delete_bootcamp import DeleteBootcampUseCase
from .get_bootcamps_in_radius import GetBootcampsInRadiusUseCase
from .upload_bootcamp_photo import UploadBootcampPhotoUseCase

__all__ = [
    "ListBootcampsUseCase",
    "GetBootcampUseCase",
    "CreateBootcampUseCase",
    "UpdateBootcampUseCase",
    "DeleteBootcampUseCase",
    "GetBootcampsInRadiusUseCase",
    "UploadBootcampPhotoUseCase",
]
