# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.bootcamp_repository import BootcampRepository
from ....domain.constants import BootcampFields
from ....domain.exceptions import BadRequestError, NotFoundError
from ....infrastructure.storage.local_photo_storage import LocalPhotoStorage, UploadedFile
from ...dto.user_dto import UserResponse
from .authorization import ensure_can_modify

logger = logging.getLogger(__name__)


class UploadBootcampPhotoUseCase:
    """Use case for attaching a photo to a bootcamp"""

    def __init__(
        self,
        bootcamp_repository: BootcampRepository,
        photo_storage: LocalPhotoStorage,
    ) -> None:
        self.bootcamp_repository = bootcamp_repository
        self.photo_storage = photo_storage

    async def execute(
        self,
        bootcamp_id: str,
        upload: Optional[UploadedFile],
        current_user: UserResponse,
    ) -> str:
        """
        Validate and store a bootcamp photo as photo_<id><ext>

        Args:
            bootcamp_id: Bootcamp receiving the photo
            upload: File sent by the client (None if missing)
            current_user: Authenticated caller

        Returns:
            Stored photo file name

        Raises:
            NotFoundError: If the bootcamp does not exist
            OwnershipError: If the caller is neither owner nor admin
            BadRequestError: If the file is missing, not an image or too large
            InternalError: If the file cannot be written
        """
        bootcamp = await self.bootcamp_repository.find_by_id(bootcamp_id)
        if bootcamp is None:
            raise NotFoundError(f"Bootcamp not found with id of {bootcamp_id}")

        ensure_can_modify(bootcamp, current_user, "update")

        if upload is None or not upload.filename:
            raise BadRequestError("Please upload a file")

        if not (upload.content_type or "").startswith("image"):
            raise BadRequestError("Please upload an image file")

        max_bytes = self.photo_storage.max_bytes
        if upload.size is not None and upload.size > max_bytes:
            raise BadRequestError(f"Please upload an image less than {max_bytes} bytes")

        filename = await self.photo_storage.save(upload, bootcamp.photo_filename(upload.filename))

        updated = await self.bootcamp_repository.update_fields(
            bootcamp_id, {BootcampFields.PHOTO: filename}
        )
        if updated is None:
            raise NotFoundError(f"Bootcamp not found with id of {bootcamp_id}")

        logger.info(f"Stored photo {filename} for bootcamp {bootcamp_id}")
        return filename
