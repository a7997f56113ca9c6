# Standard library imports
import logging

# Local application imports
from ....domain.repositories.bootcamp_repository import BootcampRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse
from .authorization import ensure_can_modify

logger = logging.getLogger(__name__)


class DeleteBootcampUseCase:
    """Use case for deleting a bootcamp"""

    def __init__(self, bootcamp_repository: BootcampRepository) -> None:
        self.bootcamp_repository = bootcamp_repository

    async def execute(self, bootcamp_id: str, current_user: UserResponse) -> None:
        """
        Delete a bootcamp

        Raises:
            NotFoundError: If the bootcamp does not exist
            OwnershipError: If the caller is neither owner nor admin
        """
        bootcamp = await self.bootcamp_repository.find_by_id(bootcamp_id)
        if bootcamp is None:
            raise NotFoundError(f"Bootcamp not found with id of {bootcamp_id}")

        ensure_can_modify(bootcamp, current_user, "delete")

        if not await self.bootcamp_repository.delete(bootcamp_id):
            raise NotFoundError(f"Bootcamp not found with id of {bootcamp_id}")

        logger.info(f"User {current_user.id} deleted bootcamp {bootcamp_id}")
