# Standard library imports
import logging

# Local application imports
from ....domain.repositories.bootcamp_repository import BootcampRepository
from ....domain.exceptions import NotFoundError
from ...dto.bootcamp_dto import BootcampUpdateRequest, BootcampResponse
from ...dto.user_dto import UserResponse
from .authorization import ensure_can_modify
from .mappers import to_bootcamp_response

logger = logging.getLogger(__name__)


class UpdateBootcampUseCase:
    """Use case for updating a bootcamp"""

    def __init__(self, bootcamp_repository: BootcampRepository) -> None:
        self.bootcamp_repository = bootcamp_repository

    async def execute(
        self,
        bootcamp_id: str,
        request: BootcampUpdateRequest,
        current_user: UserResponse,
    ) -> BootcampResponse:
        """
        Apply the fields sent by the client to a bootcamp

        Raises:
            NotFoundError: If the bootcamp does not exist
            OwnershipError: If the caller is neither owner nor admin
        """
        bootcamp = await self.bootcamp_repository.find_by_id(bootcamp_id)
        if bootcamp is None:
            raise NotFoundError(f"Bootcamp not found with id of {bootcamp_id}")

        ensure_can_modify(bootcamp, current_user, "update")

        fields = request.model_dump(exclude_unset=True)
        updated = await self.bootcamp_repository.update_fields(bootcamp_id, fields)
        if updated is None:
            # Deleted between the lookup and the update
            raise NotFoundError(f"Bootcamp not found with id of {bootcamp_id}")

        logger.info(f"User {current_user.id} updated bootcamp {bootcamp_id}: {sorted(fields)}")
        return to_bootcamp_response(updated)
