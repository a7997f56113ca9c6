# Local application imports
from ....domain.repositories.bootcamp_repository import BootcampRepository
from ....domain.exceptions import NotFoundError
from ...dto.bootcamp_dto import BootcampResponse
from .mappers import to_bootcamp_response


class GetBootcampUseCase:
    """Use case for getting a bootcamp by ID"""

    def __init__(self, bootcamp_repository: BootcampRepository) -> None:
        self.bootcamp_repository = bootcamp_repository

    async def execute(self, bootcamp_id: str) -> BootcampResponse:
        """
        Get a bootcamp by ID

        Raises:
            NotFoundError: If no bootcamp has this ID
        """
        bootcamp = await self.bootcamp_repository.find_by_id(bootcamp_id)
        if bootcamp is None:
            raise NotFoundError(f"Bootcamp not found with id of {bootcamp_id}")
        return to_bootcamp_response(bootcamp)
