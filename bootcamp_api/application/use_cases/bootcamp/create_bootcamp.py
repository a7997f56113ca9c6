# Standard library imports
import logging

# Local application imports
from ....domain.repositories.bootcamp_repository import BootcampRepository
from ....domain.models.bootcamp import Bootcamp
from ....domain.exceptions import BadRequestError, ConflictError
from ....infrastructure.external.geocoder_client import GeocoderClient
from ....utils.datetime_utils import utc_now
from ....utils.text_utils import slugify
from ...dto.bootcamp_dto import BootcampCreateRequest, BootcampResponse
from ...dto.user_dto import UserResponse
from .mappers import to_bootcamp_response

logger = logging.getLogger(__name__)


class CreateBootcampUseCase:
    """Use case for publishing a new bootcamp"""

    def __init__(
        self,
        bootcamp_repository: BootcampRepository,
        geocoder: GeocoderClient,
    ) -> None:
        self.bootcamp_repository = bootcamp_repository
        self.geocoder = geocoder

    async def execute(
        self,
        request: BootcampCreateRequest,
        current_user: UserResponse,
    ) -> BootcampResponse:
        """
        Create a new bootcamp owned by the current user

        Args:
            request: Bootcamp creation request
            current_user: Authenticated caller; becomes the owner

        Returns:
            BootcampResponse with the stored bootcamp

        Raises:
            ConflictError: If a non-admin caller already published a bootcamp
            BadRequestError: If the address cannot be geocoded or the name is taken
        """
        published = await self.bootcamp_repository.find_by_owner(current_user.id)
        if published is not None and not current_user.is_admin:
            logger.warning(
                f"User {current_user.id} tried to publish a second bootcamp (has {published.id})"
            )
            raise ConflictError(
                f"The user with id of {current_user.id} has already published a bootcamp"
            )

        matches = await self.geocoder.geocode(request.address)
        if not matches:
            raise BadRequestError(f"Could not geocode address '{request.address}'")

        new_bootcamp = Bootcamp(
            id=None,  # Will be set by repository
            user=current_user.id,
            name=request.name,
            slug=slugify(request.name),
            description=request.description,
            website=request.website,
            phone=request.phone,
            email=request.email,
            address=request.address,
            location=matches[0].to_location(),
            careers=list(request.careers),
            housing=request.housing,
            job_assistance=request.job_assistance,
            job_guarantee=request.job_guarantee,
            accept_gi=request.accept_gi,
            created_at=utc_now(),
        )

        saved = await self.bootcamp_repository.save(new_bootcamp)
        logger.info(f"User {current_user.id} published bootcamp {saved.id} ('{saved.name}')")
        return to_bootcamp_response(saved)
