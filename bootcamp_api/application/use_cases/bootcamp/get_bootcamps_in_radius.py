# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.bootcamp_repository import BootcampRepository
from ....domain.exceptions import BadRequestError, NotFoundError
from ....infrastructure.external.geocoder_client import GeocoderClient
from ....utils.geo import DEFAULT_UNIT, distance_to_radians
from ...dto.bootcamp_dto import BootcampResponse
from .mappers import to_bootcamp_response

logger = logging.getLogger(__name__)


class GetBootcampsInRadiusUseCase:
    """Use case for finding bootcamps within a distance of a postal code"""

    def __init__(
        self,
        bootcamp_repository: BootcampRepository,
        geocoder: GeocoderClient,
    ) -> None:
        self.bootcamp_repository = bootcamp_repository
        self.geocoder = geocoder

    async def execute(
        self,
        zipcode: str,
        distance: float,
        unit: str = DEFAULT_UNIT,
    ) -> List[BootcampResponse]:
        """
        Geocode a postal code and return bootcamps inside the circle around it

        Args:
            zipcode: Postal code at the center of the search
            distance: Search radius, in `unit`
            unit: "mi" (default) or "km"

        Raises:
            BadRequestError: If the distance or unit is invalid
            NotFoundError: If the postal code cannot be geocoded
        """
        try:
            radius = distance_to_radians(distance, unit)
        except ValueError as exception:
            raise BadRequestError(str(exception))

        matches = await self.geocoder.geocode_postal_code(zipcode)
        if not matches:
            raise NotFoundError(f"Could not find a location for zipcode {zipcode}")

        center = matches[0]
        bootcamps = await self.bootcamp_repository.find_within_radius(
            longitude=center.longitude,
            latitude=center.latitude,
            radius=radius,
        )

        logger.info(
            f"Found {len(bootcamps)} bootcamp(s) within {distance}{unit} of {zipcode} "
            f"({center.latitude}, {center.longitude})"
        )
        return [to_bootcamp_response(bootcamp) for bootcamp in bootcamps]
