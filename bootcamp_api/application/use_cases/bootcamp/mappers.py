# Local application imports
from ....domain.models.bootcamp import Bootcamp
from ...dto.bootcamp_dto import BootcampResponse, LocationResponse


def to_bootcamp_response(bootcamp: Bootcamp) -> BootcampResponse:
    """Convert Bootcamp domain model to response DTO"""
    location = None
    if bootcamp.location is not None:
        location = LocationResponse(
            type=bootcamp.location.type,
            coordinates=list(bootcamp.location.coordinates),
            formatted_address=bootcamp.location.formatted_address,
            street=bootcamp.location.street,
            city=bootcamp.location.city,
            state=bootcamp.location.state,
            zipcode=bootcamp.location.zipcode,
            country=bootcamp.location.country,
        )

    return BootcampResponse(
        id=bootcamp.id or "",
        user=bootcamp.user,
        name=bootcamp.name,
        slug=bootcamp.slug,
        description=bootcamp.description,
        website=bootcamp.website,
        phone=bootcamp.phone,
        email=bootcamp.email,
        address=bootcamp.address,
        location=location,
        careers=list(bootcamp.careers),
        average_rating=bootcamp.average_rating,
        average_cost=bootcamp.average_cost,
        photo=bootcamp.photo,
        housing=bootcamp.housing,
        job_assistance=bootcamp.job_assistance,
        job_guarantee=bootcamp.job_guarantee,
        accept_gi=bootcamp.accept_gi,
        created_at=bootcamp.created_at,
    )
