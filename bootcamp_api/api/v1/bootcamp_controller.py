# Standard library imports
from typing import Literal, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Path, Query, Request, UploadFile, status

# Local application imports
from ...application.dto.bootcamp_dto import (
    BootcampCreateRequest,
    BootcampEnvelope,
    BootcampListResponse,
    BootcampRadiusResponse,
    BootcampUpdateRequest,
    DeleteResponse,
    PhotoUploadResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.services.advanced_query import parse_advanced_query
from ...application.use_cases.bootcamp import (
    CreateBootcampUseCase,
    DeleteBootcampUseCase,
    GetBootcampUseCase,
    GetBootcampsInRadiusUseCase,
    ListBootcampsUseCase,
    UpdateBootcampUseCase,
    UploadBootcampPhotoUseCase,
)
from ...domain.constants import UserRoles
from ...di.container import get_container
from .dependencies import require_roles


router = APIRouter(tags=["bootcamps"])

publisher_or_admin = require_roles(UserRoles.PUBLISHER, UserRoles.ADMIN)


@router.get("", response_model=BootcampListResponse)
async def get_bootcamps(request: Request) -> BootcampListResponse:
    """
    List bootcamps

    Supports field filters with gt/gte/lt/lte/in operators, select, sort,
    page and limit query parameters.

    Access: public
    """
    query = parse_advanced_query(dict(request.query_params))

    container = get_container()
    list_bootcamps_use_case = container.get(ListBootcampsUseCase)
    return await list_bootcamps_use_case.execute(query)


@router.get("/radius/{zipcode}/{distance}", response_model=BootcampRadiusResponse)
async def get_bootcamps_in_radius(
    zipcode: str,
    distance: float = Path(..., ge=0),
    unit: Literal["mi", "km"] = Query("mi"),
) -> BootcampRadiusResponse:
    """
    Get bootcamps within a distance of a postal code

    Access: public
    """
    container = get_container()
    radius_use_case = container.get(GetBootcampsInRadiusUseCase)

    bootcamps = await radius_use_case.execute(zipcode=zipcode, distance=distance, unit=unit)
    return BootcampRadiusResponse(count=len(bootcamps), data=bootcamps)


@router.get("/{bootcamp_id}", response_model=BootcampEnvelope)
async def get_bootcamp(bootcamp_id: str) -> BootcampEnvelope:
    """
    Get a single bootcamp

    Access: public
    """
    container = get_container()
    get_bootcamp_use_case = container.get(GetBootcampUseCase)
    return BootcampEnvelope(data=await get_bootcamp_use_case.execute(bootcamp_id))


@router.post("", response_model=BootcampEnvelope, status_code=status.HTTP_201_CREATED)
async def create_bootcamp(
    request: BootcampCreateRequest,
    current_user: UserResponse = Depends(publisher_or_admin),
) -> BootcampEnvelope:
    """
    Create a bootcamp owned by the current user

    Access: publisher, admin
    """
    container = get_container()
    create_bootcamp_use_case = container.get(CreateBootcampUseCase)

    bootcamp = await create_bootcamp_use_case.execute(request=request, current_user=current_user)
    return BootcampEnvelope(data=bootcamp)


@router.put("/{bootcamp_id}", response_model=BootcampEnvelope)
async def update_bootcamp(
    bootcamp_id: str,
    request: BootcampUpdateRequest,
    current_user: UserResponse = Depends(publisher_or_admin),
) -> BootcampEnvelope:
    """
    Update a bootcamp

    Access: owner or admin
    """
    container = get_container()
    update_bootcamp_use_case = container.get(UpdateBootcampUseCase)

    bootcamp = await update_bootcamp_use_case.execute(
        bootcamp_id=bootcamp_id,
        request=request,
        current_user=current_user,
    )
    return BootcampEnvelope(data=bootcamp)


@router.delete("/{bootcamp_id}", response_model=DeleteResponse)
async def delete_bootcamp(
    bootcamp_id: str,
    current_user: UserResponse = Depends(publisher_or_admin),
) -> DeleteResponse:
    """
    Delete a bootcamp

    Access: owner or admin
    """
    container = get_container()
    delete_bootcamp_use_case = container.get(DeleteBootcampUseCase)

    await delete_bootcamp_use_case.execute(bootcamp_id=bootcamp_id, current_user=current_user)
    return DeleteResponse()


@router.put("/{bootcamp_id}/photo", response_model=PhotoUploadResponse)
async def upload_bootcamp_photo(
    bootcamp_id: str,
    file: Optional[UploadFile] = File(None),
    current_user: UserResponse = Depends(publisher_or_admin),
) -> PhotoUploadResponse:
    """
    Upload a photo for a bootcamp (multipart field name: "file")

    Access: owner or admin
    """
    container = get_container()
    upload_photo_use_case = container.get(UploadBootcampPhotoUseCase)

    filename = await upload_photo_use_case.execute(
        bootcamp_id=bootcamp_id,
        upload=file,
        current_user=current_user,
    )
    return PhotoUploadResponse(data=filename)
