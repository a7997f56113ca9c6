# Standard library imports
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

Career = Literal[
    "Web Development",
    "Mobile Development",
    "UI/UX",
    "Data Science",
    "Business",
    "Other",
]

URL_PATTERN = r"^https?://\S+$"


class BootcampCreateRequest(BaseModel):
    """DTO for bootcamp creation request (owner comes from the token, never the body)"""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, max_length=50)
    description: str = Field(min_length=1, max_length=500)
    address: str = Field(min_length=1)
    careers: List[Career] = Field(min_length=1)
    website: Optional[str] = Field(default=None, pattern=URL_PATTERN)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None
    housing: bool = False
    job_assistance: bool = False
    job_guarantee: bool = False
    accept_gi: bool = False


class BootcampUpdateRequest(BaseModel):
    """
    DTO for bootcamp update request.

    Only fields the client sends are applied. Owner, photo, slug and the
    computed averages are not writable and are ignored if present.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    address: Optional[str] = Field(default=None, min_length=1)
    careers: Optional[List[Career]] = Field(default=None, min_length=1)
    website: Optional[str] = Field(default=None, pattern=URL_PATTERN)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None
    housing: Optional[bool] = None
    job_assistance: Optional[bool] = None
    job_guarantee: Optional[bool] = None
    accept_gi: Optional[bool] = None

    @field_validator(
        "name", "description", "address", "careers",
        "housing", "job_assistance", "job_guarantee", "accept_gi",
    )
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        # Omit a field to leave it unchanged; only website, phone and email may be cleared
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class LocationResponse(BaseModel):
    """GeoJSON point with formatted address parts"""
    type: str = "Point"
    coordinates: List[float]
    formatted_address: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None


class BootcampResponse(BaseModel):
    """DTO for bootcamp response"""
    id: str
    user: str
    name: str
    slug: Optional[str] = None
    description: str
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    location: Optional[LocationResponse] = None
    careers: List[str] = []
    average_rating: Optional[float] = None
    average_cost: Optional[float] = None
    photo: str
    housing: bool = False
    job_assistance: bool = False
    job_guarantee: bool = False
    accept_gi: bool = False
    created_at: Optional[datetime] = None


class BootcampEnvelope(BaseModel):
    """Single-record response envelope"""
    success: bool = True
    data: BootcampResponse


class PageRef(BaseModel):
    page: int
    limit: int


class BootcampListResponse(BaseModel):
    """
    Advanced-results envelope for list queries.

    Items are plain dicts because `select` may trim them to a subset of
    BootcampResponse fields.
    """
    success: bool = True
    count: int
    pagination: Dict[str, PageRef] = {}  # "next" and/or "prev", only when such a page exists
    data: List[Dict[str, Any]]


class BootcampRadiusResponse(BaseModel):
    """Radius query response envelope"""
    success: bool = True
    count: int
    data: List[BootcampResponse]


class PhotoUploadResponse(BaseModel):
    """Photo upload response: data is the stored filename"""
    success: bool = True
    data: str


class DeleteResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any] = {}
