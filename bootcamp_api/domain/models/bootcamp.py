# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePath
from typing import List, Optional

DEFAULT_PHOTO = "no-photo.jpg"

CAREERS = (
    "Web Development",
    "Mobile Development",
    "UI/UX",
    "Data Science",
    "Business",
    "Other",
)


@dataclass
class GeoLocation:
    """
    GeoJSON point plus the address parts returned by the geocoder.

    Coordinates are stored in GeoJSON order: [longitude, latitude].
    """
    coordinates: List[float]
    type: str = "Point"
    formatted_address: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None

    def __post_init__(self) -> None:
        if len(self.coordinates) != 2:
            raise ValueError("Location coordinates must be [longitude, latitude]")

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


@dataclass
class Bootcamp:
    """
    Pure domain model for Bootcamp entity.

    A bootcamp is published by one user (its owner). Non-admin users may
    own at most one bootcamp; that rule is enforced by CreateBootcampUseCase.
    """
    id: Optional[str]
    user: str  # owner user ID
    name: str
    description: str
    address: Optional[str] = None
    slug: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    location: Optional[GeoLocation] = None
    careers: List[str] = field(default_factory=list)
    average_rating: Optional[float] = None
    average_cost: Optional[float] = None
    photo: str = DEFAULT_PHOTO
    housing: bool = False
    job_assistance: bool = False
    job_guarantee: bool = False
    accept_gi: bool = False
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user:
            raise ValueError("Owner user ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Bootcamp name is required")
        if not self.description:
            raise ValueError("Bootcamp description is required")
        unknown = [career for career in self.careers if career not in CAREERS]
        if unknown:
            raise ValueError(f"Invalid careers: {', '.join(unknown)}")

    def is_owned_by(self, user_id: str) -> bool:
        return str(self.user) == str(user_id)

    def photo_filename(self, original_filename: str) -> str:
        """Name an uploaded photo after this bootcamp, keeping the upload's extension."""
        return f"photo_{self.id}{PurePath(original_filename).suffix}"
