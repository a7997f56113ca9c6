"""Constants for domain model field names"""

from .user_fields import UserFields, UserRoles
from .bootcamp_fields import BootcampFields, LocationFields

__all__ = [
    "UserFields",
    "UserRoles",
    "BootcampFields",
    "LocationFields",
]
