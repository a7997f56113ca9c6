"""Utility modules for the bootcamp API."""

from .datetime_utils import utc_now, ensure_utc
from .geo import distance_to_radians, EARTH_RADIUS
from .text_utils import slugify

__all__ = [
    "utc_now",
    "ensure_utc",
    "distance_to_radians",
    "EARTH_RADIUS",
    "slugify",
]
