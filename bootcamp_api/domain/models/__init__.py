from .user import User
from .bootcamp import Bootcamp, GeoLocation, CAREERS, DEFAULT_PHOTO

__all__ = ["User", "Bootcamp", "GeoLocation", "CAREERS", "DEFAULT_PHOTO"]
