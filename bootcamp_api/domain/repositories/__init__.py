from .user_repository import UserRepository
from .bootcamp_repository import BootcampRepository

__all__ = ["UserRepository", "BootcampRepository"]
