from .mongo_connection import (
    get_database,
    get_user_collection,
    get_bootcamp_collection,
    ensure_indexes,
    close_database,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_bootcamp_repository import MongoBootcampRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_bootcamp_collection",
    "ensure_indexes",
    "close_database",
    "MongoUserRepository",
    "MongoBootcampRepository",
]
