# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, GEOSPHERE

# Local application imports
from ...core.config import get_settings
from ...domain.constants import BootcampFields, UserFields

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"MongoDB client created for database '{settings.mongo_database_name}'")
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_bootcamp_collection() -> AsyncIOMotorCollection:
    """
    Get bootcamps collection from MongoDB

    Returns:
        MongoDB collection for bootcamps
    """
    return get_database()["bootcamps"]


async def ensure_indexes() -> None:
    """
    Create the indexes the API relies on.

    - bootcamps.location: 2dsphere, for radius queries
    - bootcamps.name: unique
    - bootcamps.user: owner lookups on create
    - users.email: unique
    """
    bootcamps = get_bootcamp_collection()
    await bootcamps.create_index([(BootcampFields.LOCATION, GEOSPHERE)])
    await bootcamps.create_index([(BootcampFields.NAME, ASCENDING)], unique=True)
    await bootcamps.create_index([(BootcampFields.USER, ASCENDING)])

    users = get_user_collection()
    await users.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
    logger.info("MongoDB indexes ensured")


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        _mongo_database = None
        logger.info("Closed MongoDB client")
