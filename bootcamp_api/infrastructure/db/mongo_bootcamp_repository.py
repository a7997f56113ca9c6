# Standard library imports
import logging
from dataclasses import asdict
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.bootcamp_repository import BootcampRepository, SortSpec
from ...domain.models.bootcamp import Bootcamp, GeoLocation, DEFAULT_PHOTO
from ...domain.constants import BootcampFields, LocationFields
from ...domain.exceptions import BadRequestError, DatabaseError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_bootcamp_collection

logger = logging.getLogger(__name__)

DUPLICATE_FIELD_MESSAGE = "Duplicate field value entered"


def _to_object_id(bootcamp_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(bootcamp_id)
    except (InvalidId, TypeError):
        return None


class MongoBootcampRepository(BootcampRepository):
    """MongoDB implementation of BootcampRepository"""

    def __init__(self, bootcamp_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.bootcamp_collection = (
            bootcamp_collection if bootcamp_collection is not None else get_bootcamp_collection()
        )

    async def find_by_id(self, bootcamp_id: str) -> Optional[Bootcamp]:
        """Find bootcamp by ID; malformed IDs are treated as not found"""
        object_id = _to_object_id(bootcamp_id)
        if object_id is None:
            return None

        try:
            document = await self.bootcamp_collection.find_one({BootcampFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding bootcamp {bootcamp_id}: {e}")
            raise DatabaseError(f"Error finding bootcamp by ID: {str(e)}")

        return self._document_to_bootcamp(document) if document else None

    async def find_by_owner(self, user_id: str) -> Optional[Bootcamp]:
        """Find the first bootcamp published by a user"""
        if not user_id:
            return None

        try:
            document = await self.bootcamp_collection.find_one({BootcampFields.USER: user_id})
        except PyMongoError as e:
            logger.error(f"Error finding bootcamp for owner {user_id}: {e}")
            raise DatabaseError(f"Error finding bootcamp for owner: {str(e)}")

        return self._document_to_bootcamp(document) if document else None

    async def find_many(
        self,
        filters: Dict[str, Any],
        sort: SortSpec = (),
        skip: int = 0,
        limit: int = 0,
    ) -> List[Bootcamp]:
        """Find bootcamps matching a filter document, optionally sorted and paged"""
        try:
            cursor = self.bootcamp_collection.find(filters)
            if sort:
                cursor = cursor.sort(list(sort))
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)

            bootcamps = []
            async for document in cursor:
                bootcamps.append(self._document_to_bootcamp(document))
            return bootcamps
        except PyMongoError as e:
            logger.error(f"Error listing bootcamps with filter {filters}: {e}")
            raise DatabaseError(f"Error listing bootcamps: {str(e)}")

    async def count(self, filters: Dict[str, Any]) -> int:
        try:
            return await self.bootcamp_collection.count_documents(filters)
        except PyMongoError as e:
            logger.error(f"Error counting bootcamps with filter {filters}: {e}")
            raise DatabaseError(f"Error counting bootcamps: {str(e)}")

    async def find_within_radius(
        self,
        longitude: float,
        latitude: float,
        radius: float,
    ) -> List[Bootcamp]:
        """
        Find bootcamps whose location lies within a spherical cap

        Args:
            longitude: Center longitude
            latitude: Center latitude
            radius: Angular radius in radians

        Returns:
            List of Bootcamp domain models
        """
        return await self.find_many({
            BootcampFields.LOCATION: {
                "$geoWithin": {"$centerSphere": [[longitude, latitude], radius]}
            }
        })

    async def save(self, bootcamp: Bootcamp) -> Bootcamp:
        """
        Save bootcamp (create new or replace existing)

        Raises:
            BadRequestError: If a unique field (name) is already taken
            DatabaseError: On any other driver failure
        """
        bootcamp_dict = self._bootcamp_to_dict(bootcamp)

        try:
            object_id = _to_object_id(bootcamp.id) if bootcamp.id else None
            if object_id is not None:
                document = await self.bootcamp_collection.find_one_and_update(
                    {BootcampFields.MONGO_ID: object_id},
                    {"$set": bootcamp_dict},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                result = await self.bootcamp_collection.insert_one(bootcamp_dict)
                document = await self.bootcamp_collection.find_one({BootcampFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError:
            raise BadRequestError(DUPLICATE_FIELD_MESSAGE)
        except PyMongoError as e:
            logger.error(f"Error saving bootcamp '{bootcamp.name}': {e}")
            raise DatabaseError(f"Error saving bootcamp: {str(e)}")

        if document is None:
            raise DatabaseError("Bootcamp was saved but could not be retrieved")
        return self._document_to_bootcamp(document)

    async def update_fields(self, bootcamp_id: str, fields: Dict[str, Any]) -> Optional[Bootcamp]:
        """Set the given fields; returns None if the bootcamp does not exist"""
        object_id = _to_object_id(bootcamp_id)
        if object_id is None:
            return None

        if not fields:
            return await self.find_by_id(bootcamp_id)

        try:
            document = await self.bootcamp_collection.find_one_and_update(
                {BootcampFields.MONGO_ID: object_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise BadRequestError(DUPLICATE_FIELD_MESSAGE)
        except PyMongoError as e:
            logger.error(f"Error updating bootcamp {bootcamp_id}: {e}")
            raise DatabaseError(f"Error updating bootcamp: {str(e)}")

        return self._document_to_bootcamp(document) if document else None

    async def delete(self, bootcamp_id: str) -> bool:
        object_id = _to_object_id(bootcamp_id)
        if object_id is None:
            return False

        try:
            result = await self.bootcamp_collection.delete_one({BootcampFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error deleting bootcamp {bootcamp_id}: {e}")
            raise DatabaseError(f"Error deleting bootcamp: {str(e)}")

        return result.deleted_count > 0

    def _document_to_bootcamp(self, document: Dict[str, Any]) -> Bootcamp:
        """Convert MongoDB document to Bootcamp domain model"""
        location = None
        location_doc = document.get(BootcampFields.LOCATION)
        if location_doc and location_doc.get(LocationFields.COORDINATES):
            location = GeoLocation(
                coordinates=list(location_doc[LocationFields.COORDINATES]),
                type=location_doc.get(LocationFields.TYPE, "Point"),
                formatted_address=location_doc.get(LocationFields.FORMATTED_ADDRESS),
                street=location_doc.get(LocationFields.STREET),
                city=location_doc.get(LocationFields.CITY),
                state=location_doc.get(LocationFields.STATE),
                zipcode=location_doc.get(LocationFields.ZIPCODE),
                country=location_doc.get(LocationFields.COUNTRY),
            )

        return Bootcamp(
            id=str(document[BootcampFields.MONGO_ID]),
            user=str(document.get(BootcampFields.USER, "")),
            name=document.get(BootcampFields.NAME, ""),
            description=document.get(BootcampFields.DESCRIPTION, ""),
            address=document.get(BootcampFields.ADDRESS),
            slug=document.get(BootcampFields.SLUG),
            website=document.get(BootcampFields.WEBSITE),
            phone=document.get(BootcampFields.PHONE),
            email=document.get(BootcampFields.EMAIL),
            location=location,
            careers=list(document.get(BootcampFields.CAREERS, [])),
            average_rating=document.get(BootcampFields.AVERAGE_RATING),
            average_cost=document.get(BootcampFields.AVERAGE_COST),
            photo=document.get(BootcampFields.PHOTO, DEFAULT_PHOTO),
            housing=document.get(BootcampFields.HOUSING, False),
            job_assistance=document.get(BootcampFields.JOB_ASSISTANCE, False),
            job_guarantee=document.get(BootcampFields.JOB_GUARANTEE, False),
            accept_gi=document.get(BootcampFields.ACCEPT_GI, False),
            created_at=ensure_utc(document.get(BootcampFields.CREATED_AT)),
        )

    def _bootcamp_to_dict(self, bootcamp: Bootcamp) -> Dict[str, Any]:
        """Convert Bootcamp domain model to MongoDB document (without _id)"""
        return {
            BootcampFields.USER: bootcamp.user,
            BootcampFields.NAME: bootcamp.name,
            BootcampFields.SLUG: bootcamp.slug,
            BootcampFields.DESCRIPTION: bootcamp.description,
            BootcampFields.WEBSITE: bootcamp.website,
            BootcampFields.PHONE: bootcamp.phone,
            BootcampFields.EMAIL: bootcamp.email,
            BootcampFields.ADDRESS: bootcamp.address,
            BootcampFields.LOCATION: asdict(bootcamp.location) if bootcamp.location else None,
            BootcampFields.CAREERS: list(bootcamp.careers),
            BootcampFields.AVERAGE_RATING: bootcamp.average_rating,
            BootcampFields.AVERAGE_COST: bootcamp.average_cost,
            BootcampFields.PHOTO: bootcamp.photo,
            BootcampFields.HOUSING: bootcamp.housing,
            BootcampFields.JOB_ASSISTANCE: bootcamp.job_assistance,
            BootcampFields.JOB_GUARANTEE: bootcamp.job_guarantee,
            BootcampFields.ACCEPT_GI: bootcamp.accept_gi,
            BootcampFields.CREATED_AT: bootcamp.created_at,
        }
